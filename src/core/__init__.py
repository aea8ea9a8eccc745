"""
Core arithmetic engine and settings.

This module contains the foundational building blocks that are independent
of any I/O: limb storage, carry propagation, and the BigInt value type.
"""
