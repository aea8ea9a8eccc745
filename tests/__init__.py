"""
Test suite for limbint

Contains:
- tests/unit/          : Unit tests for individual modules
"""
