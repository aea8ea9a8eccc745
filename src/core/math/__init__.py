"""
Core math modules для limbint

Арифметика целых произвольной точности на массиве 32-битных limbs.
"""

# Limbs (carry-propagation primitives)
from src.core.math.limbs import (
    DOUBLE_LIMB_BITS,
    LIMB_BASE,
    LIMB_BITS,
    MAX_DOUBLE_LIMB,
    MAX_LIMB,
    combine,
    is_limb,
    is_zero_limbs,
    split,
    trim_limbs,
    validate_limb,
)

# Errors
from src.core.math.errors import (
    BigIntError,
    DivideByZero,
    InvalidFormat,
    InvalidLimb,
)

# Comparison
from src.core.math.comparison import (
    MAGNITUDE_DIFFERS,
    Ordering,
    compare,
    compare_legacy,
)

# Decimal codec
from src.core.math.decimal_codec import (
    DECIMAL_BASE,
    format_decimal,
    write_decimal,
)

# BigInt
from src.core.math.bigint import BigInt, parse, pow2

# Snapshots
from src.core.math.snapshot import BigIntSnapshot

__all__ = [
    # Limbs — Constants
    "DOUBLE_LIMB_BITS",
    "LIMB_BASE",
    "LIMB_BITS",
    "MAX_DOUBLE_LIMB",
    "MAX_LIMB",
    # Limbs — Functions
    "combine",
    "is_limb",
    "is_zero_limbs",
    "split",
    "trim_limbs",
    "validate_limb",
    # Errors
    "BigIntError",
    "DivideByZero",
    "InvalidFormat",
    "InvalidLimb",
    # Comparison
    "MAGNITUDE_DIFFERS",
    "Ordering",
    "compare",
    "compare_legacy",
    # Decimal codec
    "DECIMAL_BASE",
    "format_decimal",
    "write_decimal",
    # BigInt
    "BigInt",
    "parse",
    "pow2",
    # Snapshots
    "BigIntSnapshot",
]
