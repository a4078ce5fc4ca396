"""
stark-math: точная рациональная арифметика и structural hashing.
"""

from stark_math.core.math import (
    MINUS_ONE,
    ONE,
    ZERO,
    RationalNumber,
    compute_hash,
)

__version__ = "0.1.0"

__all__ = [
    "MINUS_ONE",
    "ONE",
    "ZERO",
    "RationalNumber",
    "compute_hash",
]
