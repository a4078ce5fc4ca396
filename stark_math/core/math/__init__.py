"""
Core math modules для stark-math

Точная рациональная арифметика и детерминированный structural hash.
"""

# Integer Ops
from stark_math.core.math.integer_ops import (
    INT32_MAX,
    INT32_MIN,
    digits_to_int,
    int_to_digits,
    is_int32,
    mul_wrap_int32,
    trunc_div,
    trunc_mod,
    validate_int32,
    validate_integer,
    wrap_int32,
)

# Policies
from stark_math.core.math.policies import (
    DEFAULT_HASH_LIMITS,
    DEFAULT_MAX_FRACTION_DIGITS,
    DEFAULT_MAX_HASH_DEPTH,
    DEFAULT_RENDER_POLICY,
    DecimalRenderPolicy,
    HashLimits,
    OverflowAction,
)

# Rational
from stark_math.core.math.rational import (
    MINUS_ONE,
    ONE,
    ZERO,
    DecimalExpansionError,
    InvalidRationalFormat,
    RationalNumber,
    RationalZeroDivisionError,
    terminating_fraction_digits,
)

# Structural Hash
from stark_math.core.math.structural_hash import (
    DEFAULT_HASH_OFFSET,
    DEFAULT_HASH_SEED,
    CyclicStructureError,
    HashLimitExceeded,
    compute_hash,
    primitive_hash,
    record_fields,
    reduced_state,
)

__all__ = [
    # Integer Ops — Constants
    "INT32_MAX",
    "INT32_MIN",
    # Integer Ops — Functions
    "digits_to_int",
    "int_to_digits",
    "is_int32",
    "mul_wrap_int32",
    "trunc_div",
    "trunc_mod",
    "validate_int32",
    "validate_integer",
    "wrap_int32",
    # Policies
    "DEFAULT_HASH_LIMITS",
    "DEFAULT_MAX_FRACTION_DIGITS",
    "DEFAULT_MAX_HASH_DEPTH",
    "DEFAULT_RENDER_POLICY",
    "DecimalRenderPolicy",
    "HashLimits",
    "OverflowAction",
    # Rational — Constants
    "MINUS_ONE",
    "ONE",
    "ZERO",
    # Rational — Exceptions
    "DecimalExpansionError",
    "InvalidRationalFormat",
    "RationalZeroDivisionError",
    # Rational — Types
    "RationalNumber",
    "terminating_fraction_digits",
    # Structural Hash — Constants
    "DEFAULT_HASH_OFFSET",
    "DEFAULT_HASH_SEED",
    # Structural Hash — Exceptions
    "CyclicStructureError",
    "HashLimitExceeded",
    # Structural Hash — Functions
    "compute_hash",
    "primitive_hash",
    "record_fields",
    "reduced_state",
]
