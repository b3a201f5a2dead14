"""
Core math modules

Arithmetic over signed machine integers with an explicit overflow policy.
"""

# Integer range helpers
from src.core.math.integer_range import (
    INT32_MAX,
    INT32_MIN,
    apply_overflow_policy,
    fits_in_range,
    int_max,
    int_min,
    require_integer,
    saturate_to_range,
    wrap_to_range,
)

# Arithmetic
from src.core.math.arithmetic import (
    add,
    factorial,
    multiply,
)

__all__ = [
    # Integer range — Constants
    "INT32_MAX",
    "INT32_MIN",
    # Integer range — Functions
    "apply_overflow_policy",
    "fits_in_range",
    "int_max",
    "int_min",
    "require_integer",
    "saturate_to_range",
    "wrap_to_range",
    # Arithmetic
    "add",
    "factorial",
    "multiply",
]
