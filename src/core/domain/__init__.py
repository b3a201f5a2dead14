"""
Domain models

Value types and configuration shared by all core modules.
"""

from .settings import (
    DEFAULT_INTEGER_BITS,
    DEFAULT_INTEGER_SETTINGS,
    MAX_INTEGER_BITS,
    MIN_INTEGER_BITS,
    IntegerSettings,
    OverflowPolicy,
    int_max,
    int_min,
)

__all__ = [
    # Constants
    "DEFAULT_INTEGER_BITS",
    "DEFAULT_INTEGER_SETTINGS",
    "MAX_INTEGER_BITS",
    "MIN_INTEGER_BITS",
    # Bounds
    "int_max",
    "int_min",
    # Enums
    "OverflowPolicy",
    # Models
    "IntegerSettings",
]
