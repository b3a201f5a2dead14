"""
IntegerSettings — machine integer configuration

Immutable Pydantic model describing how wide an Integer is and what happens
when an operation produces a value outside that width.
"""

from enum import Enum
from typing import Final

from pydantic import BaseModel, Field


# =============================================================================
# CONSTANTS
# =============================================================================

# Width of a C `int`
DEFAULT_INTEGER_BITS: Final[int] = 32

MIN_INTEGER_BITS: Final[int] = 8
MAX_INTEGER_BITS: Final[int] = 64


# =============================================================================
# BOUNDS
# =============================================================================


def int_min(bits: int) -> int:
    """
    Smallest signed value of the given width.

    Examples:
        >>> int_min(8)
        -128
        >>> int_min(32)
        -2147483648
    """
    if bits <= 0:
        raise ValueError(f"bits must be positive, got {bits}")
    return -(1 << (bits - 1))


def int_max(bits: int) -> int:
    """
    Largest signed value of the given width.

    Examples:
        >>> int_max(8)
        127
        >>> int_max(32)
        2147483647
    """
    if bits <= 0:
        raise ValueError(f"bits must be positive, got {bits}")
    return (1 << (bits - 1)) - 1


# =============================================================================
# ENUMS
# =============================================================================


class OverflowPolicy(str, Enum):
    """Behaviour when a value leaves the integer range"""

    CHECKED = "checked"  # raise IntegerOverflowError
    WRAP = "wrap"  # two's complement wrap-around
    SATURATE = "saturate"  # clamp to the nearest bound


# =============================================================================
# MODELS
# =============================================================================


class IntegerSettings(BaseModel):
    """
    Integer width and overflow policy.

    Passed explicitly to arithmetic and parsing functions; None means
    DEFAULT_INTEGER_SETTINGS (32-bit, CHECKED).
    """

    bits: int = Field(
        DEFAULT_INTEGER_BITS,
        ge=MIN_INTEGER_BITS,
        le=MAX_INTEGER_BITS,
        description="Width of a signed integer in bits",
    )
    overflow_policy: OverflowPolicy = Field(
        OverflowPolicy.CHECKED,
        description="What to do with out-of-range results",
    )

    model_config = {"frozen": True, "extra": "forbid"}

    @property
    def min_value(self) -> int:
        """Smallest representable value: -2**(bits-1)"""
        return int_min(self.bits)

    @property
    def max_value(self) -> int:
        """Largest representable value: 2**(bits-1) - 1"""
        return int_max(self.bits)


DEFAULT_INTEGER_SETTINGS: Final[IntegerSettings] = IntegerSettings()
