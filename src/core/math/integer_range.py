"""
Integer Range — signed machine integer bounds and overflow policies

Python int is unbounded; the library models a signed machine integer of a
configurable width (IntegerSettings.bits, 32 by default). Every arithmetic
and parsing result passes through apply_overflow_policy before it is
returned.

CRITICAL INVARIANTS:
1. A returned Integer always lies in [int_min(bits), int_max(bits)]
2. CHECKED never alters a value: it either returns it unchanged or raises
3. WRAP is congruent to the exact result modulo 2**bits
4. SATURATE returns the bound nearest to the exact result
"""

from typing import Final

from src.core.domain.settings import (
    DEFAULT_INTEGER_SETTINGS,
    IntegerSettings,
    OverflowPolicy,
    int_max,
    int_min,
)
from src.core.errors import IntegerOverflowError
from src.utils.logging import get_logger

logger = get_logger(__name__)


# =============================================================================
# BOUNDS
# =============================================================================


INT32_MIN: Final[int] = int_min(32)
INT32_MAX: Final[int] = int_max(32)


# =============================================================================
# RANGE CHECKS AND REDUCTIONS
# =============================================================================


def fits_in_range(value: int, bits: int = 32) -> bool:
    """True if value is representable as a signed integer of `bits` bits."""
    return int_min(bits) <= value <= int_max(bits)


def wrap_to_range(value: int, bits: int = 32) -> int:
    """
    Two's complement wrap-around.

    Keeps the low `bits` bits of value and reinterprets them as signed.

    Examples:
        >>> wrap_to_range(2147483648)
        -2147483648
        >>> wrap_to_range(-129, bits=8)
        127
        >>> wrap_to_range(5)
        5
    """
    modulus = 1 << bits
    reduced = value & (modulus - 1)
    if reduced > int_max(bits):
        reduced -= modulus
    return reduced


def saturate_to_range(value: int, bits: int = 32) -> int:
    """
    Clamp value to [int_min(bits), int_max(bits)].

    Examples:
        >>> saturate_to_range(10**12)
        2147483647
        >>> saturate_to_range(-(10**12))
        -2147483648
    """
    return max(int_min(bits), min(value, int_max(bits)))


def apply_overflow_policy(
    value: int,
    operation: str,
    settings: IntegerSettings | None = None,
) -> int:
    """
    Bring an exact result into the configured integer range.

    Args:
        value: Exact (unbounded) result
        operation: Operation name used in error messages and logs
        settings: Integer width and policy (default: DEFAULT_INTEGER_SETTINGS)

    Returns:
        value if it fits; otherwise the wrapped or saturated value

    Raises:
        IntegerOverflowError: value does not fit and policy is CHECKED
    """
    settings = settings or DEFAULT_INTEGER_SETTINGS
    bits = settings.bits

    if fits_in_range(value, bits):
        return value

    policy = settings.overflow_policy
    if policy is OverflowPolicy.WRAP:
        result = wrap_to_range(value, bits)
    elif policy is OverflowPolicy.SATURATE:
        result = saturate_to_range(value, bits)
    else:
        raise IntegerOverflowError(operation, value, bits)

    logger.debug(
        "%s overflowed %d-bit range: %d -> %d (%s)",
        operation,
        bits,
        value,
        result,
        policy.value,
    )
    return result


# =============================================================================
# INPUT VALIDATION
# =============================================================================


def require_integer(
    value: object,
    name: str,
    settings: IntegerSettings | None = None,
) -> int:
    """
    Validate an Integer argument.

    Inputs are expected to already be machine integers, so out-of-range
    input is rejected regardless of the overflow policy.

    Args:
        value: Argument to check
        name: Parameter name (for the error message)
        settings: Integer width (default: DEFAULT_INTEGER_SETTINGS)

    Returns:
        value, unchanged

    Raises:
        TypeError: value is not an int (bool is rejected too)
        IntegerOverflowError: value is outside the integer range
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")

    settings = settings or DEFAULT_INTEGER_SETTINGS
    if not fits_in_range(value, settings.bits):
        raise IntegerOverflowError(f"argument {name}", value, settings.bits)

    return value
