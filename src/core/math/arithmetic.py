"""
Arithmetic — add, multiply and factorial over machine integers

Each operation computes the exact result with Python int and then passes it
through apply_overflow_policy, so the configured width and policy decide
what happens at the edges of the range.
"""

from src.core.domain.settings import (
    DEFAULT_INTEGER_SETTINGS,
    IntegerSettings,
    OverflowPolicy,
    int_max,
)
from src.core.errors import InvalidArgumentError
from src.core.math.integer_range import apply_overflow_policy, require_integer


def add(a: int, b: int, *, settings: IntegerSettings | None = None) -> int:
    """
    Sum of two integers.

    Args:
        a: First operand
        b: Second operand
        settings: Integer width and overflow policy

    Returns:
        a + b

    Raises:
        IntegerOverflowError: Sum out of range under the CHECKED policy

    Examples:
        >>> add(2, 3)
        5
        >>> add(-1, 1)
        0
    """
    require_integer(a, "a", settings)
    require_integer(b, "b", settings)
    return apply_overflow_policy(a + b, "add", settings)


def multiply(a: int, b: int, *, settings: IntegerSettings | None = None) -> int:
    """
    Product of two integers.

    Examples:
        >>> multiply(2, 3)
        6
        >>> multiply(-2, 3)
        -6
    """
    require_integer(a, "a", settings)
    require_integer(b, "b", settings)
    return apply_overflow_policy(a * b, "multiply", settings)


def factorial(n: int, *, settings: IntegerSettings | None = None) -> int:
    """
    n! computed iteratively as the product 1 * 2 * ... * n.

    The overflow policy is applied after every step; for WRAP this gives the
    same result as wrapping the exact product. The loop stops as soon as the
    partial product is fixed: 0 under WRAP (2**bits divides it) or the
    upper bound under SATURATE. Either stays put for every later factor.

    Args:
        n: Non-negative integer
        settings: Integer width and overflow policy

    Returns:
        n! (1 for n == 0)

    Raises:
        InvalidArgumentError: n is negative
        IntegerOverflowError: n! out of range under the CHECKED policy

    Examples:
        >>> factorial(0)
        1
        >>> factorial(5)
        120
    """
    require_integer(n, "n", settings)
    if n < 0:
        raise InvalidArgumentError(
            f"factorial is not defined for negative numbers, got {n}", n
        )

    settings = settings or DEFAULT_INTEGER_SETTINGS
    saturated = (
        int_max(settings.bits)
        if settings.overflow_policy is OverflowPolicy.SATURATE
        else None
    )

    result = 1
    for i in range(2, n + 1):
        result = apply_overflow_policy(result * i, "factorial", settings)
        if result == 0 or result == saturated:
            break
    return result
