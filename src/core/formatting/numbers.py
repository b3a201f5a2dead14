"""
Number Formatting — decimal text <-> Integer

format_number renders the canonical base-10 form. parse_number reads a
leading integer the way formatted stream extraction does:

    [whitespace] [+|-] digit {digit} [anything]

Leading whitespace is skipped, trailing content is ignored. Text without a
leading integer raises NumberParseError; there is no zero fallback. Values
outside the integer range follow the overflow policy (SATURATE matches the
stream behaviour of storing the nearest bound).

Tokens with more significant digits than the widest supported integer can
hold are never converted exactly: their value is capped to an out-of-range
sentinel that keeps the sign and the low MAX_INTEGER_BITS bits, so every
overflow policy still gives the result it would give for the exact value.
"""

from dataclasses import dataclass
from typing import Final

from src.core.domain.settings import MAX_INTEGER_BITS, IntegerSettings
from src.core.errors import NumberParseError
from src.core.math.integer_range import apply_overflow_policy, require_integer
from src.utils.logging import get_logger

logger = get_logger(__name__)

# =============================================================================
# CONSTANTS
# =============================================================================

# C locale isspace()
LEADING_WHITESPACE: Final[frozenset[str]] = frozenset(" \t\n\v\f\r")

DECIMAL_DIGITS: Final[frozenset[str]] = frozenset("0123456789")

SIGNS: Final[frozenset[str]] = frozenset("+-")

# Significant digits of 2**MAX_INTEGER_BITS; longer tokens cannot be in range
MAX_EXACT_DIGITS: Final[int] = len(str(1 << MAX_INTEGER_BITS))

CAPPED_MODULUS: Final[int] = 1 << MAX_INTEGER_BITS

# Stays below the int <-> str conversion digit limit
DIGIT_CHUNK_SIZE: Final[int] = 1000


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class NumberToken:
    """Leading integer found by scan_number."""

    value: int  # exact value, not range-checked (see capped)
    start: int  # index of the sign or first digit
    end: int  # index just past the last digit
    text: str  # source[start:end]
    remainder: str  # source[end:], ignored by parse_number
    capped: bool = False  # value replaced by an out-of-range sentinel


# =============================================================================
# FORMAT
# =============================================================================


def format_number(n: int, *, settings: IntegerSettings | None = None) -> str:
    """
    Canonical base-10 representation of n.

    Examples:
        >>> format_number(42)
        '42'
        >>> format_number(-7)
        '-7'
    """
    require_integer(n, "n", settings)
    return str(n)


# =============================================================================
# PARSE
# =============================================================================


def _digits_modulo(digits: str, modulus: int) -> int:
    """Decimal digit string modulo `modulus`, converted chunk by chunk."""
    result = 0
    for i in range(0, len(digits), DIGIT_CHUNK_SIZE):
        chunk = digits[i : i + DIGIT_CHUNK_SIZE]
        result = (result * 10 ** len(chunk) + int(chunk)) % modulus
    return result


def scan_number(s: str) -> NumberToken:
    """
    Locate the leading integer token of s.

    Args:
        s: Source text

    Returns:
        NumberToken with the exact value and token boundaries

    Raises:
        TypeError: s is not a str
        NumberParseError: s does not start with an integer token

    Examples:
        >>> scan_number("  -12abc").value
        -12
        >>> scan_number("  -12abc").remainder
        'abc'
    """
    if not isinstance(s, str):
        raise TypeError(f"s must be a str, got {type(s).__name__}")

    pos = 0
    length = len(s)
    while pos < length and s[pos] in LEADING_WHITESPACE:
        pos += 1

    start = pos
    if pos < length and s[pos] in SIGNS:
        pos += 1

    digits_start = pos
    while pos < length and s[pos] in DECIMAL_DIGITS:
        pos += 1

    if pos == digits_start:
        logger.debug("no integer token in %r at position %d", s, digits_start)
        raise NumberParseError(s, digits_start)

    token = s[start:pos]
    negative = token.startswith("-")
    significant = s[digits_start:pos].lstrip("0")
    capped = len(significant) > MAX_EXACT_DIGITS

    if capped:
        # Congruent with the exact value modulo 2**MAX_INTEGER_BITS and
        # larger in magnitude than any supported integer
        magnitude = CAPPED_MODULUS + _digits_modulo(significant, CAPPED_MODULUS)
        logger.debug("integer token of %d digits capped", len(significant))
    else:
        magnitude = int(significant or "0")

    return NumberToken(
        value=-magnitude if negative else magnitude,
        start=start,
        end=pos,
        text=token,
        remainder=s[pos:],
        capped=capped,
    )


def parse_number(s: str, *, settings: IntegerSettings | None = None) -> int:
    """
    Parse the leading integer of s.

    Args:
        s: Source text
        settings: Integer width and overflow policy

    Returns:
        Parsed value, brought into range by the overflow policy

    Raises:
        NumberParseError: s does not start with an integer token
        IntegerOverflowError: value out of range under the CHECKED policy

    Examples:
        >>> parse_number("42")
        42
        >>> parse_number("17 apples")
        17
    """
    token = scan_number(s)
    return apply_overflow_policy(token.value, "parse_number", settings)
