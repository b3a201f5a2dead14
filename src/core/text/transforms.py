"""
Text Transforms — reverse and ASCII case conversion

Case conversion touches only the 52 ASCII letters; every other character,
including non-ASCII letters, passes through unchanged. All functions return
a new string and never mutate their input.
"""

import string
from typing import Final

# =============================================================================
# TRANSLATION TABLES
# =============================================================================

ASCII_UPPER_TABLE: Final[dict[int, int]] = str.maketrans(
    string.ascii_lowercase, string.ascii_uppercase
)
ASCII_LOWER_TABLE: Final[dict[int, int]] = str.maketrans(
    string.ascii_uppercase, string.ascii_lowercase
)


def _require_text(value: object, name: str = "s") -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, got {type(value).__name__}")
    return value


# =============================================================================
# TRANSFORMS
# =============================================================================


def reverse(s: str) -> str:
    """
    Characters of s in reverse order (by code point).

    Examples:
        >>> reverse("hello")
        'olleh'
        >>> reverse("")
        ''
    """
    return _require_text(s)[::-1]


def to_upper(s: str) -> str:
    """
    Map ASCII a-z to A-Z.

    Examples:
        >>> to_upper("Hello World")
        'HELLO WORLD'
        >>> to_upper("straße")
        'STRAßE'
    """
    return _require_text(s).translate(ASCII_UPPER_TABLE)


def to_lower(s: str) -> str:
    """
    Map ASCII A-Z to a-z.

    Examples:
        >>> to_lower("HELLO")
        'hello'
    """
    return _require_text(s).translate(ASCII_LOWER_TABLE)
