"""
Core text modules

Pure string transforms with ASCII-only case conversion.
"""

from src.core.text.transforms import (
    ASCII_LOWER_TABLE,
    ASCII_UPPER_TABLE,
    reverse,
    to_lower,
    to_upper,
)

__all__ = [
    # Tables
    "ASCII_LOWER_TABLE",
    "ASCII_UPPER_TABLE",
    # Transforms
    "reverse",
    "to_lower",
    "to_upper",
]
