"""
Core formatting modules

Conversion between Integer values and their decimal text form.
"""

from src.core.formatting.numbers import (
    NumberToken,
    format_number,
    parse_number,
    scan_number,
)

__all__ = [
    # Types
    "NumberToken",
    # Functions
    "format_number",
    "parse_number",
    "scan_number",
]
