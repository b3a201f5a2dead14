"""
Core building blocks: pure arithmetic, text and formatting functions.

Nothing in this package performs I/O or holds mutable state.
"""
