"""
Errors — exception taxonomy of the utility library

Every failure raised by the library derives from UtilityError, and each
concrete error also derives from the matching built-in exception so callers
can catch either the library type or the standard one.

- IntegerOverflowError: value outside the signed machine range (CHECKED policy)
- InvalidArgumentError: argument outside the function's domain
- NumberParseError: text has no leading integer token
"""

from src.core.domain.settings import int_max, int_min


class UtilityError(Exception):
    """Base class for all library errors."""


class IntegerOverflowError(UtilityError, OverflowError):
    """
    Result or input does not fit into the configured integer width.

    Attributes:
        operation: Name of the operation that produced the value
        value: The exact (unbounded) value
        bits: Integer width that was exceeded
    """

    def __init__(self, operation: str, value: int, bits: int):
        self.operation = operation
        self.value = value
        self.bits = bits
        super().__init__(
            f"{operation}: value {value} is outside the {bits}-bit range "
            f"[{int_min(bits)}, {int_max(bits)}]"
        )


class InvalidArgumentError(UtilityError, ValueError):
    """
    Argument is outside the domain of the function.

    Attributes:
        argument: The rejected value
    """

    def __init__(self, message: str, argument: object):
        self.argument = argument
        super().__init__(message)


class NumberParseError(UtilityError, ValueError):
    """
    Text does not start with an integer token.

    Attributes:
        text: Source text
        position: Index at which scanning stopped
    """

    def __init__(self, text: str, position: int):
        self.text = text
        self.position = position
        super().__init__(
            f"no integer found in {text!r} (stopped at position {position})"
        )
