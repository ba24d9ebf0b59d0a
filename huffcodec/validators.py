"""
validators.py

Shared codes for input validation and the error types raised by huffcodec.
"""


import os
from typing import Any


class FormatError(ValueError):
    """Raised when a buffer is not a well-formed huffcodec container."""


class MissingCodeError(LookupError):
    """Raised when a symbol being encoded has no code in the code table."""


def validate_type(variable: Any, name: str, expected_type: type) -> None:
    """Validate that variable is of the expected type."""
    if not isinstance(variable, expected_type):
        raise ValueError(f"{name} must be of type {expected_type.__name__}")


def validate_file_exists(file_path: str) -> None:
    """Validate that the given file path exists."""
    if not os.path.exists(file_path):
        raise ValueError(f"File does not exist: {file_path}")


def validate_symbol(symbol: Any) -> None:
    """Validate that symbol is a single byte value."""
    if isinstance(symbol, bool) or not isinstance(symbol, int):
        raise ValueError("Symbol must be of type int")
    if not 0 <= symbol <= 255:
        raise ValueError(f"Symbol out of range: {symbol}")
