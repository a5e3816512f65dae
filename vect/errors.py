"""Exceptions raised by the vect package."""

from typing import Any


class VectError(Exception):
    """Base exception for vect errors."""
    pass


class ParseError(VectError, ValueError):
    """Raised when input matches none of the accepted vector encodings."""
    def __init__(self, message: str, data: Any = None):
        super().__init__(message)
        self.data = data


class EncodeError(VectError, ValueError):
    """Raised when a vector cannot be written as JSON (NaN or infinite components)."""
    pass
