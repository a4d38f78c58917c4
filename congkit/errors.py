"""
Exceptions raised by congkit.

Lookups that find nothing are not errors: they return None or an empty list.
"""

from typing import Optional


class CongkitError(Exception):
    """Base class for all congkit errors."""
    pass


class ParseError(CongkitError, ValueError):
    """Raised when a line of the text table is malformed."""

    def __init__(self, message: str, lineno: Optional[int] = None, line: Optional[str] = None):
        self.lineno = lineno
        self.line = line
        if lineno is not None:
            message = f"line {lineno}: {message}"
        super().__init__(message)


class DecodeError(CongkitError, ValueError):
    """Raised when a binary table is structurally invalid."""
    pass


class PatternError(CongkitError, ValueError):
    """Raised when a code pattern cannot be compiled."""
    pass
