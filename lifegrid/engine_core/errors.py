"""
Parse Errors - Raised when a text universe cannot be read.

Both errors abort parsing at the first problem found.
No partial universe is ever returned.
"""

from __future__ import annotations


class ParseUniverseError(Exception):
    """Base class for errors raised while parsing a universe."""


class InvalidCellError(ParseUniverseError):
    """Raised when a character is neither '.' nor '#'."""

    def __init__(self, cell: str):
        self.cell = cell
        super().__init__(f"Invalid cell value '{cell}', expected one of '.' or '#'")


class MismatchedRowLengthsError(ParseUniverseError):
    """Raised when a row's length differs from the first row's length."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Mismatched row lengths, expected {expected} but got {actual}")
