"""Exception hierarchy for grid construction and stream parsing.

Three kinds of failure exist:

* ``ParseError`` — a token on an input line is not an integer.
* ``FormatError`` — an input line breaks the test-case grammar.
* ``InvalidArgumentError`` — a grid was built or accessed with bad arguments.

The stream reader reports all three as fault notifications; grid code raises
them directly.
"""

from __future__ import annotations

from typing import Any


class GridError(Exception):
    """Base exception for all distgrid errors."""

    def __init__(
        self,
        message: str,
        line: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.line = line
        """1-based input line number, when the error came from a stream."""
        self.error_code = self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for logging."""
        return {
            "error_type": self.error_code,
            "message": self.message,
            "line": self.line,
            "details": self.details,
            "cause": str(self.__cause__) if self.__cause__ else None,
        }


class ParseError(GridError):
    """A whitespace-delimited token could not be read as an integer."""


class FormatError(GridError):
    """An input line violates the test-case grammar."""


class InvalidArgumentError(GridError, ValueError):
    """Invalid dimensions, values or coordinates for a grid."""
