"""Line-driven reader that turns a text stream into grids.

The stream holds a case count, then for each case a ``rows cols`` line
followed by ``rows`` lines of ``cols`` integers.  Consecutive cases are
separated by exactly one blank line::

    2
    2 2
    1 0
    0 1

    1 1
    0

Every completed case is passed through a *factory* ``(rows, cols, values)``
and delivered to ``grid`` listeners.  Malformed lines are delivered to
``fault`` listeners; the reader itself never raises from
:meth:`StreamGridReader.process_line`.  Once the last declared case has been
emitted the reader closes and ignores any further input.
"""

from __future__ import annotations

import enum
import logging
import re
from collections.abc import Callable, Iterable
from typing import Any, Generic, TypeVar

from distgrid.errors import FormatError, GridError, InvalidArgumentError, ParseError
from distgrid.grid.core import Grid

logger = logging.getLogger(__name__)

T = TypeVar("T")

GridFactory = Callable[[int, int, list[int]], T]
GridListener = Callable[[T], Any]
FaultListener = Callable[[GridError], Any]

_DIGIT = re.compile(r"[0-9]")
_LEADING_INT = re.compile(r"[+-]?[0-9]+")
_STRICT_INT = re.compile(r"[0-9]+")


def parse_line(line: str, strict: bool = False) -> list[int]:
    """Split ``line`` on whitespace into integers.

    A token without any digit raises ``ParseError``.  In lenient mode a token
    such as ``12abc`` is read as its leading integer (12); in strict mode the
    whole token must be a non-negative integer.
    """
    values: list[int] = []
    for token in line.split():
        if not _DIGIT.search(token):
            raise ParseError(f"Token '{token}' is not an integer")
        match = _STRICT_INT.fullmatch(token) if strict else _LEADING_INT.match(token)
        if match is None:
            raise ParseError(f"Token '{token}' is not an integer")
        values.append(int(match.group()))
    return values


class ReaderState(str, enum.Enum):
    AWAITING_CASE_COUNT = "awaiting_case_count"
    AWAITING_DIMENSIONS = "awaiting_dimensions"
    READING_ROWS = "reading_rows"
    CLOSED = "closed"


class StreamGridReader(Generic[T]):
    """Incremental test-case parser.

    Parameters
    ----------
    factory:
        Called as ``factory(rows, cols, values)`` when a case is complete.
        Defaults to :class:`Grid`.  Exceptions it raises are reported as
        faults.
    strict:
        Reject tokens that are not entirely digits (see :func:`parse_line`).

    Notes
    -----
    Counters are left untouched after a parse or format fault, so a single
    bad line may cause further faults on the lines that follow.  When the
    factory fails, the buffered values are dropped and the same case is read
    again from its first row.
    """

    def __init__(
        self,
        factory: GridFactory[T] | None = None,
        strict: bool = False,
    ) -> None:
        self.factory: GridFactory[Any] = factory if factory is not None else Grid
        self.strict = strict

        self.total_cases: int | None = None
        self.rows: int | None = None
        self.cols: int | None = None
        self.case_index = 1
        self.row_index = 1
        self.line_number = 0
        self._values: list[int] = []
        self._closed = False

        self._grid_listeners: list[GridListener[T]] = []
        self._fault_listeners: list[FaultListener] = []

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------

    def on_grid(self, listener: GridListener[T]) -> GridListener[T]:
        """Register a callback for completed grids.  Usable as a decorator."""
        self._grid_listeners.append(listener)
        return listener

    def on_fault(self, listener: FaultListener) -> FaultListener:
        """Register a callback for faults.  Usable as a decorator."""
        self._fault_listeners.append(listener)
        return listener

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def state(self) -> ReaderState:
        if self._closed:
            return ReaderState.CLOSED
        if self.total_cases is None:
            return ReaderState.AWAITING_CASE_COUNT
        if self.rows is None:
            return ReaderState.AWAITING_DIMENSIONS
        return ReaderState.READING_ROWS

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def consume(self, lines: Iterable[str]) -> int:
        """Feed lines until the iterable is exhausted or the reader closes.

        Returns the number of lines processed.  Lines after the reader closes
        are not pulled from ``lines``.
        """
        processed = 0
        for line in lines:
            self.process_line(line)
            processed += 1
            if self._closed:
                break
        return processed

    def process_line(self, line: str) -> None:
        """Advance the state machine by one input line."""
        if self._closed:
            return
        self.line_number += 1

        try:
            tokens = parse_line(line, strict=self.strict)
        except ParseError as exc:
            self._fault(exc)
            return

        # First line: number of test cases
        if self.total_cases is None:
            if len(tokens) != 1:
                self._fault(FormatError("First line should hold exactly one value: the number of test cases"))
                return
            self.total_cases = tokens[0]
            return

        # Dimensions of the next case
        if self.rows is None:
            if len(tokens) != 2:
                self._fault(FormatError("Test case should be initialised with two values: rows and columns"))
                return
            self.rows, self.cols = tokens
            self._values = []
            self.row_index = 1
            return

        # Separator between cases
        if not tokens:
            if self.row_index - 1 != self.rows:
                self._fault(FormatError("Misplaced empty line"))
                return
            self.rows = None
            self.cols = None
            return

        if self.case_index > self.total_cases:
            self._fault(FormatError(f"Input exceeding {self.total_cases} test cases"))
            return
        if self.row_index > self.rows:
            self._fault(FormatError(f"Invalid test case: expecting {self.rows} rows"))
            return
        if len(tokens) != self.cols:
            self._fault(FormatError(f"Invalid test case: expecting {self.cols} values per row"))
            return

        self._values.extend(tokens)

        if self.row_index == self.rows:
            try:
                grid = self.factory(self.rows, self.cols, self._values)
            except Exception as exc:
                self._fault(_as_grid_error(exc))
                self._values = []
                self.row_index = 0
            else:
                self._emit(grid)
                if self.case_index == self.total_cases:
                    self._closed = True
                    logger.debug("All %d test cases read; reader closed", self.total_cases)
                    return
                self.case_index += 1

        self.row_index += 1

    # ------------------------------------------------------------------
    # Notification helpers
    # ------------------------------------------------------------------

    def _emit(self, grid: T) -> None:
        logger.debug("Test case %d complete at line %d", self.case_index, self.line_number)
        for listener in self._grid_listeners:
            listener(grid)

    def _fault(self, error: GridError) -> None:
        if error.line is None:
            error.line = self.line_number
        logger.info("Line %d: %s: %s", self.line_number, error.error_code, error.message)
        for listener in self._fault_listeners:
            listener(error)


def _as_grid_error(exc: Exception) -> GridError:
    if isinstance(exc, GridError):
        return exc
    error = InvalidArgumentError(str(exc), details={"exception": type(exc).__name__})
    error.__cause__ = exc
    return error


def read_grids(
    lines: Iterable[str],
    factory: GridFactory[T] | None = None,
    strict: bool = False,
) -> tuple[list[T], list[GridError]]:
    """Read every case from ``lines`` and return ``(grids, faults)``."""
    reader: StreamGridReader[T] = StreamGridReader(factory, strict=strict)
    grids: list[T] = []
    faults: list[GridError] = []
    reader.on_grid(grids.append)
    reader.on_fault(faults.append)
    reader.consume(lines)
    return grids, faults
