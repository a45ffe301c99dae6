from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.runner.core.models import Range, Row


class ScanError(Exception):
    """Base error of a table scan. Always fatal to the scan."""

    def __init__(self, message: str, *, range: Range | None = None) -> None:
        super().__init__(message)
        self.range = range


class QueryError(ScanError):
    """The store rejected the range/count query or the count came back empty."""


class HandlerError(ScanError):
    """Raised by a row handler that rejects a row.

    Any other handler exception reaches the caller unchanged; this one also
    gets the range and row filled in by the scan loop.
    """

    def __init__(self, message: str, *, range: Range | None = None, row: Row | None = None) -> None:
        super().__init__(message, range=range)
        self.row = row
