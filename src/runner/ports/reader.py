from __future__ import annotations

from typing import Protocol, Sequence

from src.runner.core.models import Row


class QueryExecutor(Protocol):
    """Runs read-only queries against the scanned table.

    A store that rejects a query must surface it as a SQLAlchemyError or a
    QueryError; anything else is treated as a bug and is not translated.
    """

    def fetch_range(self, sql: str, *, start: int, end: int) -> Sequence[Row]:
        """Return every row whose key falls in (start, end]; may be empty."""
        ...

    def count(self, sql: str) -> int | None:
        """Return the single integer produced by a COUNT query, or None if there is no value."""
        ...
