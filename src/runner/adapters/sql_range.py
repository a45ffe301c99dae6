from __future__ import annotations

from typing import Any

from sqlalchemy import text
from sqlalchemy.orm import Session


class SqlAlchemyQueryExecutor:
    """QueryExecutor on top of a synchronous SQLAlchemy session.

    Every query runs in its own short read transaction, ended right after
    the result is read, so no transaction stays open while rows are handled
    and each COUNT sees the table as of that chunk.
    Pooling and reconnects are the engine's business.
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def fetch_range(self, sql: str, *, start: int, end: int) -> list[dict[str, Any]]:
        try:
            res = self._session.execute(text(sql), {"start": start, "end": end})
            # RowMapping -> dict, stable for handlers
            return [dict(r) for r in res.mappings().all()]
        finally:
            self._session.rollback()

    def count(self, sql: str) -> int | None:
        try:
            value = self._session.execute(text(sql)).scalar()
        finally:
            self._session.rollback()
        return int(value) if value is not None else None
