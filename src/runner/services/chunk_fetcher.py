from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError

from src.runner.core.exceptions import QueryError
from src.runner.core.models import Chunk, Range
from src.runner.ports.reader import QueryExecutor
from src.runner.services.logctx import scan_prefix
from src.runner.services.sql_pagination import build_count_query, build_range_query

logger = logging.getLogger("etl_runner")


class ChunkFetcher:
    """Reads one keyset window of a table plus the table's total row count.

    Every fetch issues two read-only queries: the range query and a full
    COUNT(*). With ``cache_total_count=True`` the count is taken once and
    reused for the fetcher's lifetime; progress then ignores rows written
    to the table while the scan runs.
    """

    def __init__(
        self,
        executor: QueryExecutor,
        *,
        table: str,
        key_column: str = "id",
        cache_total_count: bool = False,
    ) -> None:
        self._executor = executor
        self._table = table
        self._range_sql = build_range_query(table, key_column=key_column)
        self._count_sql = build_count_query(table)
        self._cache_total_count = cache_total_count
        self._cached_total: int | None = None

    @property
    def table(self) -> str:
        return self._table

    def fetch_chunk(self, rng: Range) -> Chunk:
        ctx_str = scan_prefix(table=self._table, rng=rng)

        logger.info("%s range sql: %s", ctx_str, self._range_sql)
        try:
            rows = self._executor.fetch_range(self._range_sql, start=rng.start, end=rng.end)
        except QueryError as exc:
            if exc.range is None:
                exc.range = rng
            raise
        except SQLAlchemyError as exc:
            raise QueryError(
                f"Range query failed for table {self._table!r} range {rng}: {exc}",
                range=rng,
            ) from exc

        total = self._total_row_count(rng, ctx_str)
        return Chunk(rows=tuple(rows), range=rng, total_row_count=total)

    def _total_row_count(self, rng: Range, ctx_str: str) -> int:
        if self._cache_total_count and self._cached_total is not None:
            return self._cached_total

        logger.info("%s count sql: %s", ctx_str, self._count_sql)
        try:
            total = self._executor.count(self._count_sql)
        except QueryError as exc:
            if exc.range is None:
                exc.range = rng
            raise
        except SQLAlchemyError as exc:
            raise QueryError(
                f"Count query failed for table {self._table!r} range {rng}: {exc}",
                range=rng,
            ) from exc

        if total is None:
            raise QueryError(
                f"Count query for table {self._table!r} returned no value",
                range=rng,
            )

        total = int(total)
        if self._cache_total_count:
            self._cached_total = total
        return total
