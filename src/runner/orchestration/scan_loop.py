from __future__ import annotations

import logging

from src.runner.adapters.progress import LoggingProgressSink
from src.runner.core.exceptions import HandlerError
from src.runner.core.models import Progress, Range, ScanResult
from src.runner.ports.handler import ProgressSink, RowHandler
from src.runner.services.chunk_fetcher import ChunkFetcher
from src.runner.services.logctx import scan_prefix

logger = logging.getLogger("etl_runner")


class ScanLoop:
    """Walks a whole table chunk by chunk until a chunk comes back empty.

    One chunk is fetched and fully handled before the next one is read.
    Handler exceptions leave `run` as raised, with a note naming the range.
    An empty chunk is the only stop condition, so a run of deleted ids at
    least one chunk wide ends the scan early and the rows past it are not
    visited.
    """

    def __init__(
        self,
        fetcher: ChunkFetcher,
        *,
        progress: ProgressSink | None = None,
    ) -> None:
        self._fetcher = fetcher
        self._progress = progress or LoggingProgressSink()

    def run(self, chunk_size: int, handler: RowHandler) -> ScanResult:
        if isinstance(chunk_size, bool) or not isinstance(chunk_size, int) or chunk_size <= 0:
            raise ValueError(f"chunk_size must be a positive integer, got {chunk_size!r}")

        table = self._fetcher.table
        rng = Range.first(chunk_size)
        page_index = 0
        total_rows = 0
        fetches = 0

        logger.info("%s Starting scan chunk_size=%d", scan_prefix(table=table), chunk_size)

        while True:
            chunk = self._fetcher.fetch_chunk(rng)
            fetches += 1

            if chunk.is_empty:
                logger.info(
                    "%s Finished scan pages=%d rows=%d total_rows=%d",
                    scan_prefix(table=table, rng=rng),
                    page_index,
                    total_rows,
                    chunk.total_row_count,
                )
                if total_rows < chunk.total_row_count:
                    logger.warning(
                        "%s scan stopped at an empty range with %d of %d rows visited; "
                        "ids may have gaps",
                        scan_prefix(table=table, rng=rng),
                        total_rows,
                        chunk.total_row_count,
                    )
                return ScanResult(pages=page_index, rows=total_rows, fetches=fetches)

            self._progress.report(
                Progress(
                    page_number=page_index + 1,
                    total_pages=chunk.total_pages(chunk_size),
                    rows_in_page=chunk.row_count,
                    total_rows=chunk.total_row_count,
                )
            )

            for row in chunk.rows:
                try:
                    handler(row)
                except Exception as exc:
                    logger.error(
                        "%s row handler failed: %r",
                        scan_prefix(table=table, rng=rng, page=page_index + 1),
                        exc,
                    )
                    exc.add_note(f"while handling a row of table {table!r} in range {rng}")
                    if isinstance(exc, HandlerError):
                        if exc.range is None:
                            exc.range = rng
                        if exc.row is None:
                            exc.row = row
                    raise

            total_rows += chunk.row_count
            rng = rng.next()
            page_index += 1
