from __future__ import annotations

import logging

from src.runner.core.models import Progress

logger = logging.getLogger("etl_runner")


class LoggingProgressSink:
    def report(self, progress: Progress) -> None:
        logger.info(
            "On page %d of %d. Rows in page: %d. Total rows: %d",
            progress.page_number,
            progress.total_pages,
            progress.rows_in_page,
            progress.total_rows,
        )


class CollectingProgressSink:
    """Keeps every reported Progress in memory."""

    def __init__(self) -> None:
        self.reports: list[Progress] = []

    def report(self, progress: Progress) -> None:
        self.reports.append(progress)
