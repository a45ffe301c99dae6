from __future__ import annotations

from typing import Callable, Protocol

from src.runner.core.models import Progress, Row

RowHandler = Callable[[Row], None]


class ProgressSink(Protocol):
    """Receives one Progress per non-empty chunk."""

    def report(self, progress: Progress) -> None:
        ...
