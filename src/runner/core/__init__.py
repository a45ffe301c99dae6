from __future__ import annotations

from .exceptions import HandlerError, QueryError, ScanError
from .models import Chunk, Progress, Range, Row, ScanResult

__all__ = [
    "Chunk",
    "Progress",
    "Range",
    "Row",
    "ScanResult",
    "ScanError",
    "QueryError",
    "HandlerError",
]
