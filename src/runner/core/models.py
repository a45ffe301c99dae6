from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping

Row = Mapping[str, Any]


@dataclass(frozen=True, slots=True)
class Range:
    """Keyset window `(start, end]` over the scanned key column."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.end <= self.start:
            raise ValueError(f"Range end must be greater than start, got ({self.start}, {self.end}]")

    @classmethod
    def first(cls, chunk_size: int) -> Range:
        return cls(start=0, end=chunk_size)

    @property
    def size(self) -> int:
        return self.end - self.start

    def next(self) -> Range:
        return Range(start=self.end, end=self.end + self.size)

    def __str__(self) -> str:
        return f"({self.start}, {self.end}]"


@dataclass(frozen=True, slots=True)
class Chunk:
    rows: tuple[Row, ...]
    range: Range
    total_row_count: int

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def is_empty(self) -> bool:
        return not self.rows

    def total_pages(self, chunk_size: int) -> int:
        return math.ceil(self.total_row_count / chunk_size)


@dataclass(frozen=True, slots=True)
class Progress:
    page_number: int
    total_pages: int
    rows_in_page: int
    total_rows: int


@dataclass(frozen=True, slots=True)
class ScanResult:
    pages: int
    rows: int
    fetches: int
