from __future__ import annotations

from collections import Counter

from src.runner.core.exceptions import HandlerError
from src.runner.core.models import Row

# words seen per first letter, across the whole scan
COUNTS: Counter[str] = Counter()


def handle_row(row: Row) -> None:
    if "word" not in row:
        raise HandlerError(f"Row has no 'word' column, keys={list(row.keys())}")
    word = str(row["word"] or "").strip().lower()
    if word:
        COUNTS[word[0]] += 1


def reset() -> None:
    COUNTS.clear()
