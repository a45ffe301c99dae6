from __future__ import annotations

from src.runner.core.models import Range


def scan_prefix(*, table: str, rng: Range | None = None, page: int | None = None) -> str:
    base = f"table={table}"
    if rng is not None:
        base = f"{base} range={rng}"
    return f"{base} page={page}" if page is not None else base
