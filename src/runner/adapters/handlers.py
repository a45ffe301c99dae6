from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass

from src.runner.ports.handler import Row, RowHandler

logger = logging.getLogger("etl_runner")


def log_row(row: Row) -> None:
    logger.info("%s", dict(row))


@dataclass(frozen=True)
class PythonRowHandler:
    dotted_path: str
    fn_name: str = "handle_row"

    def __post_init__(self) -> None:
        module = importlib.import_module(self.dotted_path)
        fn = getattr(module, self.fn_name, None)
        if fn is None or not callable(fn):
            raise ValueError(
                f"Python row handler not found: {self.dotted_path}.{self.fn_name}()"
            )
        object.__setattr__(self, "_fn", fn)

    def __call__(self, row: Row) -> None:
        self._fn(row)  # type: ignore[attr-defined]


def resolve_handler(module_path: str | None) -> RowHandler:
    # no module configured: just log every row
    path = (module_path or "").strip()
    if not path:
        return log_row

    # "pkg.module:function" picks a function other than handle_row
    if ":" in path:
        dotted, fn_name = path.split(":", 1)
        return PythonRowHandler(dotted_path=dotted.strip(), fn_name=fn_name.strip())

    return PythonRowHandler(dotted_path=path)
