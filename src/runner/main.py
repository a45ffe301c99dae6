from __future__ import annotations

import logging
import sys
import time

from sqlalchemy import text
from sqlalchemy.orm import Session, sessionmaker

from infra.db import build_engine, build_session_factory
from src.config import Settings, get_settings
from src.runner.adapters.handlers import resolve_handler
from src.runner.adapters.sql_range import SqlAlchemyQueryExecutor
from src.runner.core.models import ScanResult
from src.runner.orchestration.scan_loop import ScanLoop
from src.runner.services.chunk_fetcher import ChunkFetcher
from src.runner.services.db_errors import is_db_disconnect

logger = logging.getLogger("etl_runner")


def setup_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] [runner] %(message)s",
    )


def _check_db_connection(session_factory: sessionmaker) -> None:
    """
    Быстрый ping БД. Сессию создаём/закрываем внутри, чтобы не держать "битую".
    """
    with session_factory() as session:
        session.execute(text("SELECT 1")).scalar_one()


def wait_for_db(
    session_factory: sessionmaker,
    *,
    attempts: int = 10,
    delays: tuple[float, ...] = (1, 2, 4, 8, 8, 8, 8, 8, 8, 8),
) -> None:
    """
    Ждём пока БД поднимется. Если не поднялась за attempts — падаем.
    """
    last_exc: Exception | None = None

    for i in range(1, attempts + 1):
        try:
            _check_db_connection(session_factory)
            logger.info("DB connection OK")
            return
        except Exception as exc:
            last_exc = exc
            delay = delays[i - 1] if i - 1 < len(delays) else delays[-1]
            logger.warning("DB not ready (%d/%d). Retrying in %ss...", i, attempts, delay)
            time.sleep(delay)

    logger.error("DB did not become ready after %d attempts", attempts)
    raise last_exc  # type: ignore[misc]


def run_pagination(session: Session, settings: Settings) -> ScanResult:
    fetcher = ChunkFetcher(
        SqlAlchemyQueryExecutor(session),
        table=settings.pagination_runner_table,
        key_column=settings.pagination_runner_key_column,
        cache_total_count=settings.pagination_runner_cache_count,
    )
    handler = resolve_handler(settings.pagination_runner_handler)
    loop = ScanLoop(fetcher)
    return loop.run(settings.pagination_runner_page_size, handler)


def main(settings: Settings | None = None) -> int:
    setup_logging()
    settings = settings or get_settings()

    engine = None
    try:
        engine = build_engine(settings)
        session_factory = build_session_factory(engine)
        wait_for_db(session_factory)

        logger.info("Starting PaginationRunner")
        with session_factory() as session:
            result = run_pagination(session, settings)
    except Exception as exc:
        if is_db_disconnect(exc):
            logger.warning("DB disconnected during scan. Re-run the job. err=%r", exc)
        else:
            logger.exception("PaginationRunner failed")
        return 1
    finally:
        if engine is not None:
            engine.dispose()

    logger.info(
        "Finished PaginationRunner pages=%d rows=%d fetches=%d",
        result.pages,
        result.rows,
        result.fetches,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
