from __future__ import annotations

from typing import Any

import pytest
from sqlalchemy import create_engine, text
from sqlalchemy.orm import Session
from sqlalchemy.pool import StaticPool


class FakeTableExecutor:
    """In-memory 'word' table keyed by id; records every query it gets."""

    def __init__(self, ids) -> None:
        self.rows = [{"id": i, "word": f"w{i}"} for i in ids]
        self.range_calls: list[tuple[int, int]] = []
        self.count_calls = 0

    def fetch_range(self, sql: str, *, start: int, end: int) -> list[dict[str, Any]]:
        self.range_calls.append((start, end))
        return [dict(r) for r in self.rows if start < r["id"] <= end]

    def count(self, sql: str) -> int | None:
        self.count_calls += 1
        return len(self.rows)


@pytest.fixture
def fake_table():
    return FakeTableExecutor


def _seed_words(session: Session, ids) -> None:
    session.execute(text("CREATE TABLE word (id INTEGER PRIMARY KEY, word VARCHAR(64) NOT NULL)"))
    if ids:
        session.execute(
            text("INSERT INTO word (id, word) VALUES (:id, :word)"),
            [{"id": i, "word": f"word-{i}"} for i in ids],
        )
    session.commit()


@pytest.fixture
def seed_words():
    return _seed_words


@pytest.fixture
def sqlite_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    with Session(engine) as session:
        yield session
    engine.dispose()
