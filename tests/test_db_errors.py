import pytest
from sqlalchemy.exc import OperationalError, ProgrammingError

from src.runner.core.exceptions import QueryError
from src.runner.core.models import Range
from src.runner.services.db_errors import is_db_disconnect


def _wrapped(cause):
    try:
        try:
            raise cause
        except Exception as exc:
            raise QueryError("range query failed", range=Range(0, 5)) from exc
    except QueryError as err:
        return err


def test_operational_error_is_disconnect():
    assert is_db_disconnect(OperationalError("SELECT 1", {}, Exception("boom")))


def test_programming_error_is_not_disconnect():
    assert not is_db_disconnect(ProgrammingError("SELECT 1", {}, Exception("no such table")))


@pytest.mark.parametrize(
    "msg, expected",
    [("Connection refused", True), ("connection was closed", True), ("disk full", False)],
)
def test_os_errors_by_message(msg, expected):
    assert is_db_disconnect(OSError(msg)) is expected


def test_looks_through_query_error_cause():
    assert is_db_disconnect(_wrapped(OperationalError("SELECT 1", {}, Exception("x"))))
    assert not is_db_disconnect(_wrapped(ProgrammingError("SELECT 1", {}, Exception("x"))))
