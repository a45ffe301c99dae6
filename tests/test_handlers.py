import pytest

from src.pipelines.row_handlers import word_counter
from src.runner.core.exceptions import HandlerError
from src.runner.adapters.handlers import PythonRowHandler, log_row, resolve_handler


def test_resolve_handler_defaults_to_logging(caplog):
    handler = resolve_handler(None)
    assert handler is log_row
    assert resolve_handler("   ") is log_row

    with caplog.at_level("INFO", logger="etl_runner"):
        handler({"id": 1, "word": "apple"})

    assert "'word': 'apple'" in caplog.text


def test_resolve_handler_loads_module_function():
    word_counter.reset()
    handler = resolve_handler("src.pipelines.row_handlers.word_counter")

    for w in ("apple", "Avocado", "banana", ""):
        handler({"word": w})

    assert isinstance(handler, PythonRowHandler)
    assert word_counter.COUNTS == {"a": 2, "b": 1}
    word_counter.reset()


def test_resolve_handler_with_explicit_function_name():
    handler = resolve_handler("src.pipelines.row_handlers.word_counter:reset")

    assert handler.fn_name == "reset"


def test_missing_handler_function_is_rejected():
    with pytest.raises(ValueError):
        PythonRowHandler("src.pipelines.row_handlers.word_counter", fn_name="nope")


def test_missing_handler_module_is_rejected():
    with pytest.raises(ModuleNotFoundError):
        resolve_handler("src.pipelines.row_handlers.does_not_exist")


def test_word_counter_rejects_row_without_word_column():
    with pytest.raises(HandlerError):
        word_counter.handle_row({"id": 1})
