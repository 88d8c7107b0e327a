# tests/test_logging_setup.py

from __future__ import annotations

import logging

from daily_todo.logging_setup import (
    LOG_FILENAME,
    _ConsoleNoiseFilter,
    deferred_console,
    level_from_name,
    setup_logging,
)


def _record(name: str, level: int) -> logging.LogRecord:
    return logging.LogRecord(name, level, __file__, 1, "msg", None, None)


def test_console_filter_keeps_app_logs_and_mutes_third_party() -> None:
    f = _ConsoleNoiseFilter()

    assert f.filter(_record("daily_todo.tasks.persistence", logging.INFO))
    assert not f.filter(_record("rich", logging.WARNING))
    assert f.filter(_record("rich", logging.ERROR))
    assert not f.filter(_record("py.warnings", logging.WARNING))


def test_level_from_name() -> None:
    assert level_from_name("debug") == logging.DEBUG
    assert level_from_name(" Error ") == logging.ERROR
    assert level_from_name("chatty") == logging.WARNING


def test_console_records_are_held_during_full_screen(root_logger, tmp_path, capsys) -> None:
    setup_logging(log_dir=tmp_path)
    log = logging.getLogger("daily_todo.connectors.console_connector")

    with deferred_console():
        log.warning("Quitting without a saved snapshot.")
        log.info("Saved snapshot")
        assert capsys.readouterr().err == ""

    err = capsys.readouterr().err
    assert "Quitting without a saved snapshot" in err
    assert "Saved snapshot" not in err
    assert "Quitting without a saved snapshot" in (tmp_path / LOG_FILENAME).read_text("utf-8")


def test_console_handler_is_back_after_full_screen(root_logger, tmp_path, capsys) -> None:
    setup_logging(log_dir=tmp_path)
    handlers = list(root_logger.handlers)

    with deferred_console():
        pass
    logging.getLogger("daily_todo").warning("after")

    assert root_logger.handlers == handlers
    assert "after" in capsys.readouterr().err


def test_deferred_console_without_setup_is_a_no_op(root_logger) -> None:
    for h in list(root_logger.handlers):
        root_logger.removeHandler(h)

    with deferred_console():
        pass

    assert root_logger.handlers == []
