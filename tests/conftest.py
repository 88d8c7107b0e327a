# tests/conftest.py

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from types import SimpleNamespace

import pytest

from daily_todo.core.state import AppState
from daily_todo.tasks.task_models import Weekday, WeekdayTemplate
from daily_todo.tasks.task_store import TaskStore

from .fakes import todo


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with AppState and the bootstrap.

    We intentionally use a SimpleNamespace rather than reading the real
    environment, to keep unit tests isolated and deterministic.
    """
    return SimpleNamespace(
        data_dir=tmp_path,
        template_path=tmp_path / "daily_occuring.json",
        snapshot_path=tmp_path / "today.json",
        log_dir=tmp_path,
        tick_rate_ms=250,
        tick_rate=0.25,
        ascii_status=True,
    )


@pytest.fixture()
def state(settings: SimpleNamespace) -> AppState:
    """AppState for a Monday with three unfinished tasks."""
    return AppState(
        settings=settings,
        template=WeekdayTemplate.default(),
        today=Weekday.MON,
        task_store=TaskStore([todo("a"), todo("b"), todo("c")]),
    )


@pytest.fixture()
def root_logger() -> Iterator[logging.Logger]:
    """Root logger whose handlers and level are restored after the test."""
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        yield root
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            if h not in saved_handlers:
                h.close()
        for h in saved_handlers:
            root.addHandler(h)
        root.setLevel(saved_level)
        logging.captureWarnings(False)
