# tests/test_bootstrap.py

from __future__ import annotations

import json

import pytest

from daily_todo.cli.bootstrap import create_initial_state
from daily_todo.core.errors import CorruptFileError
from daily_todo.core.session import Navigate
from daily_todo.tasks.persistence import SnapshotFile
from daily_todo.tasks.task_models import DailySnapshot, Weekday

from .fakes import MONDAY, TUESDAY, WEDNESDAY, at, done, todo


def test_first_run_on_monday_uses_default_template(settings) -> None:
    state = create_initial_state(settings=settings, today=MONDAY)

    assert state.today is Weekday.MON
    assert state.task_store.tasks == [todo("check mail")]
    assert state.title == "Mon: business day"
    assert isinstance(state.session.mode, Navigate)
    assert settings.template_path.exists()


def test_day_without_template_entry(settings) -> None:
    state = create_initial_state(settings=settings, today=WEDNESDAY)

    assert state.task_store.is_empty()
    assert state.title == "no daily occuring task for Wed"


def test_same_weekday_snapshot_is_merged(settings) -> None:
    SnapshotFile(settings.snapshot_path).save(
        DailySnapshot(tasks=[done("check mail"), todo("call bank")], saved_at=at(MONDAY, 8))
    )

    state = create_initial_state(settings=settings, today=MONDAY)

    assert state.task_store.tasks == [done("check mail"), todo("call bank")]


def test_other_weekday_snapshot_is_discarded(settings) -> None:
    SnapshotFile(settings.snapshot_path).save(
        DailySnapshot(tasks=[todo("call bank")], saved_at=at(TUESDAY))
    )

    state = create_initial_state(settings=settings, today=WEDNESDAY)

    assert state.task_store.is_empty()


def test_corrupt_snapshot_falls_back_to_template(settings) -> None:
    settings.snapshot_path.write_text("{{{", "utf-8")

    state = create_initial_state(settings=settings, today=MONDAY)

    assert state.task_store.tasks == [todo("check mail")]


def test_corrupt_template_is_fatal(settings) -> None:
    settings.template_path.write_text(json.dumps({"Mon": "check mail"}), "utf-8")

    with pytest.raises(CorruptFileError):
        create_initial_state(settings=settings, today=MONDAY)
