# tests/test_task_store.py

from __future__ import annotations

from daily_todo.tasks.task_models import DailySnapshot, TaskStatus, Weekday
from daily_todo.tasks.task_store import TaskStore, merge_tasks

from .fakes import MONDAY, TUESDAY, WEDNESDAY, at, done, todo


def test_merge_overwrites_status_and_appends_unknown_tasks() -> None:
    snapshot = DailySnapshot(tasks=[done("a"), todo("c")], saved_at=at(MONDAY))

    store = TaskStore.from_sources(["a", "b"], snapshot, Weekday.MON)

    assert store.tasks == [done("a"), todo("b"), todo("c")]


def test_merge_keeps_template_order_then_saved_order() -> None:
    saved = [todo("x"), done("b"), todo("y"), done("a")]

    merged = merge_tasks([todo("a"), todo("b")], saved)

    assert merged == [done("a"), done("b"), todo("x"), todo("y")]


def test_merge_with_itself_is_unchanged() -> None:
    current = [done("a"), todo("b"), done("a"), todo("ad hoc")]

    assert merge_tasks(current, current) == current


def test_merge_does_not_modify_inputs() -> None:
    base = [todo("a")]
    saved = [done("a")]

    merge_tasks(base, saved)

    assert base == [todo("a")]
    assert saved == [done("a")]


def test_duplicate_texts_match_one_to_one() -> None:
    merged = merge_tasks([todo("mail"), todo("mail")], [done("mail")])

    assert merged == [done("mail"), todo("mail")]


def test_repeated_saved_text_is_appended_not_folded() -> None:
    merged = merge_tasks([todo("a")], [done("a"), todo("a")])

    assert merged == [done("a"), todo("a")]


def test_snapshot_from_other_weekday_is_ignored() -> None:
    snapshot = DailySnapshot(tasks=[done("a"), todo("extra")], saved_at=at(TUESDAY))

    store = TaskStore.from_sources(["a"], snapshot, Weekday.of(WEDNESDAY))

    assert store.tasks == [todo("a")]


def test_snapshot_without_date_is_ignored() -> None:
    snapshot = DailySnapshot(tasks=[done("a")], saved_at=None)

    store = TaskStore.from_sources(["a"], snapshot, Weekday.MON)

    assert store.tasks == [todo("a")]


def test_no_template_for_today_keeps_saved_tasks() -> None:
    snapshot = DailySnapshot(tasks=[done("x"), todo("y")], saved_at=at(TUESDAY))

    store = TaskStore.from_sources([], snapshot, Weekday.TUE)

    assert store.tasks == [done("x"), todo("y")]


def test_mark_done_and_todo_are_separate_commands() -> None:
    store = TaskStore([todo("a")])

    assert store.mark_done(0)
    assert store.mark_done(0)
    assert store[0].status is TaskStatus.DONE

    assert store.mark_todo(0)
    assert store[0].status is TaskStatus.TODO


def test_out_of_range_mutations_are_no_ops() -> None:
    store = TaskStore([todo("a")])

    assert not store.mark_done(3)
    assert not store.mark_todo(-1)
    assert store.remove(1) is None
    assert store.tasks == [todo("a")]


def test_insert_appends_todo_and_remove_returns_task() -> None:
    store = TaskStore([done("a")])

    store.insert("buy milk")
    removed = store.remove(0)

    assert removed == done("a")
    assert store.tasks == [todo("buy milk")]


def test_clamp() -> None:
    store = TaskStore([todo("a"), todo("b")])

    assert store.clamp(5) == 1
    assert store.clamp(-2) == 0
    assert TaskStore().clamp(3) == 0


def test_tasks_property_returns_copies() -> None:
    store = TaskStore([todo("a")])

    store.tasks[0].status = TaskStatus.DONE

    assert store[0].status is TaskStatus.TODO


def test_to_snapshot_carries_timestamp() -> None:
    store = TaskStore([done("a")])

    snapshot = store.to_snapshot(saved_at=at(MONDAY, 18))

    assert snapshot.tasks == [done("a")]
    assert snapshot.weekday is Weekday.MON

