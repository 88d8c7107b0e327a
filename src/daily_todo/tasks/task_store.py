# src/daily_todo/tasks/task_store.py

from __future__ import annotations

import datetime as dt
import logging
from collections.abc import Iterable, Sequence

from .task_models import DailySnapshot, Task, TaskStatus, Weekday

logger = logging.getLogger(__name__)


def merge_tasks(base: Sequence[Task], saved: Iterable[Task]) -> list[Task]:
    """
    Reconcile a base list with previously saved tasks.

    Identity is the task text. Each saved task claims the first base task
    with equal text that has not been claimed yet and overwrites its status;
    a saved task with no unclaimed match is appended with its saved status.
    Base order is kept and appended tasks follow in saved order. Saved
    entries that repeat a text beyond its count in the base are appended,
    not folded into the first match.

    The inputs are not modified.
    """
    merged = [Task(status=t.status, info=t.info) for t in base]
    claimed = [False] * len(merged)

    for saved_task in saved:
        for idx, task in enumerate(merged):
            if claimed[idx] or task.info != saved_task.info:
                continue
            task.status = saved_task.status
            claimed[idx] = True
            break
        else:
            merged.append(Task(status=saved_task.status, info=saved_task.info))
            claimed.append(True)

    return merged


def snapshot_applies(snapshot: DailySnapshot | None, today: Weekday) -> bool:
    """A snapshot is usable only when it has a date on the same weekday."""
    return snapshot is not None and snapshot.weekday == today


class TaskStore:
    """
    In-memory ordered task list for the current day.

    Only the main loop touches it, so there is no locking. Index-based
    mutations silently ignore out-of-range indexes.
    """

    def __init__(self, tasks: Iterable[Task] = ()) -> None:
        self._tasks: list[Task] = list(tasks)

    @classmethod
    def from_sources(
        cls,
        template_tasks: Sequence[str],
        snapshot: DailySnapshot | None,
        today: Weekday,
    ) -> TaskStore:
        base = [Task(status=TaskStatus.TODO, info=text) for text in template_tasks]
        if snapshot is not None and snapshot_applies(snapshot, today):
            tasks = merge_tasks(base, snapshot.tasks)
            logger.info(
                "Merged snapshot: template=%d saved=%d result=%d",
                len(base),
                len(snapshot.tasks),
                len(tasks),
            )
        else:
            if snapshot is not None:
                logger.info("Ignoring snapshot from %s (today is %s)", snapshot.weekday, today)
            tasks = base
        return cls(tasks)

    # ---- queries ----

    @property
    def tasks(self) -> list[Task]:
        """A copy of the current list, safe to hand to the renderer or saver."""
        return [Task(status=t.status, info=t.info) for t in self._tasks]

    def __len__(self) -> int:
        return len(self._tasks)

    def __getitem__(self, index: int) -> Task:
        return self._tasks[index]

    def is_empty(self) -> bool:
        return not self._tasks

    def _valid(self, index: int) -> bool:
        return 0 <= index < len(self._tasks)

    def clamp(self, index: int) -> int:
        """Nearest valid index, or 0 for an empty list."""
        if not self._tasks:
            return 0
        return min(max(index, 0), len(self._tasks) - 1)

    # ---- mutations ----

    def set_status(self, index: int, status: TaskStatus) -> bool:
        if not self._valid(index):
            return False
        self._tasks[index].status = status
        return True

    def mark_done(self, index: int) -> bool:
        return self.set_status(index, TaskStatus.DONE)

    def mark_todo(self, index: int) -> bool:
        return self.set_status(index, TaskStatus.TODO)

    def insert(self, text: str) -> Task:
        task = Task(status=TaskStatus.TODO, info=text)
        self._tasks.append(task)
        logger.debug("Inserted task %r", text)
        return task

    def remove(self, index: int) -> Task | None:
        if not self._valid(index):
            return None
        task = self._tasks.pop(index)
        logger.debug("Removed task %r", task.info)
        return task

    def to_snapshot(self, saved_at: dt.datetime | None) -> DailySnapshot:
        return DailySnapshot(tasks=self.tasks, saved_at=saved_at)
