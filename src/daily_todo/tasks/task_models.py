# src/daily_todo/tasks/task_models.py

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from enum import IntEnum, StrEnum
from typing import Any


class TaskStatus(StrEnum):
    """Status of a single task. Values are the on-disk spelling."""

    TODO = "Todo"
    DONE = "Done"

    @classmethod
    def from_json(cls, raw: Any) -> TaskStatus:
        if not isinstance(raw, str):
            raise ValueError(f"task status must be a string, got {raw!r}")
        return cls(raw)


class Weekday(IntEnum):
    """Weekday numbered like ``date.weekday()`` (Monday is 0)."""

    MON = 0
    TUE = 1
    WED = 2
    THU = 3
    FRI = 4
    SAT = 5
    SUN = 6

    @property
    def short(self) -> str:
        return self.name.capitalize()

    @property
    def long(self) -> str:
        return _LONG_NAMES[self.value]

    @classmethod
    def of(cls, when: dt.date) -> Weekday:
        return cls(when.weekday())

    @classmethod
    def parse(cls, raw: str) -> Weekday:
        """Accept short ("Mon") or full ("Monday") names, case-insensitively."""
        key = raw.strip().lower()
        for day in cls:
            if key in (day.short.lower(), day.long.lower()):
                return day
        raise ValueError(f"unknown weekday {raw!r}")

    def __str__(self) -> str:
        return self.short

    def __format__(self, spec: str) -> str:
        return format(self.short, spec)


_LONG_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


@dataclass(slots=True)
class Task:
    status: TaskStatus
    info: str

    def to_json(self) -> dict[str, str]:
        return {"status": self.status.value, "info": self.info}

    @classmethod
    def from_json(cls, raw: Any) -> Task:
        if not isinstance(raw, dict):
            raise ValueError(f"task entry must be an object, got {raw!r}")
        info = raw.get("info")
        if not isinstance(info, str):
            raise ValueError(f"task info must be a string, got {info!r}")
        return cls(status=TaskStatus.from_json(raw.get("status")), info=info)


@dataclass(frozen=True, slots=True)
class WeekdayTask:
    """Recurring tasks for one weekday plus a short label for the day."""

    tasks: tuple[str, ...]
    day_info: str

    def to_json(self) -> dict[str, Any]:
        return {"tasks": list(self.tasks), "day_info": self.day_info}

    @classmethod
    def from_json(cls, raw: Any) -> WeekdayTask:
        if not isinstance(raw, dict):
            raise ValueError(f"weekday entry must be an object, got {raw!r}")
        tasks = raw.get("tasks")
        day_info = raw.get("day_info")
        if not isinstance(tasks, list) or not all(isinstance(t, str) for t in tasks):
            raise ValueError("weekday 'tasks' must be a list of strings")
        if not isinstance(day_info, str):
            raise ValueError("weekday 'day_info' must be a string")
        return cls(tasks=tuple(tasks), day_info=day_info)


@dataclass(frozen=True, slots=True)
class WeekdayTemplate:
    """
    The per-weekday recurring task list.

    Any subset of weekdays may be missing. Loaded once per process and never
    mutated afterwards.
    """

    days: dict[Weekday, WeekdayTask] = field(default_factory=dict)

    @classmethod
    def default(cls) -> WeekdayTemplate:
        return cls(
            days={
                Weekday.MON: WeekdayTask(tasks=("check mail",), day_info="business day"),
                Weekday.FRI: WeekdayTask(tasks=("cleanup mail",), day_info="wrap up day"),
            }
        )

    def for_day(self, weekday: Weekday) -> WeekdayTask | None:
        return self.days.get(weekday)

    def task_texts(self, weekday: Weekday) -> list[str]:
        entry = self.for_day(weekday)
        return list(entry.tasks) if entry is not None else []

    def to_json(self) -> dict[str, Any]:
        return {"tasks": {day.short: entry.to_json() for day, entry in sorted(self.days.items())}}

    @classmethod
    def from_json(cls, raw: Any) -> WeekdayTemplate:
        """
        Parse either the wrapped form ``{"tasks": {"Mon": {...}}}`` or a bare
        weekday mapping. Raises ValueError on anything else.
        """
        if not isinstance(raw, dict):
            raise ValueError("template must be a JSON object")
        mapping = raw
        if set(raw) == {"tasks"} and isinstance(raw["tasks"], dict):
            mapping = raw["tasks"]
        days: dict[Weekday, WeekdayTask] = {}
        for key, entry in mapping.items():
            days[Weekday.parse(str(key))] = WeekdayTask.from_json(entry)
        return cls(days=days)


@dataclass(slots=True)
class DailySnapshot:
    """Saved state of today's list from an earlier session."""

    tasks: list[Task]
    saved_at: dt.datetime | None = None

    @property
    def weekday(self) -> Weekday | None:
        if self.saved_at is None:
            return None
        return Weekday.of(self.saved_at)

    def to_json(self) -> dict[str, Any]:
        return {
            "tasks": [t.to_json() for t in self.tasks],
            "date": self.saved_at.isoformat() if self.saved_at is not None else None,
        }

    @classmethod
    def from_json(cls, raw: Any) -> DailySnapshot:
        if not isinstance(raw, dict):
            raise ValueError("snapshot must be a JSON object")
        tasks_raw = raw.get("tasks")
        if not isinstance(tasks_raw, list):
            raise ValueError("snapshot 'tasks' must be a list")
        date_raw = raw.get("date")
        saved_at: dt.datetime | None = None
        if date_raw is not None:
            if not isinstance(date_raw, str):
                raise ValueError("snapshot 'date' must be an ISO-8601 string")
            saved_at = dt.datetime.fromisoformat(date_raw)
        return cls(tasks=[Task.from_json(t) for t in tasks_raw], saved_at=saved_at)
