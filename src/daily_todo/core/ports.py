# src/daily_todo/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the core loop.

The loop depends on Protocols instead of the terminal and the filesystem,
so tests can drive it with scripted keys and an in-memory snapshot store.
"""

import datetime as dt
from dataclasses import dataclass
from typing import Protocol

from ..tasks.task_models import DailySnapshot, Task
from .keys import Key


class KeyPoller(Protocol):
    """Blocking-with-timeout access to the keyboard."""

    def poll(self, timeout: float) -> bool: ...

    def read_key(self) -> Key | None:
        """Next key press, or None for input that is not a key press."""
        ...


@dataclass(frozen=True, slots=True)
class Frame:
    """Everything the renderer needs for one redraw."""

    title: str
    tasks: tuple[Task, ...]
    selected: int
    composing: bool
    draft: str


class FrameRenderer(Protocol):
    def draw(self, frame: Frame) -> None: ...


class SnapshotRepo(Protocol):
    def load(self) -> DailySnapshot | None: ...

    def save(self, snapshot: DailySnapshot) -> bool: ...


class Clock(Protocol):
    def __call__(self) -> dt.datetime: ...
