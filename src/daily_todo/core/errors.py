# src/daily_todo/core/errors.py

from __future__ import annotations

from pathlib import Path


class DailyTodoError(Exception):
    """Base class for errors that end the program with a short message."""


class CorruptFileError(DailyTodoError):
    """The weekday template exists but cannot be parsed."""

    def __init__(self, path: str | Path, reason: str = "") -> None:
        self.path = Path(path)
        self.reason = reason
        msg = f"corrupt file: {self.path}"
        if reason:
            msg = f"{msg} ({reason})"
        super().__init__(msg)


class EventSourceDisconnected(DailyTodoError):
    """The input thread stopped, so no further events can arrive."""

    def __init__(self, cause: BaseException | None = None) -> None:
        self.cause = cause
        msg = "event source disconnected"
        if cause is not None:
            msg = f"{msg}: {cause!r}"
        super().__init__(msg)
