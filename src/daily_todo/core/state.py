# src/daily_todo/core/state.py

from __future__ import annotations

from dataclasses import dataclass, field

from ..tasks.task_models import Weekday, WeekdayTemplate
from ..tasks.task_store import TaskStore
from .ports import Frame
from .session import Session


@dataclass
class AppState:
    # Settings are kept on the state so connectors can read tick rate, paths, etc.
    settings: object

    template: WeekdayTemplate
    today: Weekday
    task_store: TaskStore

    session: Session = field(default_factory=Session)

    @property
    def title(self) -> str:
        entry = self.template.for_day(self.today)
        if entry is None:
            return f"no daily occuring task for {self.today.short}"
        return f"{self.today.short}: {entry.day_info}"

    def frame(self) -> Frame:
        return Frame(
            title=self.title,
            tasks=tuple(self.task_store.tasks),
            selected=self.session.selected,
            composing=self.session.composing,
            draft=self.session.draft_text,
        )
