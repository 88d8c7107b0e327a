# src/daily_todo/core/session.py

"""
Interaction state machine.

Two modes:
- Navigate: browse the list, change statuses, delete, quit.
- Compose: type the text of a new task.

The draft text only exists inside the Compose variant. The session never
persists anything itself; it reports QUIT and the loop does the saving.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum

from ..tasks.task_store import TaskStore
from .keys import COMPOSE_BINDINGS, NAVIGATE_BINDINGS, Action, Key, is_printable

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Navigate:
    pass


@dataclass(frozen=True, slots=True)
class Compose:
    draft: str = ""


Mode = Navigate | Compose


class Outcome(Enum):
    CONTINUE = "continue"
    QUIT = "quit"


@dataclass(slots=True)
class Session:
    mode: Mode = field(default_factory=Navigate)
    selected: int = 0

    @property
    def draft_text(self) -> str:
        return self.mode.draft if isinstance(self.mode, Compose) else ""

    @property
    def composing(self) -> bool:
        return isinstance(self.mode, Compose)

    def handle_key(self, key: Key, store: TaskStore) -> Outcome:
        if isinstance(self.mode, Compose):
            self._handle_compose(key, self.mode, store)
            return Outcome.CONTINUE
        return self._handle_navigate(key, store)

    # ---- Navigate ----

    def _handle_navigate(self, key: Key, store: TaskStore) -> Outcome:
        action = NAVIGATE_BINDINGS.get(key)
        if action is None:
            return Outcome.CONTINUE

        if action is Action.QUIT:
            logger.info("Quit requested.")
            return Outcome.QUIT
        if action is Action.COMPOSE:
            self.mode = Compose()
            return Outcome.CONTINUE

        # Everything below needs a selected task.
        if store.is_empty():
            return Outcome.CONTINUE

        n = len(store)
        if action is Action.MOVE_DOWN:
            self.selected = (self.selected + 1) % n
        elif action is Action.MOVE_UP:
            self.selected = (self.selected - 1 + n) % n
        elif action is Action.MARK_DONE:
            store.mark_done(self.selected)
        elif action is Action.MARK_TODO:
            store.mark_todo(self.selected)
        elif action is Action.DELETE:
            store.remove(self.selected)
            self.selected = store.clamp(self.selected)
        return Outcome.CONTINUE

    # ---- Compose ----

    def _handle_compose(self, key: Key, mode: Compose, store: TaskStore) -> None:
        action = COMPOSE_BINDINGS.get(key)
        if action is Action.CANCEL:
            self.mode = Navigate()
        elif action is Action.CONFIRM:
            store.insert(mode.draft)
            self.mode = Navigate()
            self.selected = store.clamp(self.selected)
        elif action is Action.BACKSPACE:
            self.mode = Compose(mode.draft[:-1])
        elif is_printable(key):
            self.mode = Compose(mode.draft + key)
