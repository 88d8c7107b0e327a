# src/daily_todo/core/keys.py

"""
Key names shared by the key poller and the session state machine.

Printable keys are their own one-character string; everything else uses one
of the names below.
"""

from __future__ import annotations

from enum import StrEnum
from types import MappingProxyType

Key = str

KEY_ESC = "esc"
KEY_ENTER = "enter"
KEY_BACKSPACE = "backspace"
KEY_TAB = "tab"
KEY_UP = "up"
KEY_DOWN = "down"
KEY_LEFT = "left"
KEY_RIGHT = "right"
KEY_HOME = "home"
KEY_END = "end"
KEY_DELETE = "delete"


class Action(StrEnum):
    MOVE_DOWN = "move_down"
    MOVE_UP = "move_up"
    MARK_DONE = "mark_done"
    MARK_TODO = "mark_todo"
    DELETE = "delete"
    COMPOSE = "compose"
    QUIT = "quit"
    CANCEL = "cancel"
    CONFIRM = "confirm"
    BACKSPACE = "backspace"


NAVIGATE_BINDINGS = MappingProxyType(
    {
        "j": Action.MOVE_DOWN,
        KEY_DOWN: Action.MOVE_DOWN,
        "k": Action.MOVE_UP,
        KEY_UP: Action.MOVE_UP,
        "l": Action.MARK_DONE,
        "h": Action.MARK_TODO,
        "x": Action.DELETE,
        "i": Action.COMPOSE,
        "q": Action.QUIT,
    }
)

COMPOSE_BINDINGS = MappingProxyType(
    {
        KEY_ESC: Action.CANCEL,
        KEY_ENTER: Action.CONFIRM,
        KEY_BACKSPACE: Action.BACKSPACE,
    }
)


def is_printable(key: Key) -> bool:
    return len(key) == 1 and key.isprintable()
