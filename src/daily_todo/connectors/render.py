# src/daily_todo/connectors/render.py

from __future__ import annotations

import logging
import os

from rich.console import Console, Group
from rich.layout import Layout
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from ..core.ports import Frame
from ..tasks.task_models import TaskStatus

logger = logging.getLogger(__name__)

UNICODE_MARKERS = {TaskStatus.TODO: "☐", TaskStatus.DONE: "☑"}
ASCII_MARKERS = {TaskStatus.TODO: "[ ]", TaskStatus.DONE: "[D]"}

SELECTED_STYLE = "on magenta"
CURSOR = "▏"
KEY_HINTS = "j/k move  l done  h todo  i new  x delete  q save & quit"


def default_ascii_status() -> bool:
    return os.name == "nt"


def status_marker(status: TaskStatus, *, ascii_only: bool = False) -> str:
    markers = ASCII_MARKERS if ascii_only else UNICODE_MARKERS
    return markers[status]


def render_task_list(frame: Frame, *, ascii_only: bool = False) -> Text:
    text = Text()
    for idx, task in enumerate(frame.tasks):
        if idx:
            text.append("\n")
        line = f"{status_marker(task.status, ascii_only=ascii_only)} {task.info}"
        text.append(line, style=SELECTED_STYLE if idx == frame.selected else "")
    return text


def render_frame(frame: Frame, *, ascii_only: bool = False) -> Layout:
    """
    Build the full-screen layout:
    - header: weekday and its label
    - body: the task list, selected row highlighted
    - footer: "new task" input while composing, key hints otherwise
    """
    layout = Layout()
    layout.split_column(
        Layout(name="header", size=1),
        Layout(name="body"),
        Layout(name="footer", size=3),
    )
    layout["header"].update(Text(frame.title, style="bold"))
    layout["body"].update(render_task_list(frame, ascii_only=ascii_only))

    if frame.composing:
        draft = Text(frame.draft)
        draft.append(CURSOR, style="blink")
        layout["footer"].update(Panel(draft, title="new task", title_align="left"))
    else:
        layout["footer"].update(Group(Text(""), Text(KEY_HINTS, style="dim")))
    return layout


class RichRenderer:
    """
    Full-screen renderer on top of rich.live.Live.

    Use as a context manager: entering switches to the alternate screen,
    leaving restores the normal one. Refreshes happen only on draw().
    """

    def __init__(self, console: Console | None = None, *, ascii_only: bool | None = None) -> None:
        self.console = console or Console()
        self.ascii_only = default_ascii_status() if ascii_only is None else ascii_only
        self._live = Live(
            console=self.console,
            screen=True,
            auto_refresh=False,
            transient=True,
        )

    def __enter__(self) -> RichRenderer:
        self._live.start()
        logger.debug("Renderer started (%dx%d).", self.console.width, self.console.height)
        return self

    def __exit__(self, *exc_info) -> None:
        self._live.stop()
        logger.debug("Renderer stopped.")

    def draw(self, frame: Frame) -> None:
        self._live.update(render_frame(frame, ascii_only=self.ascii_only), refresh=True)
