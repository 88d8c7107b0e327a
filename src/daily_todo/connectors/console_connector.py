# src/daily_todo/connectors/console_connector.py

from __future__ import annotations

import datetime as dt
import logging

from ..core.ports import Clock, FrameRenderer, SnapshotRepo
from ..core.session import Outcome
from ..core.state import AppState
from .events import EventSource, Input

logger = logging.getLogger(__name__)


def _now_local() -> dt.datetime:
    return dt.datetime.now().astimezone()


def run_console_loop(
    state: AppState,
    events: EventSource,
    renderer: FrameRenderer,
    snapshots: SnapshotRepo,
    *,
    clock: Clock = _now_local,
) -> None:
    """
    Draw, wait for the next event, apply it; repeat until quit.

    Ticks only cause a redraw. On quit the current list is saved (best-effort)
    and the function returns. EventSourceDisconnected and renderer errors
    propagate to the caller.
    """
    logger.info("Console loop started (%d tasks, %s).", len(state.task_store), state.title)

    while True:
        renderer.draw(state.frame())

        event = events.next_event()
        if not isinstance(event, Input):
            continue

        outcome = state.session.handle_key(event.key, state.task_store)
        if outcome is Outcome.QUIT:
            saved = snapshots.save(state.task_store.to_snapshot(saved_at=clock()))
            if not saved:
                logger.warning("Quitting without a saved snapshot.")
            break

    logger.info("Console loop finished.")
