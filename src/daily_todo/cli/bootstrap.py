# src/daily_todo/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- loads the weekday template (fatal if corrupt),
- loads today's snapshot (best-effort),
- merges them into the TaskStore and wraps everything in AppState.
"""

from __future__ import annotations

import datetime as dt
import logging

from ..config import get_settings
from ..core.state import AppState
from ..tasks.persistence import SnapshotFile, TemplateFile
from ..tasks.task_models import Weekday
from ..tasks.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_initial_state(*, settings=None, today: dt.date | None = None) -> AppState:
    """
    Create AppState from the provided settings.

    `today` defaults to the local date; tests pass a fixed one. Raises
    CorruptFileError when the template file is malformed.
    """
    if settings is None:
        settings = get_settings()
    if today is None:
        today = dt.date.today()

    weekday = Weekday.of(today)
    template = TemplateFile(settings.template_path).load_or_create()
    snapshot = SnapshotFile(settings.snapshot_path).load()

    store = TaskStore.from_sources(template.task_texts(weekday), snapshot, weekday)
    logger.info("Initial state for %s: %d tasks", weekday, len(store))

    return AppState(
        settings=settings,
        template=template,
        today=weekday,
        task_store=store,
    )
