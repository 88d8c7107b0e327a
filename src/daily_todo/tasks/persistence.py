# src/daily_todo/tasks/persistence.py

"""
JSON files backing the app.

- TemplateFile: the weekday template. Strict: a file that exists but does not
  parse is fatal. A missing or unreadable file is replaced by the default.
- SnapshotFile: today's saved list. Lenient: any problem reading it means
  "no snapshot", and a failed save is logged and otherwise ignored.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

from ..core.errors import CorruptFileError
from .task_models import DailySnapshot, WeekdayTemplate

logger = logging.getLogger(__name__)

def _write_json_atomic(path: Path, data: object) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp = path.with_suffix(path.suffix + ".tmp")
    tmp.write_text(json.dumps(data, ensure_ascii=False, indent=2), "utf-8")
    os.replace(tmp, path)


class TemplateFile:
    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load_or_create(self) -> WeekdayTemplate:
        """
        Load the template, or write and return the default one.

        Raises CorruptFileError if the file is readable but malformed.
        """
        try:
            raw = self.path.read_bytes()
        except OSError as e:
            logger.info("No usable template at %s (%s); writing defaults.", self.path, e)
            template = WeekdayTemplate.default()
            self.save(template)
            return template

        try:
            template = WeekdayTemplate.from_json(json.loads(raw.decode("utf-8")))
        except ValueError as e:
            # json.JSONDecodeError and UnicodeDecodeError are ValueErrors too.
            raise CorruptFileError(self.path, str(e)) from e

        logger.info("Loaded template %s (%d weekdays)", self.path, len(template.days))
        return template

    def save(self, template: WeekdayTemplate) -> bool:
        try:
            _write_json_atomic(self.path, template.to_json())
        except OSError:
            logger.exception("Failed to write template to %s", self.path)
            return False
        return True


class SnapshotFile:
    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load(self) -> DailySnapshot | None:
        if not self.path.exists():
            return None
        try:
            snapshot = DailySnapshot.from_json(json.loads(self.path.read_text("utf-8")))
        except (OSError, ValueError):
            logger.warning("Ignoring unreadable snapshot %s", self.path, exc_info=True)
            return None
        logger.info(
            "Loaded snapshot %s: %d tasks saved at %s",
            self.path,
            len(snapshot.tasks),
            snapshot.saved_at,
        )
        return snapshot

    def save(self, snapshot: DailySnapshot) -> bool:
        try:
            _write_json_atomic(self.path, snapshot.to_json())
        except OSError:
            logger.exception("Failed to save snapshot to %s", self.path)
            return False
        logger.info("Saved snapshot: %d tasks to %s", len(snapshot.tasks), self.path)
        return True
