# src/daily_todo/logging_setup.py

from __future__ import annotations

import contextlib
import logging
import logging.handlers
import sys
from collections.abc import Iterator
from pathlib import Path

LOG_FILENAME = "daily_todo.log"


class _ConsoleNoiseFilter(logging.Filter):
    """
    Keep the full-screen UI readable:
    - allow daily_todo logs at the console level
    - suppress Python warnings (captured as 'py.warnings') unless ERROR+
    - suppress third-party noise unless ERROR+
    """

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name

        if name == "daily_todo" or name.startswith("daily_todo."):
            return True

        if name == "py.warnings":
            return record.levelno >= logging.ERROR

        return record.levelno >= logging.ERROR


def setup_logging(
    *,
    log_dir: str | Path,
    console_level: int = logging.WARNING,
    file_level: int = logging.DEBUG,
) -> Path | None:
    """
    Configure logging with:
    - Console handler (stderr): filtered, WARNING+ by default so it does not
      scribble over the UI
    - File handler: full logs for debugging

    Call this ONCE, before the first log record. Returns the log file path,
    or None if the log directory is not writable (console logging only).
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    log_file: Path | None = Path(log_dir) / LOG_FILENAME
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_file), encoding="utf-8")
    except OSError:
        logging.getLogger(__name__).warning("Cannot write log file %s; logging to console only.", log_file)
        log_file = None
    else:
        fh.setLevel(file_level)
        fh.setFormatter(fmt)
        root.addHandler(fh)

    # Route warnings.warn(...) into logging as 'py.warnings'
    logging.captureWarnings(True)
    return log_file


def level_from_name(name: str, default: int = logging.WARNING) -> int:
    level = logging.getLevelName(str(name).strip().upper())
    return level if isinstance(level, int) else default


def _console_handler(root: logging.Logger) -> logging.Handler | None:
    for h in root.handlers:
        if any(isinstance(f, _ConsoleNoiseFilter) for f in h.filters):
            return h
    return None


@contextlib.contextmanager
def deferred_console(capacity: int = 1000) -> Iterator[None]:
    """
    Hold console log records while a full-screen UI owns the terminal.

    The stderr handler is swapped for a MemoryHandler with the same level and
    filter; buffered records are written to stderr once the block exits. The
    file handler is untouched.
    """
    root = logging.getLogger()
    ch = _console_handler(root)
    if ch is None:
        yield
        return

    buffer = logging.handlers.MemoryHandler(
        capacity,
        flushLevel=logging.CRITICAL + 1,
        target=ch,
        flushOnClose=True,
    )
    buffer.setLevel(ch.level)
    buffer.addFilter(_ConsoleNoiseFilter())

    root.removeHandler(ch)
    root.addHandler(buffer)
    try:
        yield
    finally:
        root.removeHandler(buffer)
        root.addHandler(ch)
        buffer.close()
