# src/daily_todo/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, then runs the full-screen loop:
- raw keyboard mode for the whole session (always restored),
- key/tick event thread feeding the main loop,
- rich Live renderer on the alternate screen.
"""

from __future__ import annotations

import logging
import os
import sys

from ..cli.bootstrap import create_initial_state
from ..config import Settings, get_settings
from ..connectors.console_connector import run_console_loop
from ..connectors.events import EventSource
from ..connectors.render import RichRenderer
from ..connectors.terminal import PosixKeyPoller, raw_mode
from ..core.errors import DailyTodoError
from ..logging_setup import deferred_console, level_from_name, setup_logging
from ..tasks.persistence import SnapshotFile

logger = logging.getLogger(__name__)


def run(settings: Settings) -> None:
    state = create_initial_state(settings=settings)
    snapshots = SnapshotFile(settings.snapshot_path)

    fd = sys.stdin.fileno()
    if not os.isatty(fd):
        raise DailyTodoError("stdin is not a terminal")

    events = EventSource(PosixKeyPoller(fd), tick_rate=settings.tick_rate)

    with raw_mode(fd):
        events.start()
        try:
            with deferred_console(), RichRenderer(ascii_only=settings.ascii_status) as renderer:
                run_console_loop(state, events, renderer, snapshots)
        finally:
            events.stop()


def main() -> int:
    settings = get_settings()
    setup_logging(log_dir=settings.log_dir, console_level=level_from_name(settings.log_level))

    logger.info("Starting %s...", settings.app_name)
    logger.debug("Template=%s snapshot=%s", settings.template_path, settings.snapshot_path)

    try:
        run(settings)
    except DailyTodoError as e:
        logger.debug("Fatal error.", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted; nothing saved.")
        return 130

    logger.info("Bye.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
