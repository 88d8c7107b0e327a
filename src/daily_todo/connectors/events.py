# src/daily_todo/connectors/events.py

"""
Keyboard + tick event source.

A background thread polls the keyboard with a timeout bounded by the time left
until the next tick, and pushes Input/Tick events onto one FIFO queue. The
main loop blocks on next_event().

If the thread dies, a disconnect marker is queued and next_event() raises
EventSourceDisconnected from then on.
"""

from __future__ import annotations

import logging
import queue
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass

from ..core.errors import EventSourceDisconnected
from ..core.keys import Key
from ..core.ports import KeyPoller

logger = logging.getLogger(__name__)

DEFAULT_TICK_RATE = 0.25


@dataclass(frozen=True, slots=True)
class Input:
    key: Key


@dataclass(frozen=True, slots=True)
class Tick:
    pass


Event = Input | Tick


@dataclass(frozen=True, slots=True)
class _Disconnected:
    cause: BaseException | None


class EventSource:
    def __init__(
        self,
        poller: KeyPoller,
        *,
        tick_rate: float = DEFAULT_TICK_RATE,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._poller = poller
        self._tick_rate = max(0.0, float(tick_rate))
        self._clock = clock
        self._queue: queue.Queue[Event | _Disconnected] = queue.Queue()
        self._stop_event = threading.Event()
        self._disconnected: _Disconnected | None = None
        self._thread = threading.Thread(
            target=self._run,
            daemon=True,
            name="daily-todo-events",
        )

    def start(self) -> EventSource:
        self._thread.start()
        logger.debug("Event source started (tick_rate=%.3fs).", self._tick_rate)
        return self

    def stop(self, timeout: float | None = 1.0) -> None:
        """Ask the thread to finish after its current poll and wait for it."""
        self._stop_event.set()
        if self._thread.is_alive():
            self._thread.join(timeout=timeout)

    def next_event(self) -> Event:
        if self._disconnected is not None:
            raise EventSourceDisconnected(self._disconnected.cause)
        item = self._queue.get()
        if isinstance(item, _Disconnected):
            self._disconnected = item
            raise EventSourceDisconnected(item.cause)
        return item

    def __iter__(self):
        while True:
            yield self.next_event()

    def _run(self) -> None:
        cause: BaseException | None = None
        try:
            self._loop()
        except BaseException as e:
            cause = e
            logger.exception("Event source thread crashed.")
        finally:
            self._queue.put(_Disconnected(cause))

    def _loop(self) -> None:
        last_tick = self._clock()
        while not self._stop_event.is_set():
            timeout = max(0.0, self._tick_rate - (self._clock() - last_tick))
            if self._poller.poll(timeout):
                key = self._poller.read_key()
                if key is not None:
                    self._queue.put(Input(key))
            if self._clock() - last_tick >= self._tick_rate:
                self._queue.put(Tick())
                last_tick = self._clock()
