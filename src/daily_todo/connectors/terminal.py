# src/daily_todo/connectors/terminal.py

"""
Raw keyboard access for POSIX terminals.

raw_mode() is the only place that changes terminal attributes, and it always
restores them. PosixKeyPoller turns bytes from a file descriptor into key
names (see core/keys.py).
"""

from __future__ import annotations

import codecs
import contextlib
import logging
import os
import select
import termios
from collections.abc import Iterator

from ..core.keys import (
    KEY_BACKSPACE,
    KEY_DELETE,
    KEY_DOWN,
    KEY_END,
    KEY_ENTER,
    KEY_ESC,
    KEY_HOME,
    KEY_LEFT,
    KEY_RIGHT,
    KEY_TAB,
    KEY_UP,
    Key,
)

logger = logging.getLogger(__name__)

# How long to wait after a lone ESC for the rest of an escape sequence.
ESCAPE_DELAY = 0.025

_CSI_FINAL = {
    "A": KEY_UP,
    "B": KEY_DOWN,
    "C": KEY_RIGHT,
    "D": KEY_LEFT,
    "H": KEY_HOME,
    "F": KEY_END,
}

_CSI_TILDE = {
    "1": KEY_HOME,
    "3": KEY_DELETE,
    "4": KEY_END,
    "7": KEY_HOME,
    "8": KEY_END,
}

_CONTROL = {
    "\r": KEY_ENTER,
    "\n": KEY_ENTER,
    "\x7f": KEY_BACKSPACE,
    "\x08": KEY_BACKSPACE,
    "\t": KEY_TAB,
}


@contextlib.contextmanager
def raw_mode(fd: int) -> Iterator[None]:
    """
    Put the terminal on `fd` into raw input mode for the duration of the block.

    Input: no echo, no line buffering, no signal keys, no flow control, CR not
    translated. Output post-processing stays on so newlines still return the
    carriage. Attributes are restored on every exit path.
    """
    saved = termios.tcgetattr(fd)
    attrs = termios.tcgetattr(fd)
    attrs[0] &= ~(termios.BRKINT | termios.ICRNL | termios.INPCK | termios.ISTRIP | termios.IXON)
    attrs[2] |= termios.CS8
    attrs[3] &= ~(termios.ECHO | termios.ICANON | termios.IEXTEN | termios.ISIG)
    attrs[6][termios.VMIN] = 1
    attrs[6][termios.VTIME] = 0
    termios.tcsetattr(fd, termios.TCSAFLUSH, attrs)
    logger.debug("Raw mode enabled on fd=%s", fd)
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)
        logger.debug("Raw mode disabled on fd=%s", fd)


class PosixKeyPoller:
    """Reads keys from a file descriptor (normally stdin in raw mode)."""

    def __init__(self, fd: int, *, escape_delay: float = ESCAPE_DELAY) -> None:
        self._fd = fd
        self._escape_delay = escape_delay
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

    def poll(self, timeout: float) -> bool:
        readable, _, _ = select.select([self._fd], [], [], max(0.0, timeout))
        return bool(readable)

    def _read_char(self) -> str:
        while True:
            chunk = os.read(self._fd, 1)
            if not chunk:
                raise EOFError("keyboard input closed")
            ch = self._decoder.decode(chunk)
            if ch:
                return ch

    def read_key(self) -> Key | None:
        ch = self._read_char()
        if ch == "\x1b":
            return self._read_escape()
        if ch in _CONTROL:
            return _CONTROL[ch]
        if ch.isprintable():
            return ch
        # Other control characters (Ctrl-C included) are not keys we use.
        return None

    def _read_escape(self) -> Key | None:
        if not self.poll(self._escape_delay):
            return KEY_ESC
        intro = self._read_char()
        if intro not in ("[", "O"):
            # Alt+<key>; not bound to anything.
            return None

        params = ""
        while True:
            ch = self._read_char()
            if ch.isdigit() or ch == ";":
                params += ch
                continue
            break

        if ch == "~":
            return _CSI_TILDE.get(params.split(";")[0])
        return _CSI_FINAL.get(ch)
