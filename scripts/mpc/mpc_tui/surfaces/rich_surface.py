"""Rich Live backend with termios keyboard polling."""

from __future__ import annotations

import logging
import os
import select
import sys
import time

from rich.console import Console
from rich.live import Live

from mpc_tui.surfaces import DEFAULT_POLL_MS
from mpc_tui.surfaces.buffer import BufferSurface

try:
    import termios
except ImportError:  # non-POSIX: the panel still renders, keys are ignored
    termios = None

logger = logging.getLogger(__name__)


class RichSurface(BufferSurface):
    """Cell grid presented through ``rich.live.Live`` on the alternate screen.

    Uses termios non-canonical mode (ICANON/ECHO off, VMIN=0/VTIME=0) instead
    of tty.setraw() so Live's alternate screen rendering keeps working over
    SSH.
    """

    def __init__(self, console: Console | None = None):
        self.console = console or Console()
        width, height = self.console.size
        super().__init__(width, height)
        self._live: Live | None = None
        self._fd: int | None = None
        self._old_settings = None

    def size(self) -> tuple[int, int]:
        width, height = self.console.size
        if (width, height) != (self.width, self.height):
            self.resize(width, height)
        return width, height

    def setup(self) -> None:
        if termios is not None and sys.stdin.isatty():
            fd = sys.stdin.fileno()
            try:
                old_settings = termios.tcgetattr(fd)
                new = termios.tcgetattr(fd)
                new[3] &= ~(termios.ICANON | termios.ECHO)
                new[6][termios.VMIN] = 0
                new[6][termios.VTIME] = 0
                termios.tcsetattr(fd, termios.TCSADRAIN, new)
                self._old_settings = old_settings
                self._fd = fd
            except termios.error as exc:
                logger.warning(f"Keyboard input unavailable: {exc}")
        try:
            self._live = Live(console=self.console, screen=True, auto_refresh=False)
            self._live.start()
        except BaseException:
            self.teardown()
            raise
        logger.debug("Rich surface started")

    def teardown(self) -> None:
        live, self._live = self._live, None
        try:
            if live is not None:
                live.stop()
        finally:
            if self._old_settings is not None and self._fd is not None:
                termios.tcsetattr(self._fd, termios.TCSADRAIN, self._old_settings)
                self._old_settings = None
            self._fd = None
        logger.debug("Rich surface stopped")

    def present(self) -> None:
        super().present()
        if self._live is not None:
            self._live.update(self.to_text(), refresh=True)

    def poll_key(self, timeout_ms: int = DEFAULT_POLL_MS) -> str | None:
        if self.keys:
            return self.keys.popleft()
        timeout = max(0, timeout_ms) / 1000
        if self._fd is None:
            time.sleep(timeout)
            return None
        ready, _, _ = select.select([self._fd], [], [], timeout)
        if not ready:
            return None
        try:
            return os.read(self._fd, 1).decode("utf-8", errors="ignore") or None
        except OSError:
            return None
