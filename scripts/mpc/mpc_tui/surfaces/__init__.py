"""Terminal surface contract and backend exports."""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum

REGULAR_PAIR = 0
HIGHLIGHT_PAIR = 1

DEFAULT_POLL_MS = 16


class Glyph(Enum):
    UL_CORNER = "ul_corner"
    UR_CORNER = "ur_corner"
    LL_CORNER = "ll_corner"
    LR_CORNER = "lr_corner"
    HLINE = "hline"
    VLINE = "vline"


class TerminalSurface(ABC):
    """Drawing and input boundary consumed by the frame engine.

    Draw calls behave like a terminal: they write at the current draw
    position and leave it just past the written text.
    """

    @abstractmethod
    def size(self) -> tuple[int, int]:
        """Return (width, height) in character cells."""

    @abstractmethod
    def move(self, row: int, col: int) -> None:
        ...

    @abstractmethod
    def draw_glyph(self, glyph: Glyph, pair: int | None = None) -> None:
        ...

    @abstractmethod
    def draw_text(self, text: str, pair: int | None = None, dim: bool = False) -> None:
        ...

    @abstractmethod
    def clear(self) -> None:
        ...

    @abstractmethod
    def present(self) -> None:
        ...

    @abstractmethod
    def poll_key(self, timeout_ms: int = DEFAULT_POLL_MS) -> str | None:
        """Wait at most ``timeout_ms`` for one key; ``None`` means no key."""

    def setup(self) -> None:
        pass

    def teardown(self) -> None:
        pass

    def __enter__(self) -> TerminalSurface:
        self.setup()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.teardown()


def create_surface(backend: str) -> TerminalSurface:
    if backend == "rich":
        from mpc_tui.surfaces.rich_surface import RichSurface

        return RichSurface()
    if backend == "curses":
        from mpc_tui.surfaces.curses_surface import CursesSurface

        return CursesSurface()
    raise ValueError(f"unknown backend: {backend}")
