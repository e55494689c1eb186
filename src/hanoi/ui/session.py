"""Curses terminal session — puts the terminal into game mode and back."""

from __future__ import annotations

import curses
import logging
from types import TracebackType
from typing import Any

from hanoi.ui.theme import Paint

_LOGGER = logging.getLogger(__name__)

# Colour pair numbers, one per paint.
_PAIRS: dict[Paint, int] = {
    Paint.TEXT: 1,
    Paint.SMALL: 2,
    Paint.LARGE: 3,
    Paint.MEDIUM: 4,
    Paint.BASE: 5,
    Paint.SPACER: 6,
}


class TerminalSession:
    """Owns the curses screen for the lifetime of a game.

    ``start`` switches to raw, non-echoing input and sets up colours;
    ``stop`` always hands the terminal back in its normal mode.
    Use as a context manager so the terminal is restored on errors too.
    """

    def __init__(self, use_color: bool = True) -> None:
        self._use_color = use_color
        self._window: Any = None
        self._palette: dict[Paint, int] = {}

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def window(self) -> Any:
        if self._window is None:
            raise RuntimeError("Terminal session not started")
        return self._window

    @property
    def palette(self) -> dict[Paint, int]:
        """Curses attribute for every paint."""
        return self._palette

    @property
    def is_active(self) -> bool:
        return self._window is not None

    @property
    def has_color(self) -> bool:
        return self._palette.get(Paint.SMALL, 0) != 0

    # ── Lifecycle ────────────────────────────────────────────────────────

    def start(self) -> Any:
        if self._window is not None:
            return self._window

        self._window = curses.initscr()
        try:
            curses.raw()
            curses.noecho()
            self._window.keypad(True)
            try:
                curses.curs_set(0)
            except curses.error:
                _LOGGER.debug("Terminal cannot hide the cursor")
            self._palette = self._init_palette()
        except Exception:
            self.stop()
            raise
        _LOGGER.info("Terminal session started (color=%s)", self.has_color)
        return self._window

    def stop(self) -> None:
        if self._window is None:
            return
        self._window.keypad(False)
        curses.noraw()
        curses.echo()
        curses.endwin()
        self._window = None
        _LOGGER.info("Terminal session stopped")

    def __enter__(self) -> TerminalSession:
        self.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.stop()

    # ── Internal helpers ─────────────────────────────────────────────────

    def _init_palette(self) -> dict[Paint, int]:
        if not self._use_color or not curses.has_colors():
            return {paint: curses.A_NORMAL for paint in Paint}

        curses.start_color()
        orange, grey = curses.COLOR_MAGENTA, curses.COLOR_WHITE
        if curses.can_change_color():
            # No orange or grey in the basic palette, so repurpose two slots.
            curses.init_color(curses.COLOR_BLUE, 1000, 500, 0)
            curses.init_color(curses.COLOR_MAGENTA, 300, 300, 300)
            orange, grey = curses.COLOR_BLUE, curses.COLOR_MAGENTA

        colors: dict[Paint, tuple[int, int]] = {
            Paint.TEXT: (curses.COLOR_WHITE, curses.COLOR_BLACK),
            Paint.SMALL: (curses.COLOR_RED, curses.COLOR_RED),
            Paint.MEDIUM: (orange, orange),
            Paint.LARGE: (curses.COLOR_YELLOW, curses.COLOR_YELLOW),
            Paint.BASE: (grey, grey),
            Paint.SPACER: (curses.COLOR_BLACK, curses.COLOR_BLACK),
        }
        for paint, (fg, bg) in colors.items():
            curses.init_pair(_PAIRS[paint], fg, bg)
        return {paint: curses.color_pair(_PAIRS[paint]) for paint in Paint}
