"""Keyboard input from a curses window."""

from __future__ import annotations

from typing import Any

from hanoi.ui.interfaces import IInputSource

# Returned for keys with no single-character form (arrows, F-keys, ...).
NON_CHARACTER_KEY = "\0"


class KeyboardInput(IInputSource):
    """Reads one raw keystroke at a time, without echo or Enter."""

    __slots__ = ("_window",)

    def __init__(self, window: Any) -> None:
        self._window = window

    def read_key(self) -> str:
        code = self._window.getch()
        if 0 <= code < 256:
            return chr(code)
        return NON_CHARACTER_KEY
