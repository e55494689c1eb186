"""Abstract collaborators of the game shell.

The shell only talks to these, so tests can swap in fakes for the
terminal, the screen and the keyboard.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hanoi.core.board import Board


class IRenderer(ABC):
    """Draws whole screens for each phase."""

    @abstractmethod
    def draw_greeting(self) -> None: ...

    @abstractmethod
    def draw_board(self, board: Board, move_count: int) -> None: ...

    @abstractmethod
    def draw_win(self, board: Board, move_count: int) -> None: ...


class IInputSource(ABC):
    """Blocking source of single keystrokes."""

    @abstractmethod
    def read_key(self) -> str:
        """Wait for one key and return it as a one-character string."""
