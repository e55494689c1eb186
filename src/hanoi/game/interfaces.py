"""Abstract interfaces for the game layer.

The presentation shell depends on :class:`IGameEngine`, never on the
concrete engine, so it can be driven by a fake in tests.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from hanoi.core.board import Board
    from hanoi.core.enums import PegLabel


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a game."""

    GREETING = auto()
    AWAITING_MOVE = auto()
    ASSESSING = auto()  # a command is being judged
    WON = auto()
    EXITING = auto()

    @property
    def is_terminal(self) -> bool:
        return self == GamePhase.EXITING


class MoveOutcome(IntEnum):
    """Result of submitting a command."""

    REJECTED = auto()
    APPLIED = auto()
    WON = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IGameEngine(ABC):
    """Interface for the game engine consumed by the shell."""

    @abstractmethod
    def initialize(self) -> None:
        """Set up a new game at the greeting."""

    @abstractmethod
    def current_phase(self) -> GamePhase:
        """Phase the shell should dispatch on."""

    @abstractmethod
    def board_snapshot(self) -> Board:
        """Independent copy of the board for rendering."""

    @abstractmethod
    def acknowledge_greeting(self) -> None:
        """Leave the greeting and start accepting moves."""

    @abstractmethod
    def submit_command(
        self, source: PegLabel | None, destination: PegLabel | None
    ) -> MoveOutcome:
        """Judge a command and apply it if legal."""

    @abstractmethod
    def submit_keys(self, first: str, second: str) -> MoveOutcome:
        """Same as :meth:`submit_command`, from two raw keystrokes."""

    @abstractmethod
    def acknowledge_win(self) -> None:
        """Leave the win screen; the game is over."""

    @abstractmethod
    def abandon(self) -> None:
        """Quit before winning."""

    @property
    @abstractmethod
    def move_count(self) -> int:
        """Number of applied moves."""
