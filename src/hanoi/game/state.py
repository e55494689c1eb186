"""Game state — board, phase and move history."""

from __future__ import annotations

from dataclasses import dataclass, field

from hanoi.core.board import Board
from hanoi.core.enums import Disk
from hanoi.core.move import Command
from hanoi.core.rules import Rules
from hanoi.game.interfaces import GamePhase


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """A single entry in the move history."""

    command: Command
    disk: Disk


@dataclass
class GameState:
    """Manages game lifecycle data: board, phase, pending command, history.

    This is a pure data/logic class — no I/O.
    """

    board: Board = field(default_factory=Board.initial, init=False)
    phase: GamePhase = field(default=GamePhase.GREETING, init=False)
    pending: Command | None = field(default=None, init=False)
    move_history: list[MoveRecord] = field(default_factory=list, init=False)

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, board: Board | None = None) -> None:
        """Initialise (or reset) the game."""
        self.board = board.copy() if board is not None else Board.initial()
        self.phase = GamePhase.GREETING
        self.pending = None
        self.move_history.clear()

    # ── Move application ─────────────────────────────────────────────────

    def apply_move(self, command: Command) -> MoveRecord:
        """Apply a validated command and return the history record.

        Caller is responsible for the legality check.
        """
        source, destination = command.source, command.destination
        if source is None or destination is None:
            raise ValueError(f"Cannot apply malformed command: {command}")
        disk = self.board.move_top(source, destination)
        record = MoveRecord(command=command, disk=disk)
        self.move_history.append(record)
        if Rules.is_won(self.board, destination):
            self.phase = GamePhase.WON
        return record

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_won(self) -> bool:
        return self.phase == GamePhase.WON

    @property
    def move_count(self) -> int:
        return len(self.move_history)
