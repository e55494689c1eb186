"""GameEngine — the rules-driven state machine behind a game.

Owns the :class:`GameState`; the shell drives it through the
:class:`IGameEngine` operations and only ever sees board snapshots.
"""

from __future__ import annotations

import logging

from hanoi.core.board import Board
from hanoi.core.enums import PegLabel
from hanoi.core.move import Command
from hanoi.core.rules import Rules
from hanoi.game.interfaces import GamePhase, IGameEngine, MoveOutcome
from hanoi.game.state import GameState, MoveRecord

_LOGGER = logging.getLogger(__name__)


class GameEngine(IGameEngine):
    """Validates and applies moves, detects the win, tracks the phase.

    Operations called outside their phase are ignored (logged at DEBUG)
    rather than raised, so a shell can never crash the game.
    """

    __slots__ = ("_state",)

    def __init__(self) -> None:
        self._state = GameState()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def phase(self) -> GamePhase:
        return self._state.phase

    @property
    def move_count(self) -> int:
        return self._state.move_count

    @property
    def move_history(self) -> list[MoveRecord]:
        return list(self._state.move_history)

    # ── IGameEngine impl ─────────────────────────────────────────────────

    def initialize(self, board: Board | None = None) -> None:
        self._state.setup(board)
        _LOGGER.info("New game")

    def current_phase(self) -> GamePhase:
        return self._state.phase

    def board_snapshot(self) -> Board:
        return self._state.board.copy()

    def acknowledge_greeting(self) -> None:
        if not self._in_phase("acknowledge_greeting", GamePhase.GREETING):
            return
        self._state.phase = GamePhase.AWAITING_MOVE

    def submit_keys(self, first: str, second: str) -> MoveOutcome:
        return self._assess(Command.from_keys(first, second))

    def submit_command(
        self, source: PegLabel | None, destination: PegLabel | None
    ) -> MoveOutcome:
        return self._assess(Command(source, destination))

    def acknowledge_win(self) -> None:
        if not self._in_phase("acknowledge_win", GamePhase.WON):
            return
        self._state.phase = GamePhase.EXITING
        _LOGGER.info("Exiting after win")

    def abandon(self) -> None:
        if not self._in_phase(
            "abandon", GamePhase.GREETING, GamePhase.AWAITING_MOVE
        ):
            return
        self._state.phase = GamePhase.EXITING
        _LOGGER.info("Game abandoned after %d moves", self.move_count)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _assess(self, command: Command) -> MoveOutcome:
        if not self._in_phase("submit_command", GamePhase.AWAITING_MOVE):
            return MoveOutcome.REJECTED

        state = self._state
        state.phase = GamePhase.ASSESSING
        state.pending = command
        try:
            reason = Rules.check_move(state.board, command)
            if reason is not None:
                # Act like we didn't hear the command.
                _LOGGER.debug("Rejected %s: %s", command, reason.name)
                state.phase = GamePhase.AWAITING_MOVE
                return MoveOutcome.REJECTED

            state.phase = GamePhase.AWAITING_MOVE
            record = state.apply_move(command)
            _LOGGER.info("Move %d: %s (%s disk)", self.move_count, command, record.disk)
        finally:
            state.pending = None

        if state.is_won:
            _LOGGER.info("Won in %d moves", self.move_count)
            return MoveOutcome.WON
        return MoveOutcome.APPLIED

    def _in_phase(self, operation: str, *phases: GamePhase) -> bool:
        if self._state.phase in phases:
            return True
        _LOGGER.debug("Ignoring %s during %s", operation, self._state.phase.name)
        return False
