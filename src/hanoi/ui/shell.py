"""GameShell — the presentation loop around a game engine.

Asks the engine for its phase, shows the matching screen, and feeds
keystrokes back in. The engine never calls into the shell.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from hanoi.game.interfaces import GamePhase, IGameEngine, MoveOutcome
from hanoi.ui.interfaces import IInputSource, IRenderer
from hanoi.ui.renderer import scene_text

_LOGGER = logging.getLogger(__name__)

QUIT_KEY = "\x03"  # Ctrl-C; raw mode delivers it as a key, not a signal


class GameShell:
    """Drives one game from greeting to exit.

    Args:
        engine: The game to play.
        renderer: Screen painter.
        keys: Keystroke source.
    """

    __slots__ = ("_engine", "_renderer", "_keys", "_handlers")

    def __init__(
        self,
        engine: IGameEngine,
        renderer: IRenderer,
        keys: IInputSource,
    ) -> None:
        self._engine = engine
        self._renderer = renderer
        self._keys = keys
        self._handlers: dict[GamePhase, Callable[[], None]] = {
            GamePhase.GREETING: self._greet,
            GamePhase.AWAITING_MOVE: self._await_move,
            GamePhase.WON: self._congratulate,
        }

    # ── Public API ───────────────────────────────────────────────────────

    def run(self) -> None:
        """Tick until the engine reaches its terminal phase."""
        while not self._engine.current_phase().is_terminal:
            self.tick()

    def tick(self) -> None:
        """Handle exactly one screen of the current phase."""
        phase = self._engine.current_phase()
        handler = self._handlers.get(phase)
        if handler is None:
            raise RuntimeError(f"No screen for phase {phase.name}")
        handler()

    # ── Phase handlers ───────────────────────────────────────────────────

    def _greet(self) -> None:
        self._renderer.draw_greeting()
        if self._keys.read_key() == QUIT_KEY:
            self._engine.abandon()
            return
        self._engine.acknowledge_greeting()

    def _await_move(self) -> None:
        engine = self._engine
        self._renderer.draw_board(engine.board_snapshot(), engine.move_count)
        first = self._keys.read_key()
        if first == QUIT_KEY:
            engine.abandon()
            return
        second = self._keys.read_key()
        if second == QUIT_KEY:
            engine.abandon()
            return

        outcome = engine.submit_keys(first, second)
        # Rejections just redraw and wait for the next command.
        if outcome != MoveOutcome.REJECTED and _LOGGER.isEnabledFor(logging.DEBUG):
            _LOGGER.debug("Board:\n%s", scene_text(engine.board_snapshot()))

    def _congratulate(self) -> None:
        engine = self._engine
        self._renderer.draw_win(engine.board_snapshot(), engine.move_count)
        self._keys.read_key()
        engine.acknowledge_win()
