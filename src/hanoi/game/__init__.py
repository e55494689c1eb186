"""Game management layer — engine and phase state machine.

Quick start::

    from hanoi.game import GameEngine, GamePhase, MoveOutcome

    engine = GameEngine()
    engine.initialize()
    engine.acknowledge_greeting()
    engine.submit_keys("l", "r")
"""

from hanoi.game.engine import GameEngine
from hanoi.game.interfaces import GamePhase, IGameEngine, MoveOutcome
from hanoi.game.state import GameState, MoveRecord

__all__ = [
    # Interfaces
    "GamePhase",
    "IGameEngine",
    "MoveOutcome",
    # Concrete
    "GameEngine",
    "GameState",
    "MoveRecord",
]
