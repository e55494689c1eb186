"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from hanoi.game.engine import GameEngine


@pytest.fixture
def new_engine() -> GameEngine:
    """A freshly initialised engine sitting at the greeting."""
    engine = GameEngine()
    engine.initialize()
    return engine


@pytest.fixture
def engine(new_engine: GameEngine) -> GameEngine:
    """An engine past the greeting, waiting for the first move."""
    new_engine.acknowledge_greeting()
    return new_engine


@pytest.fixture(autouse=True)
def _reset_package_logger() -> Iterator[None]:
    """Undo logging setup done by bootstrap tests."""
    logger = logging.getLogger("hanoi")
    handlers = list(logger.handlers)
    propagate = logger.propagate
    level = logger.level
    yield
    logger.handlers[:] = handlers
    logger.propagate = propagate
    logger.setLevel(level)
