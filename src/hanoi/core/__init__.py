"""Core domain layer — pure Towers of Hanoi logic with zero external dependencies.

Quick start::

    from hanoi.core import Board, Command, Rules

    board = Board.initial()
    cmd = Command.parse("lr")
    if Rules.is_legal(board, cmd):
        board.move_top(cmd.source, cmd.destination)
"""

from hanoi.core.board import Board
from hanoi.core.enums import Disk, PegLabel, RejectReason
from hanoi.core.move import Command
from hanoi.core.rules import Rules
from hanoi.core.types import (
    BOTTOM_SLOT,
    EMPTY_PEG,
    FULL_PEG,
    PEG_COUNT,
    PEG_HEIGHT,
    TOP_SLOT,
    Peg,
    free_index,
    top_disk,
    top_index,
)

__all__ = [
    # Enums
    "Disk",
    "PegLabel",
    "RejectReason",
    # Types / helpers
    "BOTTOM_SLOT",
    "EMPTY_PEG",
    "FULL_PEG",
    "PEG_COUNT",
    "PEG_HEIGHT",
    "Peg",
    "TOP_SLOT",
    "free_index",
    "top_disk",
    "top_index",
    # Domain objects
    "Board",
    "Command",
    "Rules",
]
