"""Move legality and win detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from hanoi.core.enums import Disk, PegLabel, RejectReason
from hanoi.core.types import BOTTOM_SLOT, FULL_PEG, Peg, free_index, top_disk, top_index

if TYPE_CHECKING:
    from hanoi.core.board import Board
    from hanoi.core.move import Command


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    START_PEG = PegLabel.LEFT

    @staticmethod
    def check_move(board: Board, command: Command) -> RejectReason | None:
        """Return why *command* is illegal on *board*, or ``None`` if legal.

        Checks run in a fixed order and the first failure wins.
        """
        source, destination = command.source, command.destination
        if source is None or destination is None:
            return RejectReason.INVALID_LABEL
        if source == destination:
            return RejectReason.SAME_PEG

        src_peg = board[source]
        dst_peg = board[destination]
        if top_index(src_peg) is None:
            return RejectReason.EMPTY_SOURCE
        if free_index(dst_peg) is None:
            return RejectReason.FULL_DESTINATION

        moving = top_disk(src_peg)
        target = top_disk(dst_peg)
        if target is not Disk.NONE and not moving < target:
            return RejectReason.SIZE_VIOLATION
        return None

    @staticmethod
    def is_legal(board: Board, command: Command) -> bool:
        return Rules.check_move(board, command) is None

    @staticmethod
    def is_won(board: Board, label: PegLabel) -> bool:
        """The largest disk sits at the bottom of a peg other than the start.

        Legal play keeps every peg ordered, so a large disk at the bottom
        means the other two are stacked above it.
        """
        if label == Rules.START_PEG:
            return False
        return board[label][BOTTOM_SLOT] == Disk.LARGE and Rules.is_stacked_properly(
            board[label]
        )

    @staticmethod
    def solved_peg(board: Board) -> PegLabel | None:
        for label in PegLabel:
            if Rules.is_won(board, label):
                return label
        return None

    @staticmethod
    def is_stacked_properly(peg: Peg) -> bool:
        """Biggest to smallest from the bottom up, all disks present."""
        return peg == FULL_PEG

    @staticmethod
    def is_gravity_packed(peg: Peg) -> bool:
        top = top_index(peg)
        return top is None or all(peg[top:])

    @staticmethod
    def is_ordered(peg: Peg) -> bool:
        """No larger disk rests on a smaller one."""
        disks = [d for d in peg if d]
        return all(a < b for a, b in zip(disks, disks[1:]))
