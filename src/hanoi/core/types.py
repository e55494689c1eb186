"""Peg type alias and slot helpers.

Slot layout inside a peg (gravity packed):
    index 0 = top
    index 1 = middle
    index 2 = bottom
"""

from __future__ import annotations

from typing import TypeAlias

from hanoi.core.enums import Disk

PEG_HEIGHT = 3
PEG_COUNT = 3

TOP_SLOT = 0
BOTTOM_SLOT = PEG_HEIGHT - 1

Peg: TypeAlias = tuple[Disk, ...]  # PEG_HEIGHT slots, top first

EMPTY_PEG: Peg = (Disk.NONE,) * PEG_HEIGHT
FULL_PEG: Peg = (Disk.SMALL, Disk.MEDIUM, Disk.LARGE)


def top_index(peg: Peg) -> int | None:
    """Index of the topmost occupied slot, or ``None`` for an empty peg."""
    for idx, disk in enumerate(peg):
        if disk:
            return idx
    return None


def free_index(peg: Peg) -> int | None:
    """Index of the slot a new disk would land in, or ``None`` when full."""
    top = top_index(peg)
    if top is None:
        return BOTTOM_SLOT
    if top == TOP_SLOT:
        return None
    return top - 1


def top_disk(peg: Peg) -> Disk:
    """Topmost disk, ``Disk.NONE`` if the peg is empty."""
    idx = top_index(peg)
    return Disk.NONE if idx is None else peg[idx]
