"""Board - disk placement on three pegs."""

from __future__ import annotations

from collections.abc import Iterator, Mapping

from hanoi.core.enums import Disk, PegLabel
from hanoi.core.types import (
    EMPTY_PEG,
    FULL_PEG,
    PEG_HEIGHT,
    Peg,
    free_index,
    top_index,
)


class Board:
    """Mutable three-peg board; every peg is kept gravity packed."""

    __slots__ = ("_pegs",)

    def __init__(self) -> None:
        # [peg label] -> slots, top first.
        self._pegs: list[list[Disk]] = [list(EMPTY_PEG) for _ in PegLabel]

    # -- Element access -----------------------------------------------------

    def __getitem__(self, label: PegLabel) -> Peg:
        return tuple(self._pegs[label])

    def __iter__(self) -> Iterator[tuple[PegLabel, Peg]]:
        for label in PegLabel:
            yield label, self[label]

    def is_empty(self, label: PegLabel) -> bool:
        return top_index(self[label]) is None

    def is_full(self, label: PegLabel) -> bool:
        return free_index(self[label]) is None

    # -- Mutation / copying -------------------------------------------------

    def move_top(self, source: PegLabel, destination: PegLabel) -> Disk:
        """Lift the top disk of *source* onto *destination*.

        Only checks capacity; size ordering is the caller's concern.
        """
        src = self._pegs[source]
        dst = self._pegs[destination]
        src_idx = top_index(tuple(src))
        dst_idx = free_index(tuple(dst))
        if src_idx is None:
            raise ValueError(f"No disk on the {source} peg")
        if dst_idx is None:
            raise ValueError(f"The {destination} peg is full")

        disk = src[src_idx]
        src[src_idx] = Disk.NONE
        dst[dst_idx] = disk
        return disk

    def copy(self) -> Board:
        b = Board()
        b._pegs = [peg.copy() for peg in self._pegs]
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Starting layout: the whole stack on the left peg."""
        b = cls()
        b._pegs[PegLabel.LEFT] = list(FULL_PEG)
        return b

    @classmethod
    def from_pegs(cls, pegs: Mapping[PegLabel, Peg]) -> Board:
        """Build an arbitrary layout, e.g. for tests or puzzles."""
        b = cls()
        for label, peg in pegs.items():
            if len(peg) != PEG_HEIGHT:
                raise ValueError(
                    f"Peg {label} needs {PEG_HEIGHT} slots, got {len(peg)}"
                )
            top = top_index(peg)
            if top is not None and not all(peg[top:]):
                raise ValueError(f"Peg {label} has a gap below a disk: {peg}")
            b._pegs[label] = [Disk(d) for d in peg]
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._pegs == other._pegs

    def __repr__(self) -> str:
        rows: list[str] = []
        for slot in range(PEG_HEIGHT):
            row = []
            for label in PegLabel:
                disk = self._pegs[label][slot]
                row.append(str(int(disk)) if disk else "|")
            rows.append(" ".join(row))
        rows.append(" ".join(label.char for label in PegLabel))
        return "\n".join(rows)
