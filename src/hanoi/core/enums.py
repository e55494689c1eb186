"""Core enumerations for the Towers of Hanoi domain."""

from __future__ import annotations

from enum import IntEnum


class Disk(IntEnum):
    """Disk sizes in ascending order. ``NONE`` marks an empty slot."""

    NONE = 0
    SMALL = 1
    MEDIUM = 2
    LARGE = 3

    def __bool__(self) -> bool:
        return self is not Disk.NONE

    def __str__(self) -> str:
        return self.name.lower()


class PegLabel(IntEnum):
    """The three pegs, left to right."""

    LEFT = 0
    MIDDLE = 1
    RIGHT = 2

    @property
    def char(self) -> str:
        """Keystroke that names this peg, e.g. 'l'."""
        return _LABEL_CHARS[self]

    @classmethod
    def from_char(cls, char: str) -> PegLabel:
        """Strict lookup, e.g. 'm' → MIDDLE. Raises on unknown characters."""
        label = cls.lookup(char)
        if label is None:
            raise ValueError(f"Invalid peg character: {char!r}")
        return label

    @classmethod
    def lookup(cls, char: str) -> PegLabel | None:
        """Lenient lookup; ``None`` for anything that is not a peg key."""
        return _CHAR_LABELS.get(char)

    def __str__(self) -> str:
        return self.name.lower()


_LABEL_CHARS: dict[PegLabel, str] = {
    PegLabel.LEFT: "l",
    PegLabel.MIDDLE: "m",
    PegLabel.RIGHT: "r",
}
_CHAR_LABELS: dict[str, PegLabel] = {v: k for k, v in _LABEL_CHARS.items()}


class RejectReason(IntEnum):
    """Why a command was refused. Internal only, never shown to the player."""

    INVALID_LABEL = 1
    SAME_PEG = 2
    EMPTY_SOURCE = 3
    FULL_DESTINATION = 4
    SIZE_VIOLATION = 5
