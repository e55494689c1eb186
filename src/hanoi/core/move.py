"""Command value object (two-keystroke notation)."""

from __future__ import annotations

from dataclasses import dataclass

from hanoi.core.enums import PegLabel


@dataclass(frozen=True, slots=True)
class Command:
    """Immutable source → destination request captured from input.

    A label is ``None`` when the keystroke did not name a peg; such a
    command is still assessable and is always rejected.
    """

    source: PegLabel | None
    destination: PegLabel | None

    # ── Parsing / display ────────────────────────────────────────────────

    @classmethod
    def from_keys(cls, first: str, second: str) -> Command:
        """Build from two raw keystrokes, e.g. ('l', 'r')."""
        return cls(PegLabel.lookup(first), PegLabel.lookup(second))

    @classmethod
    def parse(cls, text: str) -> Command:
        """Strict parser for two-letter notation, e.g. 'lr'."""
        if len(text) != 2:
            raise ValueError(f"Invalid command: {text!r}")
        return cls(PegLabel.from_char(text[0]), PegLabel.from_char(text[1]))

    @property
    def is_well_formed(self) -> bool:
        return self.source is not None and self.destination is not None

    def __str__(self) -> str:
        src = self.source.char if self.source is not None else "?"
        dst = self.destination.char if self.destination is not None else "?"
        return f"{src}{dst}"
