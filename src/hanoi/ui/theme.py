"""Visual theme constants for the terminal scene."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto

from hanoi.core.enums import Disk


class Paint(IntEnum):
    """Logical colour of a span; the session maps each to a curses attribute."""

    TEXT = auto()  # white on black
    SMALL = auto()  # red
    MEDIUM = auto()  # orange
    LARGE = auto()  # yellow
    BASE = auto()  # grey base plate
    SPACER = auto()  # black on black


DISK_PAINT: dict[Disk, Paint] = {
    Disk.SMALL: Paint.SMALL,
    Disk.MEDIUM: Paint.MEDIUM,
    Disk.LARGE: Paint.LARGE,
}


@dataclass(frozen=True)
class SceneTheme:
    """Geometry and fill characters for the peg scene."""

    peg_width: int
    spacer_width: int
    disk_widths: dict[Disk, int]
    fills: dict[Paint, str]  # character repeated to fill a span

    def fill(self, paint: Paint) -> str:
        return self.fills.get(paint, " ")

    @classmethod
    def color(cls) -> SceneTheme:
        """Solid colour blocks; foreground and background match."""
        return cls(
            peg_width=15,
            spacer_width=4,
            disk_widths={Disk.SMALL: 7, Disk.MEDIUM: 11, Disk.LARGE: 15},
            fills={paint: "x" for paint in Paint},
        )

    @classmethod
    def plain(cls) -> SceneTheme:
        """Glyph-only variant for terminals without colour."""
        return cls(
            peg_width=15,
            spacer_width=4,
            disk_widths={Disk.SMALL: 7, Disk.MEDIUM: 11, Disk.LARGE: 15},
            fills={
                Paint.TEXT: " ",
                Paint.SMALL: "-",
                Paint.MEDIUM: "=",
                Paint.LARGE: "#",
                Paint.BASE: "^",
                Paint.SPACER: " ",
            },
        )
