"""Scene rendering — pegs and disks as coloured text blocks.

:func:`build_scene` is pure and returns rows of ``(text, paint)`` spans;
:class:`CursesRenderer` paints them onto a curses window.
"""

from __future__ import annotations

import curses
import logging
from typing import Any, NamedTuple

from hanoi.core.board import Board
from hanoi.core.enums import Disk, PegLabel
from hanoi.core.types import PEG_HEIGHT
from hanoi.ui.interfaces import IRenderer
from hanoi.ui.strings import ENGLISH, Strings
from hanoi.ui.theme import DISK_PAINT, Paint, SceneTheme

_LOGGER = logging.getLogger(__name__)

_LEADING_SPACERS = 2


class Span(NamedTuple):
    text: str
    paint: Paint


Row = list[Span]


# ── Scene building ───────────────────────────────────────────────────────────


def _block(theme: SceneTheme, paint: Paint, width: int) -> Span:
    return Span(theme.fill(paint) * width, paint)


def disk_cell(disk: Disk, theme: SceneTheme) -> list[Span]:
    """One peg-wide cell: the disk centred, padded with spacer paint."""
    if not disk:
        return [_block(theme, Paint.SPACER, theme.peg_width)]
    width = theme.disk_widths[disk]
    pad = (theme.peg_width - width) // 2
    spans = [_block(theme, DISK_PAINT[disk], width)]
    if pad:
        spans.insert(0, _block(theme, Paint.SPACER, pad))
        spans.append(_block(theme, Paint.SPACER, theme.peg_width - width - pad))
    return spans


def _row(cells: list[list[Span]], spacer: Span) -> Row:
    row: Row = [spacer] * _LEADING_SPACERS
    for i, cell in enumerate(cells):
        if i:
            row.append(spacer)
        row.extend(cell)
    return row


def build_scene(board: Board, theme: SceneTheme) -> list[Row]:
    """Disk rows top to bottom, then the base plates, then peg labels."""
    spacer = _block(theme, Paint.SPACER, theme.spacer_width)
    rows: list[Row] = []
    for slot in range(PEG_HEIGHT):
        cells = [disk_cell(board[label][slot], theme) for label in PegLabel]
        rows.append(_row(cells, spacer))

    plates = [[_block(theme, Paint.BASE, theme.peg_width)] for _ in PegLabel]
    rows.append(_row(plates, spacer))

    # Labels sit on the plain background, not on spacer blocks.
    labels = [
        [Span(label.char.center(theme.peg_width), Paint.TEXT)] for label in PegLabel
    ]
    rows.append(_row(labels, Span(" " * theme.spacer_width, Paint.TEXT)))
    return rows


def scene_text(board: Board, theme: SceneTheme | None = None) -> str:
    """Plain-text rendering, handy for logs and tests."""
    theme = theme or SceneTheme.plain()
    lines = [
        "".join(span.text for span in row).rstrip() for row in build_scene(board, theme)
    ]
    return "\n".join(lines)


# ── Curses painter ───────────────────────────────────────────────────────────


class CursesRenderer(IRenderer):
    """Draws full screens on a curses window.

    Args:
        window: The curses screen (anything with ``erase``/``addstr``/``refresh``).
        palette: Curses attribute per :class:`Paint`.
        theme: Scene geometry and fill characters.
        strings: Player-facing text.
    """

    def __init__(
        self,
        window: Any,
        palette: dict[Paint, int],
        theme: SceneTheme | None = None,
        strings: Strings = ENGLISH,
    ) -> None:
        self._window = window
        self._palette = palette
        self._theme = theme or SceneTheme.color()
        self._strings = strings
        self._y = 0

    # ── IRenderer impl ───────────────────────────────────────────────────

    def draw_greeting(self) -> None:
        self._begin()
        self._banner()
        self._text("")
        self._text(self._strings.greeting)
        self._text("")
        self._text(self._strings.press_to_start)
        self._window.refresh()

    def draw_board(self, board: Board, move_count: int) -> None:
        s = self._strings
        self._begin()
        self._banner()
        self._scene(board)
        self._text("")
        self._text(s.moves(move_count))
        self._text(s.how_to_move)
        self._text(s.goal)
        self._text(s.how_to_quit)
        self._window.refresh()

    def draw_win(self, board: Board, move_count: int) -> None:
        s = self._strings
        self._begin()
        self._scene(board)
        self._text("")
        self._banner()
        self._text("")
        for line in s.congratulations.splitlines():
            self._text(line)
        self._text(s.solved(move_count))
        self._text(s.press_to_exit)
        self._window.refresh()

    # ── Internal helpers ─────────────────────────────────────────────────

    def _begin(self) -> None:
        self._window.erase()
        self._y = 0

    def _banner(self) -> None:
        for line in self._strings.banner:
            self._text(line)

    def _scene(self, board: Board) -> None:
        self._text("")
        for row in build_scene(board, self._theme):
            x = 0
            for span in row:
                self._put(x, span)
                x += len(span.text)
            self._y += 1

    def _text(self, line: str) -> None:
        self._put(0, Span(line, Paint.TEXT))
        self._y += 1

    def _put(self, x: int, span: Span) -> None:
        if not span.text:
            return
        try:
            self._window.addstr(self._y, x, span.text, self._palette[span.paint])
        except curses.error:
            # Terminal too small; the rest of the screen is still usable.
            _LOGGER.debug("Clipped span at (%d, %d): %r", self._y, x, span.text)
