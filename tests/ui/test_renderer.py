"""Tests for scene building and the curses renderer."""

from __future__ import annotations

import curses

from hanoi.core.board import Board
from hanoi.core.enums import Disk, PegLabel
from hanoi.core.types import FULL_PEG
from hanoi.ui.renderer import CursesRenderer, Span, build_scene, disk_cell, scene_text
from hanoi.ui.strings import ENGLISH
from hanoi.ui.theme import Paint, SceneTheme

PALETTE = {paint: int(paint) << 8 for paint in Paint}


class FakeWindow:
    """Records ``addstr`` calls as a grid of text."""

    def __init__(self, height: int = 40, width: int = 120) -> None:
        self.height = height
        self.width = width
        self.calls: list[tuple[int, int, str, int]] = []
        self.refreshed = 0
        self.erased = 0

    def erase(self) -> None:
        self.erased += 1
        self.calls.clear()

    def refresh(self) -> None:
        self.refreshed += 1

    def addstr(self, y: int, x: int, text: str, attr: int = 0) -> None:
        if y >= self.height or x + len(text) > self.width:
            raise curses.error("addwstr() returned ERR")
        self.calls.append((y, x, text, attr))

    def lines(self) -> list[str]:
        rows: dict[int, list[str]] = {}
        for y, x, text, _ in self.calls:
            row = rows.setdefault(y, [])
            while len(row) < x + len(text):
                row.append(" ")
            row[x : x + len(text)] = list(text)
        return ["".join(rows.get(y, [])).rstrip() for y in range(max(rows, default=-1) + 1)]


class TestDiskCell:
    def test_widths_fill_the_peg(self) -> None:
        theme = SceneTheme.color()
        for disk in Disk:
            cell = disk_cell(disk, theme)
            assert sum(len(span.text) for span in cell) == theme.peg_width

    def test_small_disk_is_centred(self) -> None:
        cell = disk_cell(Disk.SMALL, SceneTheme.color())
        assert [(len(s.text), s.paint) for s in cell] == [
            (4, Paint.SPACER),
            (7, Paint.SMALL),
            (4, Paint.SPACER),
        ]

    def test_large_disk_has_no_padding(self) -> None:
        cell = disk_cell(Disk.LARGE, SceneTheme.color())
        assert cell == [Span("x" * 15, Paint.LARGE)]

    def test_empty_slot_is_blank(self) -> None:
        assert disk_cell(Disk.NONE, SceneTheme.color()) == [Span("x" * 15, Paint.SPACER)]


class TestBuildScene:
    def test_row_count(self) -> None:
        rows = build_scene(Board.initial(), SceneTheme.color())
        assert len(rows) == 5  # three slots, base plates, labels

    def test_rows_have_equal_width(self) -> None:
        rows = build_scene(Board.initial(), SceneTheme.color())
        widths = {sum(len(s.text) for s in row) for row in rows}
        assert widths == {2 * 4 + 3 * 15 + 2 * 4}

    def test_base_plates(self) -> None:
        rows = build_scene(Board.initial(), SceneTheme.color())
        plates = [s for s in rows[3] if s.paint == Paint.BASE]
        assert len(plates) == 3

    def test_plain_text_initial(self) -> None:
        text = scene_text(Board.initial())
        lines = text.splitlines()
        assert lines[0].strip() == "-" * 7
        assert lines[1].strip() == "=" * 11
        assert lines[2].strip() == "#" * 15
        assert lines[3].count("^" * 15) == 3
        assert lines[4].split() == ["l", "m", "r"]

    def test_plain_text_follows_board(self) -> None:
        board = Board.from_pegs({PegLabel.RIGHT: FULL_PEG})
        lines = scene_text(board).splitlines()
        # Right peg starts after two leading spacers, two cells and two spacers.
        offset = 4 * 4 + 2 * 15
        assert lines[2][offset:] == "#" * 15
        assert lines[2][:offset].strip() == ""


class TestCursesRenderer:
    def test_greeting(self) -> None:
        window = FakeWindow()
        CursesRenderer(window, PALETTE).draw_greeting()
        lines = window.lines()
        assert lines[:3] == list(ENGLISH.banner)
        assert "Welcome!" in lines
        assert lines[-1] == "Press any key to start."
        assert window.refreshed == 1

    def test_board_screen_shows_counter_and_help(self) -> None:
        window = FakeWindow()
        CursesRenderer(window, PALETTE).draw_board(Board.initial(), 3)
        lines = window.lines()
        assert "Moves: 3" in lines
        assert ENGLISH.how_to_move in lines
        assert ENGLISH.how_to_quit in lines

    def test_disk_spans_use_palette(self) -> None:
        window = FakeWindow()
        CursesRenderer(window, PALETTE).draw_board(Board.initial(), 0)
        attrs = {attr for _, _, text, attr in window.calls if text == "x" * 7}
        assert attrs == {PALETTE[Paint.SMALL]}

    def test_win_screen(self) -> None:
        window = FakeWindow()
        board = Board.from_pegs({PegLabel.RIGHT: FULL_PEG})
        CursesRenderer(window, PALETTE, SceneTheme.plain()).draw_win(board, 7)
        lines = window.lines()
        assert "Congratulations!" in lines
        assert "You have won the game." in lines
        assert "Solved in 7 moves." in lines
        assert lines[-1] == "Press any key to exit."

    def test_redraw_erases_first(self) -> None:
        window = FakeWindow()
        renderer = CursesRenderer(window, PALETTE)
        renderer.draw_greeting()
        renderer.draw_board(Board.initial(), 0)
        assert window.erased == 2
        assert "Welcome!" not in window.lines()

    def test_small_terminal_is_clipped_not_fatal(self) -> None:
        window = FakeWindow(height=6, width=30)
        CursesRenderer(window, PALETTE).draw_board(Board.initial(), 0)
        assert window.refreshed == 1
        assert window.lines()[0] == ENGLISH.banner[0]
