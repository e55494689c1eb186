"""Player-facing text for the terminal UI."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Strings:
    banner: tuple[str, ...]
    greeting: str
    press_to_start: str
    how_to_move: str
    goal: str
    how_to_quit: str
    move_counter: str  # "Moves: {count}"
    congratulations: str
    solved_in: str  # "Solved in {count} moves."
    press_to_exit: str

    def moves(self, count: int) -> str:
        return self.move_counter.format(count=count)

    def solved(self, count: int) -> str:
        return self.solved_in.format(count=count)


ENGLISH = Strings(
    banner=(
        ".==========================.",
        "|   THE TOWERS OF HANOI    |",
        ".==========================.",
    ),
    greeting="Welcome!",
    press_to_start="Press any key to start.",
    how_to_move="Type two letters: the peg to take from, then the peg to put on (l, m, r).",
    goal="Rebuild the stack, biggest at the bottom, on the middle or right peg.",
    how_to_quit="Ctrl-C quits.",
    move_counter="Moves: {count}",
    congratulations="Congratulations!\nYou have won the game.",
    solved_in="Solved in {count} moves.",
    press_to_exit="Press any key to exit.",
)
