"""Interactive play: mode selection, reading gestures and running a match."""

from __future__ import annotations

import enum
import random
import re
import sys
from dataclasses import dataclass, field
from typing import TextIO

from rpsgame.rules import Ruleset

_SEPARATOR = "----------------------------------\n"
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

_MODE_MENU = (
    "Select game mode:\n"
    "1 - Human vs Human\n"
    "2 - Human vs Computer\n"
    "3 - Computer vs Computer\n"
    "Enter choice (or type -1 to exit): "
)


def _leading_int(line: str) -> int | None:
    """Integer at the start of ``line`` (after blanks), or None if there is none."""
    match = _LEADING_INT.match(line)
    return int(match.group(1)) if match else None


class Mode(enum.IntEnum):
    """Who plays against whom."""

    HUMAN_VS_HUMAN = 1
    HUMAN_VS_COMPUTER = 2
    COMPUTER_VS_COMPUTER = 3

    def player_names(self) -> tuple[str, str]:
        """Display names of the first and second player."""
        if self is Mode.COMPUTER_VS_COMPUTER:
            return ("Computer 1", "Computer 2")
        if self is Mode.HUMAN_VS_COMPUTER:
            return ("Human", "Computer")
        return ("Human 1", "Human 2")


class Console:
    """Line-based text input and output for the game."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout

    def write(self, text: str) -> None:
        """Write ``text`` as is and flush it."""
        self._out.write(text)
        self._out.flush()

    def read_line(self) -> str:
        """Read one line; raise EOFError when the input is exhausted."""
        line = self._in.readline()
        if not line:
            raise EOFError("no more input")
        return line


def read_mode(console: Console) -> Mode | None:
    """Ask for a game mode until a valid one is given; None means the user quit."""
    console.write(_MODE_MENU)
    while True:
        value = _leading_int(console.read_line())
        if value == -1:
            return None
        if value is not None and value in Mode._value2member_map_:
            return Mode(value)
        console.write("Invalid choice! Please enter 1, 2, or 3, or -1 to exit: ")


def read_gesture(console: Console, ruleset: Ruleset) -> int | None:
    """Ask for a gesture number until a valid one is given; None means the user quit."""
    listing = ", ".join(f"{number}={name}" for number, name in enumerate(ruleset.gestures))
    console.write(f"Enter your gesture ({listing} or type -1 to exit): ")
    last = len(ruleset.gestures) - 1
    while True:
        value = _leading_int(console.read_line())
        if value == -1:
            return None
        if value is not None and 0 <= value <= ruleset.highest_choice:
            return value
        console.write(f"Invalid input! Please enter a number between 0 and {last} or -1 to exit: ")


@dataclass
class Game:
    """A match played until one side reaches ``target`` round wins.

    With ``confirm_rounds`` set, a computer-only match asks after every round
    whether to go on.
    """

    ruleset: Ruleset
    mode: Mode
    console: Console
    rng: random.Random | None = None
    confirm_rounds: bool = False
    target: int = 4
    scores: list[int] = field(default_factory=lambda: [0, 0], init=False)

    def play(self) -> str | None:
        """Run the match; return the winner's name, or None if it was abandoned."""
        names = self.mode.player_names()
        while max(self.scores) < self.target:
            self.console.write(_SEPARATOR)
            choices = self._choose(names)
            if choices is None:
                break
            self._score_round(choices, names)
            if (
                self.confirm_rounds
                and self.mode is Mode.COMPUTER_VS_COMPUTER
                and not self._wants_to_continue()
            ):
                break

        if self.scores[0] >= self.target:
            winner = names[0]
        elif self.scores[1] >= self.target:
            winner = names[1]
        else:
            self.console.write("Game exited before completion.\n")
            return None
        self.console.write(f"{winner} wins the game!\n")
        return winner

    def _human(self, name: str) -> int | None:
        self.console.write(f"{name}: ")
        return read_gesture(self.console, self.ruleset)

    def _computer(self, name: str) -> int:
        gesture = self.ruleset.random_gesture(self.rng)
        self.console.write(f"{name} chose: {self.ruleset.gesture_name(gesture)}\n")
        return gesture

    def _choose(self, names: tuple[str, str]) -> tuple[int, int] | None:
        if self.mode is Mode.COMPUTER_VS_COMPUTER:
            return self._computer(names[0]), self._computer(names[1])
        first = self._human(names[0])
        if first is None:
            return None
        if self.mode is Mode.HUMAN_VS_COMPUTER:
            return first, self._computer(names[1])
        second = self._human(names[1])
        if second is None:
            return None
        return first, second

    def _score_round(self, choices: tuple[int, int], names: tuple[str, str]) -> None:
        first, second = choices
        name = self.ruleset.gesture_name
        self.console.write(f"{name(first)} vs {name(second)}\n")
        outcome = self.ruleset.determine_winner(first, second)
        if outcome == 1:
            self.console.write(f"{names[0]} wins this round!\n")
            self.scores[0] += 1
        elif outcome == 0:
            self.console.write("It's a tie! Play again.\n")
        else:
            self.console.write(f"{names[1]} wins this round!\n")
            self.scores[1] += 1
        self.console.write(
            f"Score: {names[0]} - {self.scores[0]} | {names[1]} - {self.scores[1]}\n"
        )

    def _wants_to_continue(self) -> bool:
        self.console.write("Type 'cont' to continue or 'exit' to quit: ")
        while True:
            words = self.console.read_line().split()
            if not words:
                continue
            if words[0] in ("cont", "exit"):
                return words[0] == "cont"
            self.console.write("Invalid input! Type 'cont' to continue or 'exit' to quit: ")