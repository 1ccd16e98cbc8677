"""Gesture sets and the rules that decide who wins a round."""

from __future__ import annotations

import random
from collections.abc import Callable, Mapping
from dataclasses import dataclass

INVALID_GESTURE = "invalid"

_CLASSIC_GESTURES = ("rock", "paper", "scissors", "lizard", "spock")
_ELEMENTAL_GESTURES = ("rock", "fire", "scissors", "sponge", "paper", "air", "water")

# Which gestures each gesture defeats.
_CLASSIC_BEATS: Mapping[int, frozenset[int]] = {
    0: frozenset({2, 3}),  # rock crushes scissors and lizard
    1: frozenset({0, 4}),  # paper covers rock, disproves spock
    2: frozenset({1, 3}),  # scissors cuts paper, decapitates lizard
    3: frozenset({1, 4}),  # lizard eats paper, poisons spock
    4: frozenset({0, 2}),  # spock vaporizes rock, smashes scissors
}

_ELEMENTAL_BEATS: Mapping[int, frozenset[int]] = {
    0: frozenset({1, 2, 3}),  # rock pounds fire, crushes scissors and sponge
    1: frozenset({2, 3, 4}),  # fire melts scissors, burns paper and sponge
    2: frozenset({3, 4, 5}),  # scissors swish through air, cut paper and sponge
    3: frozenset({4, 5, 6}),  # sponge soaks paper, uses air pockets, absorbs water
    4: frozenset({0, 5, 6}),  # paper fans air, covers rock, floats on water
    5: frozenset({0, 1, 6}),  # air blows out fire, erodes rock, evaporates water
    6: frozenset({0, 1, 2}),  # water erodes rock, puts out fire, rusts scissors
}


def _table_winner(beats: Mapping[int, frozenset[int]], first: int, second: int) -> int:
    if first == second:
        return 0
    return 1 if second in beats.get(first, frozenset()) else -1


def classic_winner(first: int, second: int) -> int:
    """Rock-paper-scissors-lizard-spock: 1 if first wins, 0 on a tie, -1 otherwise."""
    return _table_winner(_CLASSIC_BEATS, first, second)


def elemental_winner(first: int, second: int) -> int:
    """Seven-gesture elemental game: 1 if first wins, 0 on a tie, -1 otherwise."""
    return _table_winner(_ELEMENTAL_BEATS, first, second)


def modular_winner(first: int, second: int, num_gestures: int = 7, step: int = 0) -> int:
    """Decide a round by the distance between gestures modulo the gesture count.

    Starting at ``step``, the first player wins if the distance equals a step
    reached before half the gesture count; reaching the halfway step means the
    second player wins.
    """
    if first == second:
        return 0
    distance = (first - second + num_gestures) % num_gestures
    half = num_gestures // 2
    while step != half:
        if distance == step:
            return 1
        step += 1
    return -1


def _modular_seven(first: int, second: int) -> int:
    return modular_winner(first, second, len(_ELEMENTAL_GESTURES), 0)


@dataclass(frozen=True)
class Ruleset:
    """A named set of gestures together with the rule that decides a round.

    ``highest_choice`` is the largest number a human player may enter.
    """

    name: str
    gestures: tuple[str, ...]
    winner: Callable[[int, int], int]
    highest_choice: int

    def gesture_name(self, gesture: int) -> str:
        """Name of the gesture numbered ``gesture``, or ``"invalid"``."""
        if 0 <= gesture < len(self.gestures):
            return self.gestures[gesture]
        return INVALID_GESTURE

    def determine_winner(self, first: int, second: int) -> int:
        """1 if the first gesture wins, 0 on a tie, -1 if the second wins."""
        return self.winner(first, second)

    def random_gesture(self, rng: random.Random | None = None) -> int:
        """Pick a gesture uniformly at random."""
        source = rng if rng is not None else random
        return source.randrange(len(self.gestures))


_RULESETS: dict[str, Ruleset] = {
    "classic": Ruleset("classic", _CLASSIC_GESTURES, classic_winner, 4),
    "elemental": Ruleset("elemental", _ELEMENTAL_GESTURES, elemental_winner, 6),
    "modular": Ruleset("modular", _ELEMENTAL_GESTURES, _modular_seven, 7),
}


def get_ruleset(name: str) -> Ruleset:
    """Return the ruleset registered under ``name``."""
    try:
        return _RULESETS[name]
    except KeyError:
        known = ", ".join(sorted(_RULESETS))
        raise ValueError(f"unknown ruleset {name!r}; choose one of: {known}") from None