"""Command-line entry point for the gesture game."""

from __future__ import annotations

import argparse
import random

from rpsgame.game import Console, Game, read_mode
from rpsgame.rules import get_ruleset

_RULE_NAMES = ("classic", "elemental", "modular")


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rpsgame",
        description="Play a rock-paper-scissors style game on the console.",
    )
    parser.add_argument(
        "--rules",
        choices=_RULE_NAMES,
        default="classic",
        help="gesture set and winning rule (default: classic)",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for computer choices")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run one interactive match; return the process exit status."""
    args = _parser().parse_args(argv)
    ruleset = get_ruleset(args.rules)
    console = Console()
    rng = random.Random(args.seed)
    try:
        mode = read_mode(console)
        if mode is None:
            console.write("Exiting game.\n")
            return 0
        game = Game(ruleset, mode, console, rng=rng, confirm_rounds=args.rules == "classic")
        game.play()
    except EOFError:
        console.write("\n")
        return 1
    except KeyboardInterrupt:
        console.write("\n")
        return 130
    return 0


if __name__ == "__main__":
    raise SystemExit(main())