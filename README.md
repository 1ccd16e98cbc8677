# rpsgame

A small console game in the rock-paper-scissors family. Two players pick gestures
round after round. The first player to reach four round wins takes the game.

## Installation and running

```
pip install .
rpsgame
```

The command takes two options:

- `--rules {classic,elemental,modular}` chooses the gesture set and the winning
  rule. The default is `classic`.
- `--seed N` seeds the random choices the computer makes, so that a game can be
  repeated.

`python -m rpsgame.cli` starts the same command.

## Rule sets

- **classic (rock, paper, scissors, lizard, spock)**: each gesture beats two others.
  Rock crushes scissors and lizard. Paper covers rock and disproves spock. Scissors
  cut paper and decapitate lizard. Lizard eats paper and poisons spock. Spock
  vaporizes rock and smashes scissors.
- **elemental (rock, fire, scissors, sponge, paper, air, water)**: seven gestures,
  each of which beats three others. Rock beats fire, scissors and sponge. Fire beats
  scissors, sponge and paper. Scissors beat sponge, paper and air. Sponge beats
  paper, air and water. Paper beats rock, air and water. Air beats rock, fire and
  water. Water beats rock, fire and scissors.
- **modular**: the seven elemental gestures. The winner is worked out from the
  difference of the two gesture numbers modulo seven. The gesture prompt in this
  set also accepts `7`, which is shown as `invalid`.

## Playing

When the game starts it asks for a mode:

1. Human vs Human
2. Human vs Computer
3. Computer vs Computer

Enter `-1` at the mode prompt, or at any gesture prompt, to quit. Gestures are
entered as numbers, and the prompt lists them; an entry that is out of range is
asked for again. A tie gives no point to either player. The score is printed after
every round.

With the `classic` rules, a Computer vs Computer game asks after every round
whether to go on: type `cont` to play the next round or `exit` to stop. A game
that is stopped before anyone reaches four wins ends with
"Game exited before completion."

The command exits with status 0 after a game or after quitting, 1 when the input
runs out, and 130 when it is interrupted with Ctrl-C.

## Using the rules from Python

The winner functions in `rpsgame.rules` return `1` when the first gesture wins,
`0` for a tie and `-1` when the second gesture wins:

```python
from rpsgame.rules import classic_winner, elemental_winner, modular_winner

classic_winner(0, 2)          # 1: rock crushes scissors
elemental_winner(6, 0)        # 1: water erodes rock
modular_winner(1, 0, 7, 0)    # 1
```

`get_ruleset(name)` returns a `Ruleset` for `"classic"`, `"elemental"` or
`"modular"` and raises `ValueError` for any other name. A `Ruleset` has
`gesture_name(gesture)` (which gives `"invalid"` for an unknown number),
`determine_winner(first, second)` and `random_gesture(rng)`, where `rng` is an
optional `random.Random`.

`rpsgame.game` holds the interactive parts: `Mode` with `player_names()`,
`Console` (line input and output over any pair of text streams), `read_mode`,
`read_gesture`, and `Game`, whose `play()` runs a match and returns the winner's
name, or `None` if the match was abandoned.

## What it does not do

The game runs on a single console only. It keeps no scores or history between
matches, and there is no play over a network and no graphical screen.

## Tests

```
pip install .[test]
pytest
```