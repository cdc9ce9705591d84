"""
Yacht Dice - Command Classification

Turns whitespace-separated player input into one typed command. The
classifier is total: every input, including nonsense, maps to exactly one
command, with unusable input becoming an Unrecognized carrying the reason.
Nothing here touches game state.
"""

from dataclasses import dataclass
from typing import Sequence, Union

from src.engine.base import NUM_DICE, Category


@dataclass(frozen=True)
class RollDice:
    """Reroll every unheld die."""


@dataclass(frozen=True)
class SortDice:
    """Sort the dice low to high."""


@dataclass(frozen=True)
class ScoreCategory:
    category: Category


@dataclass(frozen=True)
class ToggleHold:
    """Toggle the hold flag of one die. ``index`` is zero-based."""
    index: int


@dataclass(frozen=True)
class NewGame:
    """Abandon the current game and start over."""


@dataclass(frozen=True)
class Quit:
    """Leave the program."""


@dataclass(frozen=True)
class Help:
    text: str


@dataclass(frozen=True)
class Unrecognized:
    reason: str


Command = Union[RollDice, SortDice, ScoreCategory, ToggleHold, NewGame, Quit, Help, Unrecognized]

# Commands the game engine applies; the rest are handled by the control loop
GameCommand = Union[RollDice, SortDice, ScoreCategory, ToggleHold, NewGame]


ROLL_ALIASES = frozenset({"r", "roll"})
SORT_ALIASES = frozenset({"s", "sort"})
HOLD_ALIASES = frozenset({"h", "hold"})
SCORE_ALIASES = frozenset({"sc", "score"})
NEW_ALIASES = frozenset({"new"})
QUIT_ALIASES = frozenset({"q", "quit", "exit", "e"})
HELP_ALIASES = frozenset({"help"})

CATEGORY_ALIASES: dict[str, Category] = {
    "aces": Category.ACES,
    "twos": Category.TWOS,
    "threes": Category.THREES,
    "fours": Category.FOURS,
    "fives": Category.FIVES,
    "sixes": Category.SIXES,
    "fourofakind": Category.FOUR_OF_KIND,
    "fullhouse": Category.FULL_HOUSE,
    "littlestraight": Category.LITTLE_STRAIGHT,
    "bigstraight": Category.BIG_STRAIGHT,
    "yacht": Category.YACHT,
    "chance": Category.CHANCE,
}
# "1".."12" select categories by scorecard number
CATEGORY_ALIASES.update({str(c.number): c for c in Category})

GENERAL_HELP = "commands: roll, sort, hold <dice>, score <type>, new, quit, help <command>"

_TOPIC_HELP: list[tuple[frozenset[str], str]] = [
    (ROLL_ALIASES, "roll: rolls the dice that aren't held. Counts as a roll!"),
    (SORT_ALIASES, "sort: sorts the dice lowest to highest. Clears held dice"),
    (HOLD_ALIASES, "hold <dice>: holds dice number <dice> excluding it from next rolls"),
    (SCORE_ALIASES, "score <type>: submits dice to score where <type> is the number of that score type"),
    (NEW_ALIASES, "new: starts a new game, refreshing the scores"),
    (QUIT_ALIASES, "quit: quits the game"),
    (HELP_ALIASES, "help <command>: shows possible commands or help for <command> (but you know that...)"),
]

NO_INPUT = "No input found"
UNKNOWN_COMMAND = "Invalid command, try 'help' for list of commands"
MISSING_DIE = "Couldn't find command args"
UNPARSEABLE_DIE = "Unable to parse dice number (did you enter a number?)"
DIE_OUT_OF_RANGE = f"Invalid Dice Number, should be (1-{NUM_DICE})"
MISSING_CATEGORY = "No score type found"
UNKNOWN_CATEGORY = "Invalid score type"
UNKNOWN_HELP_TOPIC = "No help found for that"


def tokenize(line: str) -> list[str]:
    """Split a raw input line on whitespace."""
    return line.split()


def _classify_hold(args: Sequence[str]) -> Command:
    if not args:
        return Unrecognized(MISSING_DIE)
    token = args[0]
    if not (token.isascii() and token.isdigit()):
        return Unrecognized(UNPARSEABLE_DIE)
    number = int(token)
    if not 1 <= number <= NUM_DICE:
        return Unrecognized(DIE_OUT_OF_RANGE)
    return ToggleHold(index=number - 1)


def _classify_score(args: Sequence[str]) -> Command:
    if not args:
        return Unrecognized(MISSING_CATEGORY)
    category = CATEGORY_ALIASES.get(args[0])
    if category is None:
        return Unrecognized(UNKNOWN_CATEGORY)
    return ScoreCategory(category=category)


def _classify_help(args: Sequence[str]) -> Command:
    if not args:
        return Help(GENERAL_HELP)
    for aliases, text in _TOPIC_HELP:
        if args[0] in aliases:
            return Help(text)
    return Unrecognized(UNKNOWN_HELP_TOPIC)


def classify(tokens: Sequence[str]) -> Command:
    """
    Classify tokenized input into a command.

    Aliases are case-sensitive. Tokens past the ones a command needs are
    ignored.

    Args:
        tokens: Whitespace-separated words of one input line

    Returns:
        Exactly one Command; never raises for any input
    """
    if not tokens:
        return Unrecognized(NO_INPUT)

    first, args = tokens[0], tokens[1:]

    if first in ROLL_ALIASES:
        return RollDice()
    if first in SORT_ALIASES:
        return SortDice()
    if first in HOLD_ALIASES:
        return _classify_hold(args)
    if first in SCORE_ALIASES:
        return _classify_score(args)
    if first in HELP_ALIASES:
        return _classify_help(args)
    if first in NEW_ALIASES:
        return NewGame()
    if first in QUIT_ALIASES:
        return Quit()

    return Unrecognized(UNKNOWN_COMMAND)
