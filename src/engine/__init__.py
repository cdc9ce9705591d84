"""
Yacht Dice Game Engine.

Pure Python game logic with zero UI dependencies.
Handles dice rolling, holds, scoring, and the turn state machine.
"""

from src.engine.base import (
    Category,
    RecordResult,
    Roll,
    TurnPhase,
)
from src.engine.commands import (
    Command,
    Help,
    NewGame,
    Quit,
    RollDice,
    ScoreCategory,
    SortDice,
    ToggleHold,
    Unrecognized,
    classify,
    tokenize,
)
from src.engine.dice import DiceRoller, DieSource, RandomDieSource, ScriptedDieSource
from src.engine.ledger import ScoreLedger
from src.engine.scoring import score, score_all
from src.engine.yacht import YachtGame, apply

__all__ = [
    # Data Classes
    "Roll",
    "RecordResult",
    # Enums
    "Category",
    "TurnPhase",
    # Commands
    "Command",
    "RollDice",
    "SortDice",
    "ScoreCategory",
    "ToggleHold",
    "NewGame",
    "Quit",
    "Help",
    "Unrecognized",
    "classify",
    "tokenize",
    # Dice
    "DiceRoller",
    "DieSource",
    "RandomDieSource",
    "ScriptedDieSource",
    # Scoring
    "ScoreLedger",
    "score",
    "score_all",
    # Game
    "YachtGame",
    "apply",
]
