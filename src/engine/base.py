"""
Yacht Dice - Game Engine Base Classes

This module defines the foundational data structures and enums used throughout
the game engine. Value objects are frozen dataclasses; the Roll is the one
mutable structure, owned exclusively by a single game.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Sequence

from src.engine.validators import validate_dice_values

NUM_DICE = 5
DIE_FACES = 6


class Category(Enum):
    """The twelve single-use scoring slots, in scorecard order."""
    ACES = 1
    TWOS = 2
    THREES = 3
    FOURS = 4
    FIVES = 5
    SIXES = 6
    FOUR_OF_KIND = 7
    FULL_HOUSE = 8
    LITTLE_STRAIGHT = 9
    BIG_STRAIGHT = 10
    YACHT = 11
    CHANCE = 12

    @property
    def number(self) -> int:
        """1-based position on the scorecard."""
        return self.value

    @property
    def label(self) -> str:
        return _CATEGORY_LABELS[self]

    @property
    def is_upper(self) -> bool:
        """True for the six face categories (Aces through Sixes)."""
        return self.value <= 6

    @classmethod
    def from_number(cls, number: int) -> "Category":
        """Look up a category by its 1-based scorecard number.

        Raises:
            AssertionError: If the number is outside 1-12. Callers validate
                user input before reaching this point.
        """
        if not 1 <= number <= len(cls):
            raise AssertionError(f"Category number {number} outside 1-{len(cls)}.")
        return cls(number)


_CATEGORY_LABELS: dict[Category, str] = {
    Category.ACES: "Aces",
    Category.TWOS: "Twos",
    Category.THREES: "Threes",
    Category.FOURS: "Fours",
    Category.FIVES: "Fives",
    Category.SIXES: "Sixes",
    Category.FOUR_OF_KIND: "Four Of A Kind",
    Category.FULL_HOUSE: "Full House",
    Category.LITTLE_STRAIGHT: "Little Straight",
    Category.BIG_STRAIGHT: "Big Straight",
    Category.YACHT: "Yacht",
    Category.CHANCE: "Chance",
}


class TurnPhase(Enum):
    """Where the game stands within the current turn."""
    FIRST_ROLL = auto()
    SECOND_ROLL = auto()
    THIRD_ROLL = auto()
    GAME_OVER = auto()

    @property
    def label(self) -> str:
        return _PHASE_LABELS[self]

    @property
    def is_terminal(self) -> bool:
        return self is TurnPhase.GAME_OVER


_PHASE_LABELS: dict[TurnPhase, str] = {
    TurnPhase.FIRST_ROLL: "First Roll",
    TurnPhase.SECOND_ROLL: "Second Roll",
    TurnPhase.THIRD_ROLL: "Final Roll",
    TurnPhase.GAME_OVER: "GAME OVER",
}


@dataclass
class Roll:
    """
    The five dice on the table plus their hold flags.

    Attributes:
        values: Five die faces, each 1-6
        holds: Five flags, True where the die is kept out of the next reroll
    """
    values: list[int]
    holds: list[bool] = field(default_factory=lambda: [False] * NUM_DICE)

    def __post_init__(self) -> None:
        """Validate dice count, face range, and hold flag count."""
        self.values = list(
            validate_dice_values(
                self.values,
                faces=DIE_FACES,
                min_count=NUM_DICE,
                max_count=NUM_DICE,
            )
        )
        if len(self.holds) != NUM_DICE:
            raise ValueError(
                f"Roll needs exactly {NUM_DICE} hold flags, got {len(self.holds)}."
            )
        self.holds = [bool(flag) for flag in self.holds]

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> int:
        return self.values[index]

    @property
    def held_indices(self) -> frozenset[int]:
        """Indices of the dice currently held."""
        return frozenset(i for i, held in enumerate(self.holds) if held)

    def clear_holds(self) -> None:
        self.holds = [False] * NUM_DICE

    @classmethod
    def from_sequence(cls, values: Sequence[int]) -> "Roll":
        """Create an unheld Roll from any sequence type."""
        return cls(values=list(values))


@dataclass(frozen=True)
class RecordResult:
    """
    Outcome of submitting a roll to the score ledger.

    Attributes:
        category: The category the roll was submitted to
        points: Points stored (0 when the submission was rejected)
        accepted: False when the category had already been used
    """
    category: Category
    points: int
    accepted: bool

    def __str__(self) -> str:
        if not self.accepted:
            return f"{self.category.label} already used."
        return f"{self.category.label}: {self.points} points"
