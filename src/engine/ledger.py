"""
Yacht Dice - Score Ledger

Records at most one score per category for the current game.
"""

from typing import Sequence

from src.engine.base import Category, RecordResult, Roll
from src.engine.scoring import score


class ScoreLedger:
    """Per-game mapping of category to recorded points."""

    def __init__(self) -> None:
        self._scores: dict[Category, int] = {}

    def __len__(self) -> int:
        return len(self._scores)

    def __contains__(self, category: Category) -> bool:
        return category in self._scores

    def record(self, category: Category, dice: Sequence[int] | Roll) -> RecordResult:
        """
        Score the dice in a category and store the result.

        Args:
            category: Category to fill
            dice: The roll being submitted

        Returns:
            RecordResult with accepted=False (ledger unchanged) when the
            category already holds a score
        """
        if category in self._scores:
            return RecordResult(category=category, points=0, accepted=False)

        points = score(dice, category)
        self._scores[category] = points
        return RecordResult(category=category, points=points, accepted=True)

    def get(self, category: Category) -> int | None:
        """Recorded points for a category, or None if it is still open."""
        return self._scores.get(category)

    def is_used(self, category: Category) -> bool:
        return category in self._scores

    def unused(self) -> tuple[Category, ...]:
        """Categories still open, in scorecard order."""
        return tuple(c for c in Category if c not in self._scores)

    def total(self) -> int:
        return sum(self._scores.values())

    def is_full(self) -> bool:
        return len(self._scores) == len(Category)

    def reset(self) -> None:
        self._scores.clear()
