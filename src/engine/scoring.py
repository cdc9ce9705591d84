"""
Yacht Dice - Scoring Evaluator

Maps a five-die roll and a category to a point value. All functions are
pure: they read the dice and never touch game state.

Scoring Rules:
    - Aces..Sixes: face value x number of dice showing that face
    - Four Of A Kind: 4 x face, when at least four dice share a face
    - Full House: 25, for exactly three of one face and two of another
    - Little Straight: 30, for the dice reading 1-2-3-4-5 in their current order
    - Big Straight: 30, for the dice reading 2-3-4-5-6 in their current order
    - Yacht: 50, when all five dice match
    - Chance: sum of all dice
"""

from collections import Counter
from typing import Sequence

from src.engine.base import Category, Roll

FULL_HOUSE_POINTS = 25
STRAIGHT_POINTS = 30
YACHT_POINTS = 50

LITTLE_STRAIGHT = (1, 2, 3, 4, 5)
BIG_STRAIGHT = (2, 3, 4, 5, 6)


def _values_of(dice: Sequence[int] | Roll) -> tuple[int, ...]:
    if isinstance(dice, Roll):
        return tuple(dice.values)
    return tuple(dice)


def _upper(values: tuple[int, ...], face: int) -> int:
    return face * values.count(face)


def _four_of_kind(values: tuple[int, ...]) -> int:
    face, count = Counter(values).most_common(1)[0]
    if count >= 4:
        return 4 * face
    return 0


def _full_house(values: tuple[int, ...]) -> int:
    if sorted(Counter(values).values()) == [2, 3]:
        return FULL_HOUSE_POINTS
    return 0


def _straight(values: tuple[int, ...], expected: tuple[int, ...]) -> int:
    # Order-sensitive: only the literal sequence scores, see DESIGN.md
    if values == expected:
        return STRAIGHT_POINTS
    return 0


def _yacht(values: tuple[int, ...]) -> int:
    if len(set(values)) == 1:
        return YACHT_POINTS
    return 0


def score(dice: Sequence[int] | Roll, category: Category) -> int:
    """
    Score a roll against one category.

    Args:
        dice: Five dice values (sequence or Roll), in table order
        category: Category to evaluate

    Returns:
        Non-negative point value
    """
    values = _values_of(dice)

    if category.is_upper:
        return _upper(values, category.value)
    if category is Category.FOUR_OF_KIND:
        return _four_of_kind(values)
    if category is Category.FULL_HOUSE:
        return _full_house(values)
    if category is Category.LITTLE_STRAIGHT:
        return _straight(values, LITTLE_STRAIGHT)
    if category is Category.BIG_STRAIGHT:
        return _straight(values, BIG_STRAIGHT)
    if category is Category.YACHT:
        return _yacht(values)
    if category is Category.CHANCE:
        return sum(values)

    raise AssertionError(f"Unhandled category {category!r}")


def score_all(dice: Sequence[int] | Roll) -> dict[Category, int]:
    """Potential score of the roll in every category, in scorecard order."""
    values = _values_of(dice)
    return {category: score(values, category) for category in Category}
