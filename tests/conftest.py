"""
Yacht Dice - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

from typing import Callable

import pytest

from src.engine.base import Category
from src.engine.dice import DiceRoller, ScriptedDieSource
from src.engine.yacht import YachtGame


# =============================================================================
# SCORING TEST DATA
# =============================================================================

@pytest.fixture
def scoring_rolls() -> dict[str, tuple[tuple[int, ...], Category, int]]:
    """
    Roll patterns with the score they earn in one category.

    Returns:
        Dict mapping name to (dice_values, category, expected_points)
    """
    return {
        # Upper section
        "aces_four": ((1, 1, 1, 1, 2), Category.ACES, 4),
        "twos_none": ((1, 3, 4, 5, 6), Category.TWOS, 0),
        "threes_two": ((3, 1, 3, 6, 6), Category.THREES, 6),
        "fours_one": ((4, 1, 2, 3, 5), Category.FOURS, 4),
        "fives_five": ((5, 5, 5, 5, 5), Category.FIVES, 25),
        "sixes_three": ((6, 2, 6, 6, 1), Category.SIXES, 18),

        # Four of a kind
        "four_ones": ((1, 1, 1, 1, 2), Category.FOUR_OF_KIND, 4),
        "four_sixes_trailing": ((2, 6, 6, 6, 6), Category.FOUR_OF_KIND, 24),
        "four_threes_split": ((3, 5, 3, 3, 3), Category.FOUR_OF_KIND, 12),
        "five_fours": ((4, 4, 4, 4, 4), Category.FOUR_OF_KIND, 16),
        "three_only": ((2, 2, 2, 5, 5), Category.FOUR_OF_KIND, 0),

        # Full house
        "full_house": ((3, 3, 3, 2, 2), Category.FULL_HOUSE, 25),
        "full_house_mixed": ((2, 5, 2, 5, 5), Category.FULL_HOUSE, 25),
        "yacht_not_full_house": ((4, 4, 4, 4, 4), Category.FULL_HOUSE, 0),
        "four_plus_one": ((4, 4, 4, 4, 1), Category.FULL_HOUSE, 0),
        "two_pair": ((1, 1, 2, 2, 3), Category.FULL_HOUSE, 0),

        # Straights (order sensitive)
        "little_straight": ((1, 2, 3, 4, 5), Category.LITTLE_STRAIGHT, 30),
        "little_straight_reversed": ((5, 4, 3, 2, 1), Category.LITTLE_STRAIGHT, 0),
        "little_straight_shuffled": ((2, 1, 3, 4, 5), Category.LITTLE_STRAIGHT, 0),
        "big_straight": ((2, 3, 4, 5, 6), Category.BIG_STRAIGHT, 30),
        "big_straight_shuffled": ((6, 5, 4, 3, 2), Category.BIG_STRAIGHT, 0),
        "little_as_big": ((1, 2, 3, 4, 5), Category.BIG_STRAIGHT, 0),

        # Yacht and chance
        "yacht_sixes": ((6, 6, 6, 6, 6), Category.YACHT, 50),
        "yacht_miss": ((6, 6, 6, 6, 5), Category.YACHT, 0),
        "chance_sixes": ((6, 6, 6, 6, 6), Category.CHANCE, 30),
        "chance_mixed": ((1, 3, 2, 6, 4), Category.CHANCE, 16),
    }


# =============================================================================
# DETERMINISTIC DICE
# =============================================================================

@pytest.fixture
def scripted_roller() -> Callable[..., DiceRoller]:
    """Factory for a DiceRoller that replays the given faces."""
    def _make(*faces: int) -> DiceRoller:
        return DiceRoller(ScriptedDieSource(faces))
    return _make


@pytest.fixture
def make_game(scripted_roller) -> Callable[..., YachtGame]:
    """
    Factory for a game whose opening roll is the first five faces given.

    Remaining faces are consumed by later rolls, in order.
    """
    def _make(*faces: int) -> YachtGame:
        return YachtGame(scripted_roller(*faces))
    return _make
