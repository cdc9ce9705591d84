"""
Yacht Dice - Input Validation Utilities

Provides validation functions for game engine inputs. Validators either
return validated data or raise descriptive exceptions: ValueError for data
handed in from outside the engine, AssertionError for indices that the
command classifier is responsible for range-checking first.
"""

from typing import Sequence


def validate_dice_values(
    values: Sequence[int],
    faces: int = 6,
    min_count: int = 1,
    max_count: int | None = None
) -> tuple[int, ...]:
    """
    Validate and normalize dice values.

    Args:
        values: Sequence of dice values to validate
        faces: Number of faces on each die (determines valid range)
        min_count: Minimum number of dice required
        max_count: Maximum number of dice allowed (None = no limit)

    Returns:
        Validated values as a tuple

    Raises:
        ValueError: If validation fails
    """
    values_tuple = tuple(values)
    count = len(values_tuple)

    if count < min_count:
        raise ValueError(f"At least {min_count} dice required, got {count}.")

    if max_count is not None and count > max_count:
        raise ValueError(f"At most {max_count} dice allowed, got {count}.")

    for i, value in enumerate(values_tuple):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"Die value at index {i} must be an integer, got {type(value).__name__}.")
        if not (1 <= value <= faces):
            raise ValueError(
                f"Die value at index {i} is {value}, must be between 1 and {faces}."
            )

    return values_tuple


def validate_die_index(index: int, dice_count: int) -> int:
    """
    Check a zero-based die index that has already passed user-input parsing.

    Args:
        index: Zero-based die position
        dice_count: Total number of dice in the roll

    Returns:
        The index, unchanged

    Raises:
        AssertionError: If the index is out of range. Reaching this means the
            caller skipped validation, so it is never reported to the player.
    """
    if isinstance(index, bool) or not isinstance(index, int) or not (0 <= index < dice_count):
        raise AssertionError(
            f"Die index {index!r} is out of range. Must be between 0 and {dice_count - 1}."
        )
    return index

