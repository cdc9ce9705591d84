"""
Yacht Dice - Dice Roller

Produces and mutates the five-die Roll. Randomness is supplied through a
DieSource so that tests and seeded sessions can substitute a deterministic
sequence for the default random generator.
"""

import random
from typing import Iterable, Protocol

from src.engine.base import DIE_FACES, NUM_DICE, Roll
from src.engine.validators import validate_die_index


class DieSource(Protocol):
    """Anything that can produce the next face of a six-sided die."""

    def next_face(self) -> int:
        """Return an integer uniformly distributed over 1-6."""
        ...


class RandomDieSource:
    """DieSource backed by its own ``random.Random`` instance."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def next_face(self) -> int:
        return self._rng.randint(1, DIE_FACES)


class ScriptedDieSource:
    """
    DieSource that replays a fixed list of faces in order.

    Raises AssertionError once the script runs dry, so a test that rolls
    more often than it planned fails loudly instead of looping forever.
    """

    def __init__(self, faces: Iterable[int]) -> None:
        self._faces = list(faces)
        self._position = 0
        for face in self._faces:
            if not 1 <= face <= DIE_FACES:
                raise ValueError(f"Scripted face {face} must be between 1 and {DIE_FACES}.")

    @property
    def remaining(self) -> int:
        return len(self._faces) - self._position

    def extend(self, faces: Iterable[int]) -> None:
        self._faces.extend(faces)

    def next_face(self) -> int:
        if self._position >= len(self._faces):
            raise AssertionError("Scripted die source exhausted.")
        face = self._faces[self._position]
        self._position += 1
        return face


class DiceRoller:
    """
    Rolls, rerolls, holds, and sorts the five dice of a Roll.

    The roller holds no game state of its own; every mutating method works
    on the Roll it is handed.
    """

    def __init__(self, source: DieSource | None = None) -> None:
        self.source = source if source is not None else RandomDieSource()

    def fresh_roll(self) -> Roll:
        """
        Draw five new dice with all holds cleared.

        Returns:
            A new Roll
        """
        values = [self.source.next_face() for _ in range(NUM_DICE)]
        return Roll(values=values)

    def reroll_unheld(self, roll: Roll) -> None:
        """Redraw every die that is not held. Held dice keep their face."""
        for i in range(NUM_DICE):
            if not roll.holds[i]:
                roll.values[i] = self.source.next_face()

    def toggle_hold(self, roll: Roll, index: int) -> bool:
        """
        Flip the hold flag of one die.

        Args:
            roll: The roll to mutate
            index: Zero-based die position, already range-checked by the caller

        Returns:
            True if the die is now held, False if it was released

        Raises:
            AssertionError: If index is outside 0-4
        """
        validate_die_index(index, NUM_DICE)
        roll.holds[index] = not roll.holds[index]
        return roll.holds[index]

    def sort_ascending(self, roll: Roll) -> None:
        """Sort the dice low to high. Holds are positional, so all are cleared."""
        roll.values.sort()
        roll.clear_holds()
