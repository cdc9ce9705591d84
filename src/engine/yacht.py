"""
Yacht Dice - Game Engine

Owns the current roll, the score ledger, and the turn phase, and applies
typed commands to them. A turn is up to three rolls followed by a score
submission; the game ends once all twelve categories are filled.

User mistakes (rolling a fourth time, reusing a category) come back as
messages and leave the game untouched. Anything the control loop should
have prevented raises AssertionError.
"""

import logging

from src.engine.base import Category, Roll, TurnPhase
from src.engine.commands import (
    GameCommand,
    NewGame,
    RollDice,
    ScoreCategory,
    SortDice,
    ToggleHold,
)
from src.engine.dice import DiceRoller
from src.engine.ledger import ScoreLedger

logger = logging.getLogger(__name__)

MSG_NEXT_ROLL = "Onto next roll"
MSG_NO_MORE_ROLLS = "No more rolls available this round, try 'score'"
MSG_SORTED = "Dice Sorted!"
MSG_SCORED = "Score submitted!"
MSG_CATEGORY_USED = "That score type was already used!"
MSG_GAME_OVER = "Game Over! Type 'new' to start a new game!"
MSG_NEW_GAME = "New Game Started"

_NEXT_PHASE: dict[TurnPhase, TurnPhase] = {
    TurnPhase.FIRST_ROLL: TurnPhase.SECOND_ROLL,
    TurnPhase.SECOND_ROLL: TurnPhase.THIRD_ROLL,
}


class YachtGame:
    """
    A single-player game of Yacht.

    Construct once per run and hand it to whatever drives the input loop.
    State changes only through :meth:`apply`.
    """

    def __init__(self, roller: DiceRoller | None = None) -> None:
        self.roller = roller if roller is not None else DiceRoller()
        self.ledger = ScoreLedger()
        self.roll: Roll = self.roller.fresh_roll()
        self.phase = TurnPhase.FIRST_ROLL
        self.message = ""

    # -- read accessors ------------------------------------------------------

    @property
    def dice(self) -> tuple[int, ...]:
        return tuple(self.roll.values)

    @property
    def holds(self) -> tuple[bool, ...]:
        return tuple(self.roll.holds)

    @property
    def total(self) -> int:
        return self.ledger.total()

    @property
    def is_over(self) -> bool:
        return self.phase.is_terminal

    def score_for(self, category: Category) -> int | None:
        """Recorded score for a category, or None while it is unused."""
        return self.ledger.get(category)

    # -- commands ------------------------------------------------------------

    def apply(self, command: GameCommand) -> str:
        """
        Apply one command and return the status message for the player.

        The message is also stored on :attr:`message`.

        Raises:
            AssertionError: If a non-game command arrives, or anything other
                than NewGame arrives after the game is over
        """
        if isinstance(command, NewGame):
            message = self._new_game()
        else:
            if self.phase.is_terminal:
                raise AssertionError(
                    f"{type(command).__name__} applied after game over; the caller must start a new game."
                )
            if isinstance(command, RollDice):
                message = self._roll()
            elif isinstance(command, ToggleHold):
                message = self._toggle_hold(command.index)
            elif isinstance(command, SortDice):
                message = self._sort()
            elif isinstance(command, ScoreCategory):
                message = self._score(command.category)
            else:
                raise AssertionError(f"{command!r} is not a game command.")

        self.message = message
        return message

    def _advance_phase(self) -> None:
        next_phase = _NEXT_PHASE.get(self.phase)
        if next_phase is None:
            raise AssertionError(f"Cannot advance from {self.phase.name} without scoring.")
        logger.debug("Phase %s -> %s", self.phase.name, next_phase.name)
        self.phase = next_phase

    def _roll(self) -> str:
        if self.phase is TurnPhase.THIRD_ROLL:
            return MSG_NO_MORE_ROLLS
        self.roller.reroll_unheld(self.roll)
        self._advance_phase()
        return MSG_NEXT_ROLL

    def _toggle_hold(self, index: int) -> str:
        held = self.roller.toggle_hold(self.roll, index)
        if held:
            return f"Held dice number {index + 1}"
        return f"Unheld dice number {index + 1}"

    def _sort(self) -> str:
        self.roller.sort_ascending(self.roll)
        return MSG_SORTED

    def _score(self, category: Category) -> str:
        result = self.ledger.record(category, self.roll)
        if not result.accepted:
            return MSG_CATEGORY_USED

        logger.debug("Recorded %s", result)
        if self.ledger.is_full():
            self.phase = TurnPhase.GAME_OVER
            logger.info("Game over with %d points", self.ledger.total())
            return MSG_GAME_OVER

        self.roll = self.roller.fresh_roll()
        self.phase = TurnPhase.FIRST_ROLL
        return MSG_SCORED

    def _new_game(self) -> str:
        self.ledger.reset()
        self.roll = self.roller.fresh_roll()
        self.phase = TurnPhase.FIRST_ROLL
        logger.info("New game started")
        return MSG_NEW_GAME


def apply(game: YachtGame, command: GameCommand) -> str:
    """Apply a command to a game; see :meth:`YachtGame.apply`."""
    return game.apply(command)
