"""
Yacht Dice - Session Controller

The control-loop policy shared by every front end: it classifies a line of
input, handles the commands the engine does not (quit, help, unrecognized
input), restarts finished games, and forwards the rest to the game.
"""

from __future__ import annotations

import logging

from src.config.settings import Settings
from src.engine.commands import Help, NewGame, Quit, Unrecognized, classify, tokenize
from src.engine.dice import DiceRoller, RandomDieSource
from src.engine.yacht import YachtGame
from src.ui.models import GameSnapshot

logger = logging.getLogger(__name__)


class GameController:
    """Drives one YachtGame from lines of player input."""

    def __init__(self, game: YachtGame, show_potential_scores: bool = True) -> None:
        self.game = game
        self.show_potential_scores = show_potential_scores
        self.running = True

    @classmethod
    def from_settings(cls, settings: Settings) -> GameController:
        """Build a controller with a fresh game seeded from settings."""
        roller = DiceRoller(RandomDieSource(settings.seed))
        return cls(YachtGame(roller), show_potential_scores=settings.show_potential_scores)

    def submit(self, line: str) -> bool:
        """
        Process one line of input.

        Returns:
            False once the player has asked to quit, True otherwise
        """
        command = classify(tokenize(line))

        if isinstance(command, Quit):
            logger.debug("Quit requested")
            self.running = False
            return False

        # Any input after the final score starts the next game
        if self.game.is_over:
            command = NewGame()

        if isinstance(command, Unrecognized):
            logger.debug("Unrecognized input %r: %s", line, command.reason)
            self.game.message = command.reason
        elif isinstance(command, Help):
            self.game.message = command.text
        else:
            self.game.apply(command)
        return True

    def snapshot(self) -> GameSnapshot:
        return GameSnapshot.capture(self.game, with_potential=self.show_potential_scores)
