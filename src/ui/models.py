"""
Yacht Dice - Presentation Models

Pydantic read models that capture everything a renderer needs from a game.
"""

from pydantic import BaseModel, Field

from src.engine.base import Category
from src.engine.scoring import score_all
from src.engine.yacht import YachtGame


class CategoryRow(BaseModel):
    """One line of the scorecard."""

    number: int = Field(ge=1, le=12)
    label: str
    score: int | None = None
    potential: int | None = None

    @property
    def is_used(self) -> bool:
        return self.score is not None


class GameSnapshot(BaseModel):
    """Frozen view of a game at one moment."""

    phase: str
    phase_label: str
    is_over: bool
    dice: list[int] = Field(min_length=5, max_length=5)
    holds: list[bool] = Field(min_length=5, max_length=5)
    rows: list[CategoryRow]
    total: int = 0
    message: str = ""

    model_config = {"frozen": True}

    @classmethod
    def capture(cls, game: YachtGame, with_potential: bool = False) -> "GameSnapshot":
        """Build a snapshot from a live game.

        Args:
            game: The game to read.
            with_potential: Also fill in what the current dice would score in
                each open category.
        """
        potentials = score_all(game.dice) if with_potential and not game.is_over else {}
        rows = []
        for category in Category:
            recorded = game.score_for(category)
            rows.append(
                CategoryRow(
                    number=category.number,
                    label=category.label,
                    score=recorded,
                    potential=potentials.get(category) if recorded is None else None,
                )
            )
        return cls(
            phase=game.phase.name,
            phase_label=game.phase.label,
            is_over=game.is_over,
            dice=list(game.dice),
            holds=list(game.holds),
            rows=rows,
            total=game.total,
            message=game.message,
        )
