"""UI components for Yacht Dice."""

from src.ui.components.command_bar import render_command_bar
from src.ui.components.dice_tray import render_dice_tray
from src.ui.components.scorecard import render_scorecard

__all__ = [
    "render_command_bar",
    "render_dice_tray",
    "render_scorecard",
]
