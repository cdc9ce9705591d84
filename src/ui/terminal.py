"""
Yacht Dice - Terminal Front End

Line-based play: render the board as text, read one command per line,
repeat until the player quits or input ends.
"""

from __future__ import annotations

import logging
from typing import Callable, TextIO

from src.ui.controller import GameController
from src.ui.models import GameSnapshot

logger = logging.getLogger(__name__)

PROMPT = "--> "
TABLE_WIDTH = 30


def _score_cell(row) -> str:
    if row.score is not None:
        return str(row.score)
    if row.potential is not None:
        return f"({row.potential})"
    return "X"


def render_board(snapshot: GameSnapshot) -> str:
    """Render the scorecard, dice, holds, status and last message as text."""
    lines = [" YACHT DICE ".center(TABLE_WIDTH, "="), ""]

    lines.append(f"Game Status: {snapshot.phase_label}")
    lines.append("")

    for row in snapshot.rows:
        name = f"{row.number:<2} - {row.label}"
        lines.append(f"{name:<22}| {_score_cell(row):>5}")
    lines.append("-" * TABLE_WIDTH)
    lines.append(f"{'TOTAL':<22}| {snapshot.total:>5}")
    lines.append("")

    lines.append("  ".join(f"[{value}]" for value in snapshot.dice))
    lines.append("  ".join(" X " if held else "   " for held in snapshot.holds))
    lines.append("  ".join(f" {i} " for i in range(1, len(snapshot.dice) + 1)))
    lines.append("")

    lines.append(f"--] {snapshot.message}")
    return "\n".join(lines)


def run(
    controller: GameController,
    read_line: Callable[[str], str] = input,
    out: TextIO | None = None,
) -> None:
    """
    Play until the player quits.

    Args:
        controller: Session owning the game
        read_line: Blocking line source taking the prompt text
        out: Stream for the rendered board (stdout when None)
    """
    while controller.running:
        print(render_board(controller.snapshot()), file=out)
        try:
            line = read_line(PROMPT)
        except (EOFError, KeyboardInterrupt):
            logger.debug("Input closed, leaving")
            break
        controller.submit(line)
