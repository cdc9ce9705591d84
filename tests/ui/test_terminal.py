"""Tests for src/ui/terminal.py — text rendering and the input loop."""

import io

from src.engine.base import Category
from src.ui.controller import GameController
from src.ui.models import GameSnapshot
from src.ui.terminal import PROMPT, render_board, run


def _scripted_input(lines):
    """Stand-in for input(): yields each line, then raises EOFError."""
    remaining = list(lines)
    prompts = []

    def _read(prompt):
        prompts.append(prompt)
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return _read, prompts


class TestRenderBoard:
    def test_contains_all_categories(self, make_game):
        text = render_board(GameSnapshot.capture(make_game(1, 2, 3, 4, 5)))
        for category in Category:
            assert category.label in text

    def test_unused_marked_x(self, make_game):
        text = render_board(GameSnapshot.capture(make_game(1, 2, 3, 4, 5)))
        assert "1  - Aces" in text
        assert "| " + "X".rjust(5) in text

    def test_potential_in_parentheses(self, make_game):
        snap = GameSnapshot.capture(make_game(1, 2, 3, 4, 5), with_potential=True)
        assert "(30)" in render_board(snap)

    def test_dice_and_holds(self, make_game):
        game = make_game(6, 5, 4, 3, 2)
        game.roller.toggle_hold(game.roll, 1)
        text = render_board(GameSnapshot.capture(game))
        assert "[6]  [5]  [4]  [3]  [2]" in text
        assert " X " in text

    def test_status_and_message(self, make_game):
        game = make_game(1, 1, 1, 1, 1)
        game.message = "hello there"
        text = render_board(GameSnapshot.capture(game))
        assert "Game Status: First Roll" in text
        assert "--] hello there" in text


class TestRun:
    def test_plays_until_quit(self, make_game):
        ctl = GameController(make_game(*([4, 4, 4, 4, 4] * 3)), show_potential_scores=False)
        read, prompts = _scripted_input(["score fours", "q", "never read"])
        out = io.StringIO()

        run(ctl, read_line=read, out=out)

        assert ctl.game.score_for(Category.FOURS) == 20
        assert ctl.running is False
        assert prompts == [PROMPT, PROMPT]
        assert "YACHT DICE" in out.getvalue()

    def test_stops_on_eof(self, make_game):
        ctl = GameController(make_game(1, 2, 3, 4, 5), show_potential_scores=False)
        read, prompts = _scripted_input([])
        run(ctl, read_line=read, out=io.StringIO())
        assert len(prompts) == 1

    def test_stops_on_keyboard_interrupt(self, make_game):
        ctl = GameController(make_game(1, 2, 3, 4, 5), show_potential_scores=False)

        def _interrupt(prompt):
            raise KeyboardInterrupt

        run(ctl, read_line=_interrupt, out=io.StringIO())
        assert ctl.game.message == ""
