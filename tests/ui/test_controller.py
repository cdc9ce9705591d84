"""Tests for src/ui/controller.py — the control-loop policy."""

import pytest

from src.config.settings import Settings
from src.engine.base import Category, TurnPhase
from src.engine.commands import GENERAL_HELP
from src.engine.yacht import MSG_NEW_GAME, MSG_SCORED
from src.ui.controller import GameController


@pytest.fixture
def controller(make_game):
    game = make_game(*([2, 2, 2, 2, 2] * 14))
    return GameController(game, show_potential_scores=False)


class TestSubmit:
    def test_game_command_applied(self, controller):
        assert controller.submit("score twos") is True
        assert controller.game.score_for(Category.TWOS) == 10
        assert controller.game.message == MSG_SCORED

    def test_quit_stops(self, controller):
        assert controller.submit("quit") is False
        assert controller.running is False

    def test_help_sets_message(self, controller):
        controller.submit("help")
        assert controller.game.message == GENERAL_HELP
        assert controller.game.phase is TurnPhase.FIRST_ROLL

    def test_unrecognized_sets_reason(self, controller):
        dice_before = controller.game.dice
        controller.submit("hold 9")
        assert controller.game.message == "Invalid Dice Number, should be (1-5)"
        assert controller.game.dice == dice_before

    def test_blank_line(self, controller):
        controller.submit("   ")
        assert controller.game.message == "No input found"


class TestGameOverPolicy:
    def _finish(self, controller):
        for category in Category:
            controller.submit(f"score {category.number}")
        assert controller.game.is_over

    @pytest.mark.parametrize("line", ["roll", "hold 1", "sort", "score 1", "help", "nonsense", ""])
    def test_any_input_starts_new_game(self, controller, line):
        self._finish(controller)
        assert controller.submit(line) is True
        game = controller.game
        assert game.phase is TurnPhase.FIRST_ROLL
        assert game.total == 0
        assert len(game.ledger) == 0
        assert game.message == MSG_NEW_GAME

    def test_quit_still_quits_after_game_over(self, controller):
        self._finish(controller)
        assert controller.submit("q") is False


class TestSnapshot:
    def test_snapshot_reflects_game(self, controller):
        controller.submit("hold 3")
        snap = controller.snapshot()
        assert snap.dice == [2, 2, 2, 2, 2]
        assert snap.holds == [False, False, True, False, False]
        assert snap.message == "Held dice number 3"

    def test_potentials_follow_setting(self, make_game):
        ctl = GameController(make_game(1, 2, 3, 4, 5), show_potential_scores=True)
        rows = {row.label: row for row in ctl.snapshot().rows}
        assert rows["Little Straight"].potential == 30


class TestFromSettings:
    def test_seeded_controllers_match(self):
        settings = Settings(seed=99)
        a = GameController.from_settings(settings)
        b = GameController.from_settings(settings)
        assert a.game.dice == b.game.dice

    def test_show_potential_scores_passed(self):
        ctl = GameController.from_settings(Settings(show_potential_scores=False))
        assert ctl.show_potential_scores is False
