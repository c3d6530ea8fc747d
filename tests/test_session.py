"""
Tests for session state transitions.
"""

from settings import GameState
from entities import Coral, Fish


class TestTransitions:
    """NOT_STARTED -> RUNNING -> GAME_OVER -> RUNNING."""

    def test_initial_state(self, config, session):
        assert session.state == GameState.NOT_STARTED
        assert not session.started and not session.over
        assert session.lives == config.max_lives
        assert session.score == 0
        assert session.corals == [] and session.fishes == []

    def test_start(self, session):
        assert session.start()
        assert session.running and session.started

    def test_start_only_once(self, running_session):
        running_session.end()
        assert not running_session.start()
        assert running_session.over

    def test_reset_requires_game_over(self, running_session):
        assert not running_session.reset()
        assert running_session.running

    def test_end_requires_running(self, session):
        assert not session.end()
        assert session.state == GameState.NOT_STARTED


class TestReset:
    """Reset restores a fresh board but keeps the submarine's x."""

    def test_reset_clears_everything(self, config, running_session):
        running_session.corals.append(Coral(100, 0, 60, 500))
        running_session.fishes.append(Fish(100, 0, 60, 40))
        running_session.score = 12.5
        running_session.submarine.y = 10
        running_session.submarine.x = 40
        for _ in range(3):
            running_session.lose_life()
        assert running_session.over

        assert running_session.reset()

        assert running_session.running
        assert running_session.lives == config.max_lives
        assert running_session.score == 0
        assert running_session.corals == [] and running_session.fishes == []
        assert running_session.submarine.y == config.board_height // 2
        assert running_session.submarine.x == 40


class TestLives:
    """Lives stay within [0, max_lives]."""

    def test_lose_life(self, running_session):
        assert not running_session.lose_life()
        assert running_session.lives == 2

    def test_last_life_ends_game(self, running_session):
        running_session.lose_life()
        running_session.lose_life()
        assert running_session.lose_life()
        assert running_session.over

    def test_floor_at_zero(self, running_session):
        for _ in range(10):
            running_session.lose_life()
        assert running_session.lives == 0

    def test_score_never_decreases(self, running_session):
        running_session.add_score(0.5)
        running_session.add_score(-3)
        assert running_session.score == 0.5
