"""
End-to-end scenarios through the frame orchestrator.
"""

import random

import pygame
import pytest

from settings import GameConfig, GameEvent, GameState
from controls import Command
from game import Game
from entities import Coral

from conftest import RecordingSound, coral_on, fish_on


def keydown(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


class TestStart:
    """Nothing moves or spawns before the game starts."""

    def test_idle_before_start(self, game):
        fired = game.update(10_000)

        assert fired == 0
        assert game.session.corals == [] and game.session.fishes == []
        assert game.ticks == 0

    def test_start_with_no_ticks(self, game, sound):
        assert game.start()

        session = game.session
        assert session.state == GameState.RUNNING
        assert session.corals == [] and session.fishes == []
        assert session.lives == 3
        assert session.score == 0
        assert sound.events == [GameEvent.GAME_START]

    def test_enter_key_starts(self, game):
        game.handle_event(keydown(pygame.K_RETURN))
        assert game.session.running

    def test_non_key_events_ignored(self, game):
        game.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(0, 0)))
        assert not game.session.started


class TestTimers:
    """Tick and spawners run on their own cadences while playing."""

    def test_tick_cadence(self, config, game):
        game.start()
        game.update(config.tick_ms * 10)
        assert game.ticks == 10

    def test_spawn_cadence(self, config, game):
        game.start()
        # 3000 ms: corals at 1500 and 3000, fish at 2000
        game.update(3000)

        assert len(game.session.corals) == 4
        assert len(game.session.fishes) == 1

    def test_small_frames_add_up(self, config, game):
        game.start()
        for _ in range(100):
            game.update(15)
        assert game.ticks == 1500 // config.tick_ms
        assert len(game.session.corals) == 2

    def test_spawning_stops_on_game_over(self, config, game):
        game.start()
        game.session.end()
        game.update(config.tick_ms)

        assert not game.coral_timer.running
        assert not game.fish_timer.running
        game.update(10_000)
        assert game.session.corals == [] and game.session.fishes == []


class TestCollisions:
    """Collisions cost lives, play cues and eventually end the game."""

    def test_single_coral_collision(self, config, game, sound):
        game.start()
        session = game.session
        coral = coral_on(session.submarine, config)
        session.corals.append(coral)

        game.tick()

        assert session.lives == 2
        assert coral not in session.corals
        assert session.state == GameState.RUNNING
        assert sound.events[-1] == GameEvent.COLLISION

    def test_three_collisions_end_game(self, config, game, sound):
        game.start()
        session = game.session

        for _ in range(3):
            session.fishes.append(fish_on(session.submarine, config))
            game.tick()

        assert session.lives == 0
        assert session.state == GameState.GAME_OVER
        assert sound.events[-2:] == [GameEvent.COLLISION, GameEvent.GAME_OVER]

        # No further motion once over
        far = Coral(1000, -300, config.coral_width, config.coral_height)
        session.corals.append(far)
        assert game.tick() == []
        game.update(1000)
        assert far.x == 1000
        assert not game.tick_timer.running

    def test_lives_bounded_across_play(self, config, rng):
        game = Game(config, rng=rng)
        game.start()
        for _ in range(2000):
            game.update(config.tick_ms)
            assert 0 <= game.session.lives <= config.max_lives
            if game.session.over:
                assert game.session.lives == 0 or game.session.submarine.y > config.board_height
                break


class TestProperties:
    """Invariants that hold for whole runs of the game."""

    @pytest.mark.parametrize('seed', [1, 2, 3])
    def test_submarine_stays_on_board(self, seed):
        config = GameConfig()
        game = Game(config, rng=random.Random(seed))
        game.start()
        commands = [Command.ASCEND, Command.UP, Command.DOWN, Command.LEFT, Command.RIGHT]
        picker = random.Random(seed)

        for _ in range(1500):
            if picker.random() < 0.3:
                game.handle_command(picker.choice(commands))
            game.update(config.tick_ms)
            if not game.session.running:
                break
            submarine = game.session.submarine
            assert 0 <= submarine.y <= config.board_height - submarine.height
            assert 0 <= submarine.x <= config.board_width - submarine.width

    def test_score_monotonic_while_running(self, config, rng):
        game = Game(config, rng=rng)
        game.start()
        last = 0.0
        for _ in range(1500):
            game.update(config.tick_ms)
            if not game.session.running:
                break
            assert game.session.score >= last
            last = game.session.score


class TestRestart:
    """ASCEND after a game over restarts play."""

    def test_ascend_while_over_resets(self, config, game, sound):
        game.start()
        game.update(5000)
        session = game.session
        session.score = 7.5
        session.end()
        game.update(config.tick_ms)

        game.handle_event(keydown(pygame.K_SPACE))

        assert session.state == GameState.RUNNING
        assert session.lives == 3
        assert session.score == 0
        assert session.corals == [] and session.fishes == []
        assert sound.events[-1] == GameEvent.GAME_START

        # Ticking resumes
        ticks = game.ticks
        game.update(config.tick_ms * 3)
        assert game.ticks == ticks + 3

    def test_restart_restarts_spawn_phase(self, config, game):
        game.start()
        game.update(1400)
        game.session.end()
        game.restart()

        game.update(200)
        assert game.session.corals == []
        game.update(1300)
        assert len(game.session.corals) == 2

    def test_restart_ignored_while_running(self, game):
        game.start()
        assert not game.restart()


class TestRender:
    """Rendering delegates to the UI collaborator."""

    def test_render_without_ui(self, game):
        game.render(None)

    def test_render_calls_ui(self, config):
        calls = []

        class FakeUI:
            def render(self, screen, session):
                calls.append((screen, session))

        game = Game(config, ui=FakeUI(), sound=RecordingSound())
        game.render('screen')

        assert calls == [('screen', game.session)]
