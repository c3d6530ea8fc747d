"""Shared fixtures. pygame runs against dummy SDL drivers."""

import os
import random

os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

import pytest

from settings import GameConfig
from session import Session
from game import Game
from entities import Coral, Fish


class RecordingSound:
    """Audio stand-in that remembers every event it was sent."""

    def __init__(self):
        self.events = []

    def handle_event(self, event):
        self.events.append(event)


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def session(config):
    return Session(config)


@pytest.fixture
def running_session(session):
    session.start()
    return session


@pytest.fixture
def sound():
    return RecordingSound()


@pytest.fixture
def game(config, sound, rng):
    return Game(config, sound=sound, rng=rng)


def coral_on(submarine, config, orientation=Coral.TOP):
    """A coral overlapping the submarine after one scroll step."""
    return Coral(submarine.x + config.scroll_velocity, submarine.y - 10,
                 config.coral_width, config.coral_height, orientation)


def fish_on(submarine, config):
    """A fish overlapping the submarine after one scroll step."""
    return Fish(submarine.x + config.scroll_velocity, submarine.y,
                config.fish_width, config.fish_height)
