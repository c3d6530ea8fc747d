"""Game session state: lives, score, entities and state transitions."""

import logging

from settings import GameState, GameConfig
from entities import Submarine

logger = logging.getLogger(__name__)


class Session:
    """Owns everything that changes while a game is played.

    State flow: NOT_STARTED -> start() -> RUNNING -> end() -> GAME_OVER
    -> reset() -> RUNNING. Transitions requested from the wrong state are
    ignored and reported through the return value.
    """

    def __init__(self, config=None):
        """Initialize a fresh, not yet started session.

        Args:
            config: GameConfig (defaults to the stock settings)
        """
        self.config = config or GameConfig()
        self.state = GameState.NOT_STARTED

        self.score = 0.0
        self.lives = self.config.max_lives

        self.submarine = Submarine(self.config)
        self.corals = []
        self.fishes = []

        # Two background copies side by side for seamless scrolling
        self.background_x = [0, self.config.board_width]

    @property
    def started(self):
        return self.state != GameState.NOT_STARTED

    @property
    def over(self):
        return self.state == GameState.GAME_OVER

    @property
    def running(self):
        return self.state == GameState.RUNNING

    def start(self):
        """Begin play from the title screen."""
        if self.state != GameState.NOT_STARTED:
            return False
        self.state = GameState.RUNNING
        logger.info("Game started")
        return True

    def reset(self):
        """Restart play after a game over."""
        if self.state != GameState.GAME_OVER:
            return False

        self.lives = self.config.max_lives
        self.score = 0.0
        self.submarine.y = self.config.submarine_start_y
        self.corals.clear()
        self.fishes.clear()
        self.state = GameState.RUNNING
        logger.info("Game reset")
        return True

    def end(self):
        """Finish the current game."""
        if self.state != GameState.RUNNING:
            return False
        self.state = GameState.GAME_OVER
        logger.info("Game over with score %d", int(self.score))
        return True

    def lose_life(self):
        """Take one life; the game ends when none are left.

        Returns:
            True if this loss ended the game
        """
        self.lives = max(0, self.lives - 1)
        if self.lives == 0:
            return self.end()
        return False

    def add_score(self, amount):
        if amount > 0:
            self.score += amount
