"""Coral and fish spawning."""

import logging
import random

from entities import Coral, Fish

logger = logging.getLogger(__name__)


class Spawner:
    """Places new corals and fish just past the right edge of the board."""

    def __init__(self, config, rng=None):
        """Initialize spawner.

        Args:
            config: GameConfig with board and entity dimensions
            rng: random.Random instance (seed it for reproducible runs)
        """
        self.config = config
        self.rng = rng or random.Random()

    def coral_offset(self):
        """Pick the shared vertical offset for the next coral pair.

        The top coral mostly hangs above the board, so its visible tip lands
        somewhere in the upper part of the playfield.
        """
        cfg = self.config
        offset = cfg.coral_base_y - cfg.coral_height / 4 - self.rng.random() * (cfg.coral_height / 2)
        return int(offset)

    def spawn_corals(self, session):
        """Append a top/bottom coral pair to the session.

        Args:
            session: Session receiving the corals

        Returns:
            (top, bottom) tuple, or None when the session is not running
        """
        if not session.running:
            return None

        cfg = self.config
        top_y = self.coral_offset()

        top = Coral(cfg.board_width, top_y, cfg.coral_width, cfg.coral_height, Coral.TOP)
        bottom = Coral(
            cfg.board_width,
            top_y + cfg.coral_height + cfg.coral_gap,
            cfg.coral_width,
            cfg.coral_height,
            Coral.BOTTOM,
        )

        session.corals.append(top)
        session.corals.append(bottom)
        logger.debug("Spawned coral pair at y=%d/%d", top.y, bottom.y)
        return top, bottom

    def spawn_fish(self, session):
        """Append one fish at a random height, a random distance ahead.

        Returns:
            The new Fish, or None when the session is not running
        """
        if not session.running:
            return None

        cfg = self.config
        x = cfg.board_width + self.rng.randrange(cfg.fish_spawn_jitter)
        y = self.rng.randint(0, cfg.board_height - cfg.fish_height)

        fish = Fish(x, y, cfg.fish_width, cfg.fish_height)
        session.fishes.append(fish)
        logger.debug("Spawned fish at (%d, %d)", x, y)
        return fish
