"""Submarine, coral and fish records."""

import pygame


class Entity:
    """Axis-aligned box positioned in board pixels."""

    def __init__(self, x, y, width, height):
        self.x = x
        self.y = y
        self.width = width
        self.height = height

    def rect(self):
        """Get the bounding box as a pygame Rect."""
        return pygame.Rect(self.x, self.y, self.width, self.height)

    def is_off_screen(self):
        """True once the entity has scrolled fully past the left edge."""
        return self.x + self.width < 0

    def __repr__(self):
        return f"{type(self).__name__}(x={self.x}, y={self.y})"


class Submarine(Entity):
    """The player-controlled submarine."""

    def __init__(self, config):
        """Initialize the submarine at its start position.

        Args:
            config: GameConfig with board and submarine dimensions
        """
        super().__init__(
            config.submarine_start_x,
            config.submarine_start_y,
            config.submarine_width,
            config.submarine_height,
        )
        self.velocity_y = 0


class Coral(Entity):
    """One member of a coral pair."""

    TOP = 'top'
    BOTTOM = 'bottom'

    def __init__(self, x, y, width, height, orientation=TOP):
        """Initialize coral.

        Args:
            x, y: Top-left position
            width, height: Size
            orientation: Coral.TOP or Coral.BOTTOM (sprite selection only)
        """
        super().__init__(x, y, width, height)
        self.orientation = orientation
        self.passed = False  # Set once the submarine clears it


class Fish(Entity):
    """A fish swimming toward the submarine."""
