"""Image loading with placeholder fallbacks."""

import logging
import os

import pygame

from settings import ASSETS_DIR, IMAGE_FILES, HEART_SIZE

logger = logging.getLogger(__name__)


def load_image(path, size=None):
    """Load an image file, optionally scaled.

    Args:
        path: File path
        size: (width, height) to scale to, or None

    Returns:
        pygame Surface, or None if the file is missing or unreadable
    """
    if not os.path.exists(path):
        logger.warning("Image not found: %s", path)
        return None

    try:
        image = pygame.image.load(path)
        if pygame.display.get_surface() is not None:
            image = image.convert_alpha()
    except pygame.error as exc:
        logger.warning("Could not load image %s: %s", path, exc)
        return None

    if size is not None:
        image = pygame.transform.scale(image, size)
    return image


class SpriteSet:
    """All game images, keyed by name. Missing images stay None."""

    def __init__(self, config, assets_dir=ASSETS_DIR):
        """Load every image the game draws.

        Args:
            config: GameConfig with entity sizes
            assets_dir: Directory holding the image files
        """
        sizes = {
            'background': (config.board_width, config.board_height),
            'submarine': (config.submarine_width, config.submarine_height),
            'coral_top': (config.coral_width, config.coral_height),
            'coral_bottom': (config.coral_width, config.coral_height),
            'fish': (config.fish_width, config.fish_height),
            'full_heart': (HEART_SIZE, HEART_SIZE),
            'blank_heart': (HEART_SIZE, HEART_SIZE),
        }

        self.images = {}
        for name, filename in IMAGE_FILES.items():
            self.images[name] = load_image(os.path.join(assets_dir, filename), sizes.get(name))

    def get(self, name):
        return self.images.get(name)
