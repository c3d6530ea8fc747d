"""UI rendering - world, HUD and overlays."""

import pygame

from settings import (
    COLORS, FONT_SIZE, HEART_SIZE, HEART_SPACING, HEART_ORIGIN, SCORE_ORIGIN
)
from entities import Coral


class UI:
    """Draws a session onto a surface. Falls back to shapes for missing images."""

    def __init__(self, config, sprites=None):
        """Initialize UI system.

        Args:
            config: GameConfig with board dimensions
            sprites: SpriteSet, or None to draw placeholders only
        """
        pygame.font.init()
        self.config = config
        self.sprites = sprites
        self.font = pygame.font.Font(None, FONT_SIZE)
        self.font_large = pygame.font.Font(None, FONT_SIZE * 2)

    def _image(self, name):
        if self.sprites is None:
            return None
        return self.sprites.get(name)

    def render(self, screen, session):
        """Render one frame.

        Args:
            screen: Pygame surface
            session: Session to draw
        """
        self.render_background(screen, session.background_x)
        self.render_submarine(screen, session.submarine)
        for coral in session.corals:
            self.render_coral(screen, coral)
        for fish in session.fishes:
            self.render_fish(screen, fish)

        self.render_hearts(screen, session.lives)

        if session.over:
            self.render_game_over(screen, session.score)
        elif not session.started:
            self.render_title(screen)
        else:
            self._text(screen, str(int(session.score)), SCORE_ORIGIN)

    def render_background(self, screen, offsets):
        """Render two scrolling background copies."""
        image = self._image('background')
        if image is not None:
            for x in offsets:
                screen.blit(image, (x, 0))
            return

        # Water gradient
        height = self.config.board_height
        top, bottom = COLORS['water_top'], COLORS['water_bottom']
        for y in range(0, height, 4):
            ratio = y / height
            color = tuple(int(top[i] + (bottom[i] - top[i]) * ratio) for i in range(3))
            pygame.draw.rect(screen, color, (0, y, self.config.board_width, 4))

    def render_submarine(self, screen, submarine):
        image = self._image('submarine')
        if image is not None:
            screen.blit(image, (submarine.x, submarine.y))
            return

        rect = submarine.rect()
        pygame.draw.ellipse(screen, COLORS['submarine'], rect)
        window = pygame.Rect(0, 0, rect.height // 2, rect.height // 2)
        window.center = (rect.centerx + rect.width // 5, rect.centery)
        pygame.draw.ellipse(screen, COLORS['submarine_window'], window)

    def render_coral(self, screen, coral):
        name = 'coral_top' if coral.orientation == Coral.TOP else 'coral_bottom'
        image = self._image(name)
        if image is not None:
            screen.blit(image, (coral.x, coral.y))
        else:
            pygame.draw.rect(screen, COLORS[name], coral.rect(), border_radius=12)

    def render_fish(self, screen, fish):
        image = self._image('fish')
        if image is not None:
            screen.blit(image, (fish.x, fish.y))
            return

        rect = fish.rect()
        body = pygame.Rect(rect.x, rect.y, rect.width * 3 // 4, rect.height)
        pygame.draw.ellipse(screen, COLORS['fish'], body)
        # Tail points right; fish swim leftward
        tail = [
            (body.right - 4, rect.centery),
            (rect.right, rect.top),
            (rect.right, rect.bottom),
        ]
        pygame.draw.polygon(screen, COLORS['fish'], tail)

    def render_hearts(self, screen, lives):
        """Render one heart per starting life, filled while the life remains."""
        start_x, start_y = HEART_ORIGIN
        for i in range(self.config.max_lives):
            x = start_x + i * (HEART_SIZE + HEART_SPACING)
            full = i < lives
            image = self._image('full_heart' if full else 'blank_heart')
            if image is not None:
                screen.blit(image, (x, start_y))
            else:
                color = COLORS['heart_full'] if full else COLORS['heart_blank']
                pygame.draw.rect(screen, color, (x, start_y, HEART_SIZE, HEART_SIZE), border_radius=10)

    def render_title(self, screen):
        """Render the start prompt."""
        text = self.font_large.render("Press ENTER to Begin", True, COLORS['text'])
        rect = text.get_rect(center=(self.config.board_width // 2, self.config.board_height // 2))
        shadow = self.font_large.render("Press ENTER to Begin", True, COLORS['text_shadow'])
        screen.blit(shadow, rect.move(3, 3))
        screen.blit(text, rect)

    def render_game_over(self, screen, score):
        """Render game over text over a darkened board."""
        overlay = pygame.Surface((self.config.board_width, self.config.board_height), pygame.SRCALPHA)
        overlay.fill(COLORS['overlay'])
        screen.blit(overlay, (0, 0))

        x, y = SCORE_ORIGIN
        self._text(screen, f"Game Over: {int(score)}", (x, y))
        # Below the hearts
        self._text(screen, "Press SPACE to Restart", (x, HEART_ORIGIN[1] + HEART_SIZE + y))

    def _text(self, screen, message, pos):
        # Baseline-style positioning: pos is the bottom-left of the text
        label = self.font.render(message, True, COLORS['text'])
        rect = label.get_rect(bottomleft=pos)
        screen.blit(label, rect)
