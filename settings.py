# Submarine Dash - Settings and Constants

import os
from dataclasses import dataclass

# Screen settings
BOARD_WIDTH = 1900
BOARD_HEIGHT = 720
FPS = 60
TITLE = "Submarine Dash"

# Timing (milliseconds on the game clock)
TICK_MS = 16
CORAL_SPAWN_MS = 1500
FISH_SPAWN_MS = 2000

# Audio settings
SOUND_ENABLED = True
SFX_VOLUME = 0.7      # 0.0 to 1.0
SAMPLE_RATE = 22050   # Audio sample rate in Hz

# Physics (pixels per tick)
GRAVITY = 1
BUOYANCY = -1
SCROLL_VELOCITY = 10
BACKGROUND_SPEED = 2

# Submarine
SUBMARINE_WIDTH = 80
SUBMARINE_HEIGHT = 45
NUDGE_VERTICAL = 20
NUDGE_HORIZONTAL = 5

# Coral
CORAL_WIDTH = 60
CORAL_HEIGHT = 500
CORAL_BASE_Y = 0

# Fish
FISH_WIDTH = 60
FISH_HEIGHT = 40
FISH_SPAWN_JITTER = 300  # max lead distance past the right edge

# Scoring and lives
MAX_LIVES = 3
PASS_SCORE = 0.5

# HUD
HEART_SIZE = 50
HEART_SPACING = 10
HEART_ORIGIN = (10, 70)
SCORE_ORIGIN = (10, 35)
FONT_SIZE = 32

# Assets
ASSETS_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'assets')
IMAGE_FILES = {
    'background': 'submarine_background.png',
    'submarine': 'submarine.png',
    'coral_top': 'coral_top.png',
    'coral_bottom': 'coral_bottom.png',
    'fish': 'fish.png',
    'full_heart': 'full_heart.png',
    'blank_heart': 'blank_heart.png',
}
SOUND_FILES = {
    'collision': 'collision.wav',
    'game_over': 'gameover.wav',
}

# Placeholder palette used when images are missing
COLORS = {
    # Water gradient
    'water_top': (18, 92, 140),
    'water_bottom': (6, 30, 66),

    # Entities
    'submarine': (250, 200, 40),
    'submarine_window': (120, 200, 255),
    'coral_top': (230, 110, 120),
    'coral_bottom': (240, 140, 90),
    'fish': (255, 150, 40),

    # UI
    'text': (255, 255, 255),
    'text_shadow': (0, 0, 0),
    'heart_full': (220, 40, 60),
    'heart_blank': (90, 90, 100),
    'overlay': (0, 0, 0, 140),
}


# Game states
class GameState:
    NOT_STARTED = 'not_started'
    RUNNING = 'running'
    GAME_OVER = 'game_over'


# Events raised by the game loop for audio/UI collaborators
class GameEvent:
    GAME_START = 'game_start'
    COLLISION = 'collision'
    GAME_OVER = 'game_over'


@dataclass
class GameConfig:
    """Tunable gameplay parameters.

    Defaults mirror the module constants so a bare ``GameConfig()`` plays the
    stock game. Tests and the training env override individual fields.
    """
    board_width: int = BOARD_WIDTH
    board_height: int = BOARD_HEIGHT

    tick_ms: int = TICK_MS
    coral_spawn_ms: int = CORAL_SPAWN_MS
    fish_spawn_ms: int = FISH_SPAWN_MS

    gravity: int = GRAVITY
    buoyancy: int = BUOYANCY
    scroll_velocity: int = SCROLL_VELOCITY
    background_speed: int = BACKGROUND_SPEED

    submarine_width: int = SUBMARINE_WIDTH
    submarine_height: int = SUBMARINE_HEIGHT
    nudge_vertical: int = NUDGE_VERTICAL
    nudge_horizontal: int = NUDGE_HORIZONTAL

    coral_width: int = CORAL_WIDTH
    coral_height: int = CORAL_HEIGHT
    coral_base_y: int = CORAL_BASE_Y

    fish_width: int = FISH_WIDTH
    fish_height: int = FISH_HEIGHT
    fish_spawn_jitter: int = FISH_SPAWN_JITTER

    max_lives: int = MAX_LIVES
    pass_score: float = PASS_SCORE

    @property
    def submarine_start_x(self):
        return self.board_width // 8

    @property
    def submarine_start_y(self):
        return self.board_height // 2

    @property
    def coral_gap(self):
        """Vertical opening between the top and bottom coral of a pair."""
        return self.board_height // 3
