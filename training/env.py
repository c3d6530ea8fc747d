# Gym-like environment wrapper for Submarine Dash

import random

import numpy as np

from settings import GameConfig, GameEvent
from game import Game
from controls import DIRECTIONAL
from training.config import ENV_CONFIG, OBS_CONFIG, REWARD_CONFIG

# Action index -> command (0 does nothing)
ACTIONS = (None,) + DIRECTIONAL


class SubmarineEnv:
    """Gym-like environment wrapper for the submarine game.

    Runs headless on the game's virtual clock: one step applies a command
    and advances the configured number of ticks.
    """

    def __init__(self, config=None, max_steps=None, seed=None):
        """Initialize the environment.

        Args:
            config: GameConfig for the underlying game
            max_steps: Steps before truncation (default from ENV_CONFIG)
            seed: Random seed for reproducibility
        """
        self.config = config or GameConfig()
        self.max_steps = max_steps or ENV_CONFIG['max_steps']
        self.ticks_per_step = ENV_CONFIG['ticks_per_step']
        self.rng = random.Random(seed)

        # Game instance (created on reset)
        self.game = None

        # Episode tracking
        self.step_count = 0
        self.episode_reward = 0.0
        self._events = []

    @property
    def num_actions(self):
        return len(ACTIONS)

    @property
    def observation_size(self):
        entities = OBS_CONFIG['max_corals'] + OBS_CONFIG['max_fish']
        return OBS_CONFIG['submarine_features'] + entities * OBS_CONFIG['entity_features']

    def seed(self, seed):
        """Set random seed for reproducibility."""
        self.rng.seed(seed)

    def reset(self, seed=None):
        """Reset environment for new episode.

        Args:
            seed: Optional random seed

        Returns:
            observation: Initial observation array
            info: Additional info dict
        """
        if seed is not None:
            self.seed(seed)

        self.game = Game(self.config, sound=self, rng=self.rng)
        self.game.start()

        self.step_count = 0
        self.episode_reward = 0.0

        return self._get_observation(), self._get_info()

    def step(self, action):
        """Execute one action and advance the game.

        Args:
            action: Index into ACTIONS

        Returns:
            observation: New observation after action
            reward: Reward for this step
            terminated: True if the game ended
            truncated: True if max steps reached
            info: Additional info dict
        """
        if self.game is None:
            raise RuntimeError("Call reset() before step()")
        if not 0 <= action < len(ACTIONS):
            raise ValueError(f"Invalid action {action}; expected 0..{len(ACTIONS) - 1}")

        session = self.game.session
        prev_score = session.score
        self._events = []

        command = ACTIONS[action]
        if command is not None:
            self.game.handle_command(command)

        # Advance the clock so spawn timers fire alongside the ticks
        for _ in range(self.ticks_per_step):
            self.game.update(self.config.tick_ms)
            if not session.running:
                break

        reward = self._calculate_reward(session.score - prev_score, self._events)
        self.episode_reward += reward
        self.step_count += 1

        terminated = session.over
        truncated = self.step_count >= self.max_steps and not terminated

        return self._get_observation(), reward, terminated, truncated, self._get_info()

    def handle_event(self, event):
        """Collect game events raised during a step (stands in for audio)."""
        self._events.append(event)

    def _calculate_reward(self, score_gained, events):
        """Calculate reward based on what happened this step."""
        reward = score_gained * REWARD_CONFIG['score_multiplier']

        for event in events:
            if event == GameEvent.COLLISION:
                reward += REWARD_CONFIG['life_lost_penalty']
            elif event == GameEvent.GAME_OVER:
                reward += REWARD_CONFIG['game_over_penalty']

        if self.game.session.running:
            reward += REWARD_CONFIG['survival_bonus']

        return reward

    def _nearest_ahead(self, entities, limit):
        """Entities whose right edge is still ahead of the submarine, closest first."""
        submarine = self.game.session.submarine
        ahead = [e for e in entities if e.x + e.width >= submarine.x]
        ahead.sort(key=lambda e: e.x)
        return ahead[:limit]

    def _get_observation(self):
        """Build a flat observation vector from game state.

        Returns:
            float32 array: submarine features, then (dx, y) per coral and fish
        """
        session = self.game.session
        submarine = session.submarine
        width = self.config.board_width
        height = self.config.board_height

        max_velocity = OBS_CONFIG['max_velocity']
        features = [
            submarine.x / width,
            submarine.y / height,
            float(np.clip(submarine.velocity_y / max_velocity, -1.0, 1.0)),
            session.lives / self.config.max_lives,
        ]

        for entities, limit in ((session.corals, OBS_CONFIG['max_corals']),
                                (session.fishes, OBS_CONFIG['max_fish'])):
            nearest = self._nearest_ahead(entities, limit)
            for entity in nearest:
                features.extend([(entity.x - submarine.x) / width, entity.y / height])
            # Pad if fewer entities
            features.extend([0.0, 0.0] * (limit - len(nearest)))

        return np.array(features, dtype=np.float32)

    def _get_info(self):
        """Get additional info about current state."""
        session = self.game.session
        return {
            'step': self.step_count,
            'score': session.score,
            'lives': session.lives,
            'game_state': session.state,
            'episode_reward': self.episode_reward,
        }
