# Training module for Submarine Dash agents
"""
This module provides a headless environment for training agents:
- SubmarineEnv: Gym-like environment wrapper over the game core
"""

from training.env import SubmarineEnv, ACTIONS

__all__ = ['SubmarineEnv', 'ACTIONS']
