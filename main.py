#!/usr/bin/env python3
"""Submarine Dash - Main Entry Point"""

import argparse
import logging
import random
import sys

import pygame

from settings import FPS, TITLE, GameConfig
from game import Game
from sound import SoundManager
from sprites import SpriteSet
from ui import UI


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description=TITLE)
    parser.add_argument('--mute', action='store_true', help='Disable sound effects')
    parser.add_argument('--seed', type=int, default=None, help='Seed for spawn placement')
    parser.add_argument('--log-level', default='INFO',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'])
    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point for the game."""
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    # Initialize Pygame
    pygame.init()
    config = GameConfig()

    # Set up the display
    screen = pygame.display.set_mode((config.board_width, config.board_height))
    pygame.display.set_caption(TITLE)

    # Create clock for FPS control
    clock = pygame.time.Clock()

    # Create game instance
    game = Game(
        config,
        sound=SoundManager(enabled=not args.mute),
        ui=UI(config, SpriteSet(config)),
        rng=random.Random(args.seed),
    )

    # Main game loop
    running = True
    while running:
        elapsed_ms = clock.tick(FPS)

        # Handle events
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
            else:
                game.handle_event(event)

        # Update game state
        game.update(elapsed_ms)

        # Render
        game.render(screen)

        # Flip the display
        pygame.display.flip()

    # Clean up
    pygame.quit()
    sys.exit()


if __name__ == '__main__':
    main()
