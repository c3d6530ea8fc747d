"""Main game loop wiring: timers, physics, collisions and collaborators."""

import logging

import pygame

from settings import GameConfig, GameEvent
from session import Session
from spawner import Spawner
from physics import Physics
from collision import CollisionResolver
from controls import InputHandler, command_for_key
from scheduler import Scheduler

logger = logging.getLogger(__name__)


class Game:
    """Main game class driving one session.

    The tick and both spawners are interval timers on a virtual clock; the
    frame loop feeds it elapsed milliseconds through update().
    """

    def __init__(self, config=None, sound=None, ui=None, rng=None):
        """Initialize the game.

        Args:
            config: GameConfig (defaults to the stock settings)
            sound: Object with handle_event(event), or None for silence
            ui: Object with render(screen, session), or None when headless
            rng: random.Random used for spawn placement
        """
        self.config = config or GameConfig()
        self.sound = sound
        self.ui = ui

        self.session = Session(self.config)
        self.spawner = Spawner(self.config, rng)
        self.physics = Physics(self.config)
        self.collisions = CollisionResolver(self.config)
        self.input = InputHandler(self.config)

        self.scheduler = Scheduler()
        self.tick_timer = self.scheduler.every(self.config.tick_ms, self.tick, 'tick')
        self.coral_timer = self.scheduler.every(self.config.coral_spawn_ms, self.spawn_corals, 'corals')
        self.fish_timer = self.scheduler.every(self.config.fish_spawn_ms, self.spawn_fish, 'fish')

        self.ticks = 0

    def handle_event(self, event):
        """Handle pygame events.

        Args:
            event: Pygame event
        """
        if event.type != pygame.KEYDOWN:
            return
        command = command_for_key(event.key, self.session)
        if command is not None:
            self.handle_command(command)

    def handle_command(self, command):
        """Apply a player command and bring timers in line with the new state."""
        was_running = self.session.running
        handled = self.input.handle(self.session, command)
        resumed = handled and self.session.running and not was_running
        if resumed:
            self._emit(GameEvent.GAME_START)
        self._sync_timers(restart=resumed)
        return handled

    def start(self):
        """Start play from the title screen."""
        started = self.session.start()
        if started:
            self._emit(GameEvent.GAME_START)
        self._sync_timers(restart=started)
        return started

    def restart(self):
        """Start over after a game over."""
        restarted = self.session.reset()
        if restarted:
            self._emit(GameEvent.GAME_START)
        self._sync_timers(restart=restarted)
        return restarted

    def _sync_timers(self, restart=False):
        """Run all timers while playing, none otherwise.

        Args:
            restart: Re-arm running timers so every period starts from now
        """
        running = self.session.running
        for timer in (self.tick_timer, self.coral_timer, self.fish_timer):
            if running and (restart or not timer.running):
                timer.start()
            elif not running and timer.running:
                timer.stop()

    def update(self, elapsed_ms):
        """Advance the game clock.

        Args:
            elapsed_ms: Milliseconds since the previous update
        """
        return self.scheduler.advance(elapsed_ms)

    def tick(self):
        """Run one physics + collision step.

        Returns:
            List of GameEvent values raised during the step
        """
        if not self.session.running:
            self._sync_timers()
            return []

        self.physics.step(self.session)
        events = self.collisions.resolve(self.session)
        self.ticks += 1

        for event in events:
            self._emit(event)
        if not self.session.running:
            self._sync_timers()
        return events

    def spawn_corals(self):
        return self.spawner.spawn_corals(self.session)

    def spawn_fish(self):
        return self.spawner.spawn_fish(self.session)

    def _emit(self, event):
        logger.debug("Event %s at tick %d", event, self.ticks)
        if self.sound is not None:
            self.sound.handle_event(event)

    def render(self, screen):
        """Render the game.

        Args:
            screen: Pygame display surface
        """
        if self.ui is not None:
            self.ui.render(screen, self.session)
