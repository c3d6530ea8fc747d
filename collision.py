"""Collision detection between the submarine and everything else."""

import logging

from settings import GameEvent

logger = logging.getLogger(__name__)


def collides(a, b):
    """Check whether two entities' boxes overlap (shared edges don't count)."""
    return a.rect().colliderect(b.rect())


def first_hit(submarine, entities):
    """Find the first entity in list order that touches the submarine.

    Returns:
        The entity, or None
    """
    for entity in entities:
        if collides(submarine, entity):
            return entity
    return None


class CollisionResolver:
    """Turns overlaps into lost lives, removals and events."""

    def __init__(self, config):
        self.config = config

    def resolve(self, session):
        """Resolve collisions for one tick.

        Corals are checked before fish. At most one hit per category is
        handled per tick, and nothing more is processed once the game ends.

        Args:
            session: Running session

        Returns:
            List of GameEvent values, in the order they happened
        """
        events = []

        for entities in (session.corals, session.fishes):
            if not session.running:
                break
            hit = first_hit(session.submarine, entities)
            if hit is None:
                continue

            entities.remove(hit)
            ended = session.lose_life()
            events.append(GameEvent.COLLISION)
            logger.debug("Hit %r, %d lives left", hit, session.lives)
            if ended:
                events.append(GameEvent.GAME_OVER)

        if session.running:
            events.extend(self.check_bounds(session))
        return events

    def check_bounds(self, session):
        """End the game if the submarine sank below the board, else keep it on the board."""
        submarine = session.submarine
        if submarine.y > self.config.board_height:
            session.end()
            return [GameEvent.GAME_OVER]

        submarine.y = min(submarine.y, self.config.board_height - submarine.height)
        return []
