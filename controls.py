"""Keyboard bindings and player commands."""

import pygame


class Command:
    ASCEND = 'ascend'
    UP = 'up'
    DOWN = 'down'
    LEFT = 'left'
    RIGHT = 'right'

    # Control signals, not part of the directional set
    START = 'start'
    RESTART = 'restart'


DIRECTIONAL = (Command.ASCEND, Command.UP, Command.DOWN, Command.LEFT, Command.RIGHT)

KEY_BINDINGS = {
    pygame.K_SPACE: Command.ASCEND,
    pygame.K_UP: Command.UP,
    pygame.K_w: Command.UP,
    pygame.K_DOWN: Command.DOWN,
    pygame.K_s: Command.DOWN,
    pygame.K_LEFT: Command.LEFT,
    pygame.K_a: Command.LEFT,
    pygame.K_RIGHT: Command.RIGHT,
    pygame.K_d: Command.RIGHT,
    pygame.K_RETURN: Command.START,
}


def command_for_key(key, session):
    """Map a pressed key to a command.

    ENTER starts from the title screen and restarts after a game over.

    Returns:
        Command value, or None for unbound keys
    """
    command = KEY_BINDINGS.get(key)
    if command == Command.START and session.over:
        return Command.RESTART
    return command


class InputHandler:
    """Applies commands to the session between ticks.

    Movement is positional and instant; only ASCEND touches velocity.
    """

    def __init__(self, config):
        self.config = config

    def handle(self, session, command):
        """Apply one command.

        Args:
            session: Session to mutate
            command: Command value; unknown values are ignored

        Returns:
            True if the command was understood
        """
        handler = {
            Command.ASCEND: self.ascend,
            Command.UP: self.move_up,
            Command.DOWN: self.move_down,
            Command.LEFT: self.move_left,
            Command.RIGHT: self.move_right,
            Command.START: lambda s: s.start(),
            Command.RESTART: lambda s: s.reset(),
        }.get(command)

        if handler is None:
            return False
        handler(session)
        return True

    def ascend(self, session):
        if session.over:
            session.reset()
        else:
            session.submarine.velocity_y = self.config.buoyancy

    def move_up(self, session):
        submarine = session.submarine
        submarine.y = max(0, submarine.y - self.config.nudge_vertical)

    def move_down(self, session):
        submarine = session.submarine
        lowest = self.config.board_height - submarine.height
        submarine.y = min(lowest, submarine.y + self.config.nudge_vertical)

    def move_left(self, session):
        submarine = session.submarine
        submarine.x = max(0, submarine.x - self.config.nudge_horizontal)

    def move_right(self, session):
        submarine = session.submarine
        rightmost = self.config.board_width - submarine.width
        submarine.x = min(rightmost, submarine.x + self.config.nudge_horizontal)
