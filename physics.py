"""Physics system for sinking, buoyancy and side scrolling."""


class Physics:
    """Advances everything that moves on its own by one tick."""

    def __init__(self, config):
        """Initialize physics system.

        Args:
            config: GameConfig with forces and scroll speeds
        """
        self.config = config

    def step(self, session):
        """Run one motion step.

        Args:
            session: Session to advance

        Returns:
            Score gained from corals passed this tick
        """
        self.scroll_background(session)
        self.apply_to_submarine(session.submarine)

        gained = self.move_corals(session)
        session.add_score(gained)

        self.move_fishes(session)
        self.prune(session)
        return gained

    def scroll_background(self, session):
        """Parallax scroll; a copy that leaves on the left re-enters on the right."""
        width = self.config.board_width
        for i, x in enumerate(session.background_x):
            x -= self.config.background_speed
            if x + width < 0:
                x = width
            session.background_x[i] = x

    def apply_to_submarine(self, submarine):
        """Apply gravity and buoyancy to the submarine.

        Args:
            submarine: Submarine with y and velocity_y attributes
        """
        submarine.velocity_y += self.config.gravity + self.config.buoyancy
        submarine.y += submarine.velocity_y

        # Never above the surface
        submarine.y = max(submarine.y, 0)

    def move_corals(self, session):
        """Scroll corals left and credit the ones the submarine has cleared.

        Each member of a pair is credited on its own.
        """
        submarine = session.submarine
        gained = 0.0

        for coral in session.corals:
            coral.x -= self.config.scroll_velocity
            if not coral.passed and submarine.x > coral.x + coral.width:
                coral.passed = True
                gained += self.config.pass_score

        return gained

    def move_fishes(self, session):
        for fish in session.fishes:
            fish.x -= self.config.scroll_velocity

    def prune(self, session):
        """Drop entities that have scrolled fully off the left edge."""
        session.fishes[:] = [f for f in session.fishes if not f.is_off_screen()]
        session.corals[:] = [c for c in session.corals if not c.is_off_screen()]
