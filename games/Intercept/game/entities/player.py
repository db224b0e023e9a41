"""Player ship state.

The player is the only entity mutated every tick. Positions are in world
coordinates; facing angle is in degrees, counter-clockwise from +x.
"""

from dataclasses import dataclass

from models import Point2D


@dataclass
class Player:
    """Mutable player ship.

    Attributes:
        position: Center position
        radius: Collision radius
        facing_angle: Heading in degrees (90 = up)
        lives: Remaining lives, 0..max_lives
        score: Points collected, never negative
        shielded: Shield currently active
        shield_expires_at: Sim time the shield runs out
        speed_boost_expires_at: Sim time the speed boost runs out
        next_hit_time: Earliest sim time the player can take damage again
    """

    position: Point2D
    radius: float
    lives: int
    facing_angle: float = 90.0
    score: int = 0
    shielded: bool = False
    shield_expires_at: float = 0.0
    speed_boost_expires_at: float = 0.0
    next_hit_time: float = 0.0

    @property
    def x(self) -> float:
        return self.position.x

    @property
    def y(self) -> float:
        return self.position.y

    def is_boosted(self, now: float) -> bool:
        """Speed boost is active while now is before its expiry."""
        return now < self.speed_boost_expires_at

    def can_take_damage(self, now: float) -> bool:
        """Not shielded and outside the post-hit cooldown window."""
        return not self.shielded and now >= self.next_hit_time

    def take_hit(self, now: float, cooldown: float) -> None:
        """Lose one life (floor 0) and start the cooldown window.

        Args:
            now: Current sim time
            cooldown: Seconds before the next hit can land
        """
        self.lives = max(0, self.lives - 1)
        self.next_hit_time = now + cooldown

    def respawn(self, position: Point2D, lives: int) -> None:
        """Reset to the start-of-round state at position."""
        self.position = position
        self.facing_angle = 90.0
        self.lives = lives
        self.score = 0
        self.shielded = False
        self.shield_expires_at = 0.0
        self.speed_boost_expires_at = 0.0
        self.next_hit_time = 0.0
