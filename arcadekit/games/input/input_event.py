"""
Input Event - Represents a single input action.

This is a shared module used by all games.
Uses dataclass for immutability.
"""
from dataclasses import dataclass
from typing import Tuple

from models import Point2D


@dataclass(frozen=True)
class InputEvent:
    """Immutable pointer event from any source.

    Represents a single click at a specific position and time.
    All input sources must convert their events to this common format.

    Attributes:
        position: The 2D position where the input occurred (world coordinates)
        timestamp: Time when the event occurred (seconds, from monotonic clock)
    """
    position: Point2D
    timestamp: float

    def __post_init__(self):
        """Validate timestamp is non-negative."""
        if self.timestamp < 0:
            raise ValueError(f'Timestamp must be non-negative, got {self.timestamp}')

    def __str__(self) -> str:
        """String representation for debugging."""
        return (f"InputEvent(pos=({self.position.x:.2f}, {self.position.y:.2f}), "
                f"t={self.timestamp:.3f})")


@dataclass(frozen=True)
class KeyState:
    """Snapshot of the four directional keys.

    Opposing keys held together cancel out; nothing here normalizes
    diagonals.
    """
    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False

    @property
    def is_idle(self) -> bool:
        return not (self.up or self.down or self.left or self.right)

    def velocity(self, speed: float) -> Tuple[float, float]:
        """Sum each held key's contribution along its axis (y-up).

        Args:
            speed: Magnitude contributed by each held key

        Returns:
            Tuple of (vx, vy)
        """
        vx = 0.0
        vy = 0.0
        if self.up:
            vy += speed
        if self.down:
            vy -= speed
        if self.left:
            vx -= speed
        if self.right:
            vx += speed
        return vx, vy
