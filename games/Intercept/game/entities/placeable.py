"""Objects the player places in the arena during the build phase.

Placed objects never move or change; they are only removed when
consumed (collectibles and power-ups). Obstacles stay for the round.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from models import Point2D


class ObjectKind(Enum):
    """What a placed object is."""
    OBSTACLE = "obstacle"
    COLLECTIBLE = "collectible"
    SPEED_POWERUP = "speed_powerup"
    SHIELD_POWERUP = "shield_powerup"

    @property
    def is_powerup(self) -> bool:
        return self in (ObjectKind.SPEED_POWERUP, ObjectKind.SHIELD_POWERUP)


class PlaceableObject(BaseModel):
    """Immutable placed object: a circle of a given kind.

    Obstacles collide as squares of half-width `radius`; every other kind
    is treated as a circle.

    Attributes:
        position: Center in world coordinates
        radius: Circle radius / square half-width (must be positive)
        kind: Object kind
    """
    position: Point2D
    radius: float = Field(..., gt=0)
    kind: ObjectKind

    model_config = ConfigDict(frozen=True)

    @property
    def x(self) -> float:
        return self.position.x

    @property
    def y(self) -> float:
        return self.position.y

    def __str__(self) -> str:
        return f"{self.kind.value}@({self.x:.0f}, {self.y:.0f}) r={self.radius:.0f}"
