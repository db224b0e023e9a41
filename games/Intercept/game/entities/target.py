"""Moving target the player must reach.

The target rides a cubic Bezier path, sweeping its path parameter t
back and forth over [0, 1] at a constant rate (ping-pong). It keeps
moving in every phase so it is visible while the level is being built.
"""

from typing import Tuple

from models import Point2D
from ..geometry import cubic_bezier

ControlPoints = Tuple[Point2D, Point2D, Point2D, Point2D]


def control_points_for_arena(
    screen_width: float,
    arena_y_max: float,
    offset_y: float,
) -> ControlPoints:
    """Derive the target path from the arena geometry.

    The path runs left to right across the top band of the arena, bulging
    up then down around a baseline `offset_y` below the arena ceiling.

    Args:
        screen_width: Arena width
        arena_y_max: Arena ceiling (world y)
        offset_y: Baseline distance below the ceiling

    Returns:
        Control points (P0, P1, P2, P3)
    """
    y_top = arena_y_max - offset_y
    return (
        Point2D(x=screen_width * 0.1, y=y_top),
        Point2D(x=screen_width * 0.3, y=y_top + 80.0),
        Point2D(x=screen_width * 0.7, y=y_top - 80.0),
        Point2D(x=screen_width * 0.9, y=y_top),
    )


class Target:
    """Ping-pong traversal of a fixed cubic Bezier path.

    The evaluated position is recomputed whenever t changes and cached,
    so collision, placement and rendering all read the same point.
    """

    def __init__(
        self,
        control_points: ControlPoints,
        radius: float,
        speed: float,
    ):
        """Initialize target at the start of its path.

        Args:
            control_points: Bezier control points P0..P3
            radius: Collision radius
            speed: Path parameter change per second
        """
        self._radius = radius
        self._speed = speed
        self._control_points = control_points
        self._t = 0.0
        self._direction = 1
        self._position = self._evaluate()

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def t(self) -> float:
        """Path parameter in [0, 1]."""
        return self._t

    @property
    def direction(self) -> int:
        """+1 while moving toward P3, -1 while moving back toward P0."""
        return self._direction

    @property
    def control_points(self) -> ControlPoints:
        return self._control_points

    @property
    def position(self) -> Point2D:
        """Point on the path at the current t."""
        return self._position

    def _evaluate(self) -> Point2D:
        return cubic_bezier(self._t, *self._control_points)

    def advance(self, dt: float) -> None:
        """Move along the path, reversing at either end.

        Args:
            dt: Elapsed seconds (negative values are treated as zero)
        """
        if dt <= 0:
            return

        self._t += self._direction * self._speed * dt
        if self._t > 1.0:
            self._t = 1.0
            self._direction = -1
        if self._t < 0.0:
            self._t = 0.0
            self._direction = 1

        self._position = self._evaluate()

    def reset(self, control_points: ControlPoints) -> None:
        """Install a new path and restart from its beginning."""
        self._control_points = control_points
        self._t = 0.0
        self._direction = 1
        self._position = self._evaluate()
