"""Player movement and obstacle collision.

Handles turning directional key state into a clamped, obstacle-aware
position update, and applying contact damage.

Obstacles are solid squares. A move that would put the ship inside one
is discarded entirely (the ship stays put). Contact hurts at most once
per cooldown window, however long the ship keeps pushing.
"""

import math
from dataclasses import dataclass
from typing import Iterable, Optional

from arcadekit.games.input import KeyState
from arcadekit.logging import get_logger
from models import Point2D
from ..entities import PlaceableObject, Player
from ..geometry import circle_overlaps_square, clamp
from ..state import SimulationState

log = get_logger('collision')


@dataclass(frozen=True)
class MoveResult:
    """Outcome of one movement step.

    Attributes:
        moved: Candidate position was committed
        blocked_by: Obstacle that stopped the move, if any
        damaged: A life was lost this step
    """
    moved: bool
    blocked_by: Optional[PlaceableObject] = None
    damaged: bool = False

    @property
    def blocked(self) -> bool:
        return self.blocked_by is not None


def current_speed(state: SimulationState) -> float:
    """Boosted speed while a speed power-up is running, else base speed."""
    if state.player.is_boosted(state.now):
        return state.config.speed_boost
    return state.config.player_speed


def find_blocking_obstacle(
    candidate: Point2D,
    radius: float,
    obstacles: Iterable[PlaceableObject],
) -> Optional[PlaceableObject]:
    """First obstacle a ship of this radius at candidate would penetrate.

    Args:
        candidate: Proposed ship center
        radius: Ship radius
        obstacles: Obstacles to test (square half-width = obstacle radius)

    Returns:
        The blocking obstacle, or None if the way is clear
    """
    for obstacle in obstacles:
        if circle_overlaps_square(candidate, radius, obstacle.position, obstacle.radius):
            return obstacle
    return None


def clamp_to_arena(state: SimulationState, point: Point2D, radius: float) -> Point2D:
    """Keep a circle of this radius fully inside the arena."""
    arena = state.arena
    return Point2D(
        x=clamp(point.x, arena.x_min + radius, arena.x_max - radius),
        y=clamp(point.y, arena.y_min + radius, arena.y_max - radius),
    )


def _face_velocity(player: Player, vx: float, vy: float) -> None:
    """Turn to face the direction of travel; hold heading when idle."""
    if vx != 0 or vy != 0:
        player.facing_angle = math.degrees(math.atan2(vy, vx))


def resolve_movement(
    state: SimulationState,
    keys: KeyState,
    dt: float,
) -> MoveResult:
    """Move the player one step according to held keys.

    Each held key adds +/- speed along its axis; opposing keys cancel and
    diagonals are not normalized, so diagonal travel is faster.

    Args:
        state: Simulation state (player is mutated in place)
        keys: Directional key state
        dt: Elapsed seconds

    Returns:
        MoveResult describing what happened
    """
    player = state.player
    vx, vy = keys.velocity(current_speed(state))
    _face_velocity(player, vx, vy)

    candidate = clamp_to_arena(
        state,
        Point2D(x=player.x + vx * dt, y=player.y + vy * dt),
        player.radius,
    )

    blocker = find_blocking_obstacle(candidate, player.radius, state.obstacles)
    if blocker is None:
        player.position = candidate
        return MoveResult(moved=True)

    damaged = False
    if player.can_take_damage(state.now):
        player.take_hit(state.now, state.config.hit_cooldown)
        damaged = True
        log.debug(f"Hit {blocker} at t={state.now:.2f}, lives={player.lives}")

    return MoveResult(moved=False, blocked_by=blocker, damaged=damaged)
