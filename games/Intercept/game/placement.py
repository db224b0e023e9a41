"""Build-phase placement rules.

A new object may not be dropped within `radius + min_separation` of any
placed object, the player, or the target's current position. The check
looks at positions at placement time only; nothing re-checks later.
"""

from typing import Dict, Optional

from arcadekit.logging import get_logger
from models import Point2D
from ..config import SimulationConfig
from .entities import ObjectKind, PlaceableObject
from .geometry import squared_distance
from .state import Phase, SimulationState

log = get_logger('placement')

# Config attribute holding each kind's radius
_RADIUS_SETTING: Dict[ObjectKind, str] = {
    ObjectKind.OBSTACLE: 'obstacle_radius',
    ObjectKind.COLLECTIBLE: 'collectible_radius',
    ObjectKind.SPEED_POWERUP: 'powerup_radius',
    ObjectKind.SHIELD_POWERUP: 'powerup_radius',
}


def radius_for_kind(kind: ObjectKind, config: SimulationConfig) -> float:
    """Radius a newly placed object of this kind gets."""
    return getattr(config, _RADIUS_SETTING[kind])


def can_place(state: SimulationState, point: Point2D, radius: float) -> bool:
    """Check whether an object of this radius may go at point.

    Pure query; does not look at the phase.

    Args:
        state: Current simulation state
        point: Proposed center
        radius: Proposed radius

    Returns:
        False if any placed object, the player or the target is closer
        than radius + min_separation; True otherwise
    """
    reach = radius + state.config.min_separation
    limit = reach * reach

    for obj in state.placed_objects():
        if squared_distance(point, obj.position) < limit:
            return False

    if squared_distance(point, state.player.position) < limit:
        return False

    if squared_distance(point, state.target.position) < limit:
        return False

    return True


def place_object(
    state: SimulationState,
    kind: ObjectKind,
    point: Point2D,
) -> Optional[PlaceableObject]:
    """Validate and add an object of the given kind at point.

    Rejected silently (returns None) outside the EDIT phase, outside the
    arena, or when too close to something.

    Args:
        state: Simulation state to add to
        kind: Kind of object to place
        point: Requested center (world coordinates)

    Returns:
        The new object, or None if rejected
    """
    if state.phase is not Phase.EDIT:
        log.debug(f"Placement ignored in phase {state.phase.value}")
        return None

    if not state.arena.contains_point(point):
        log.debug(f"Placement outside arena at {point}")
        return None

    radius = radius_for_kind(kind, state.config)
    if not can_place(state, point, radius):
        log.debug(f"Placement of {kind.value} rejected at {point}: too close")
        return None

    obj = PlaceableObject(position=point, radius=radius, kind=kind)
    state.collection_for(kind).append(obj)
    log.debug(f"Placed {obj}")
    return obj
