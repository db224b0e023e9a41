"""Pickups and timed effects.

Each consumable kind maps to one effect function in PICKUP_EFFECTS;
adding a kind means adding an entry there. Effects are stored as
absolute expiry times on the player. Picking up an effect that is
already running restarts its window at now + duration; nothing stacks.
"""

from typing import Callable, Dict, List

from arcadekit.logging import get_logger
from ..config import SimulationConfig
from .entities import ObjectKind, PlaceableObject, Player
from .geometry import circles_intersect
from .state import SimulationState

log = get_logger('powerups')

PickupEffect = Callable[[Player, SimulationConfig, float], None]


def _award_points(player: Player, config: SimulationConfig, now: float) -> None:
    player.score += config.collectible_score


def _grant_speed(player: Player, config: SimulationConfig, now: float) -> None:
    player.speed_boost_expires_at = now + config.powerup_duration


def _grant_shield(player: Player, config: SimulationConfig, now: float) -> None:
    player.shielded = True
    player.shield_expires_at = now + config.shield_duration


PICKUP_EFFECTS: Dict[ObjectKind, PickupEffect] = {
    ObjectKind.COLLECTIBLE: _award_points,
    ObjectKind.SPEED_POWERUP: _grant_speed,
    ObjectKind.SHIELD_POWERUP: _grant_shield,
}


def apply_pickup(
    player: Player,
    kind: ObjectKind,
    config: SimulationConfig,
    now: float,
) -> None:
    """Apply the effect of consuming an object of this kind.

    Raises:
        KeyError: kind is not consumable (obstacles)
    """
    PICKUP_EFFECTS[kind](player, config, now)


def expire_effects(player: Player, now: float) -> bool:
    """Drop the shield once its window has passed.

    The speed boost has no flag to clear; its effect is read from
    `Player.is_boosted` whenever speed is needed.

    Returns:
        True if the shield was switched off by this call
    """
    if player.shielded and now >= player.shield_expires_at:
        player.shielded = False
        return True
    return False


def _consume_from(
    collection: List[PlaceableObject],
    player: Player,
    config: SimulationConfig,
    now: float,
) -> List[PlaceableObject]:
    """Remove and apply every object in collection touching the player."""
    kept: List[PlaceableObject] = []
    consumed: List[PlaceableObject] = []
    for obj in collection:
        if circles_intersect(player.position, player.radius, obj.position, obj.radius):
            consumed.append(obj)
        else:
            kept.append(obj)

    if not consumed:
        return consumed

    collection[:] = kept
    for obj in consumed:
        apply_pickup(player, obj.kind, config, now)
        log.debug(f"Picked up {obj} at t={now:.2f}")
    return consumed


def collect_pickups(state: SimulationState) -> List[PlaceableObject]:
    """Consume every collectible and power-up overlapping the player.

    Collectibles are resolved before power-ups. All overlaps in the same
    tick are applied.

    Returns:
        Objects consumed this call, in resolution order
    """
    player = state.player
    consumed = _consume_from(state.collectibles, player, state.config, state.now)
    consumed += _consume_from(state.powerups, player, state.config, state.now)
    return consumed
