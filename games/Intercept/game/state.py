"""Simulation state aggregate.

One SimulationState owns everything the tick function mutates: the
player, the target, the three object collections and the round clock.
Nothing lives in module globals, so any number of simulations can run
side by side.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional

from models import Point2D, Rectangle
from ..config import SimulationConfig
from .entities import ObjectKind, PlaceableObject, Player, Target, control_points_for_arena


class Phase(Enum):
    """Top-level round phase."""
    EDIT = "edit"
    PLAY = "play"
    WIN = "win"
    LOSE = "lose"

    @property
    def is_terminal(self) -> bool:
        return self in (Phase.WIN, Phase.LOSE)


@dataclass
class RoundState:
    """Round phase and clocks.

    time_left tracks round_time - (sim_time - round_start_time), floored
    at zero, while the phase is PLAY; it is frozen in every other phase.
    """

    time_left: float
    phase: Phase = Phase.EDIT
    round_start_time: float = 0.0
    sim_time: float = 0.0

    @property
    def elapsed(self) -> float:
        """Seconds since the round started."""
        return self.sim_time - self.round_start_time

    @property
    def seconds_left(self) -> int:
        """Countdown as shown on the HUD (whole seconds, rounded up)."""
        return int(math.ceil(self.time_left))


@dataclass
class SimulationState:
    """Everything the simulation owns."""

    config: SimulationConfig
    player: Player
    target: Target
    round: RoundState
    obstacles: List[PlaceableObject] = field(default_factory=list)
    collectibles: List[PlaceableObject] = field(default_factory=list)
    powerups: List[PlaceableObject] = field(default_factory=list)

    @property
    def phase(self) -> Phase:
        return self.round.phase

    @property
    def now(self) -> float:
        """Current sim time."""
        return self.round.sim_time

    @property
    def arena(self) -> Rectangle:
        """Playable rectangle between the HUD and palette panels."""
        return arena_bounds(self.config)

    def collection_for(self, kind: ObjectKind) -> List[PlaceableObject]:
        """The list that owns objects of this kind."""
        if kind is ObjectKind.OBSTACLE:
            return self.obstacles
        if kind is ObjectKind.COLLECTIBLE:
            return self.collectibles
        return self.powerups

    def placed_objects(self) -> Iterator[PlaceableObject]:
        """Every placed object, obstacles first."""
        yield from self.obstacles
        yield from self.collectibles
        yield from self.powerups


def arena_bounds(config: SimulationConfig) -> Rectangle:
    """Arena rectangle for a config."""
    return Rectangle(
        x=0.0,
        y=config.arena_y_min,
        width=config.screen_width,
        height=config.arena_y_max - config.arena_y_min,
    )


def spawn_point(config: SimulationConfig) -> Point2D:
    """Player start: horizontally centered, just above the arena floor."""
    return Point2D(
        x=config.screen_width * 0.5,
        y=config.arena_y_min + config.spawn_offset_y,
    )


def target_path(config: SimulationConfig):
    """Target control points for a config."""
    return control_points_for_arena(
        config.screen_width,
        config.arena_y_max,
        config.target_path_offset_y,
    )


def create_state(config: Optional[SimulationConfig] = None) -> SimulationState:
    """Fresh state in the EDIT phase with the player at spawn.

    Args:
        config: Settings to use (defaults to SimulationConfig())

    Returns:
        New SimulationState
    """
    config = config or SimulationConfig()
    player = Player(
        position=spawn_point(config),
        radius=config.player_radius,
        lives=config.max_lives,
    )
    target = Target(
        target_path(config),
        radius=config.target_radius,
        speed=config.target_speed,
    )
    return SimulationState(
        config=config,
        player=player,
        target=target,
        round=RoundState(time_left=config.round_time),
    )
