"""Read-only view of the simulation handed to the renderer.

Snapshots are frozen pydantic models built once per frame; the render
path reads them and never touches SimulationState directly.
"""

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field

from models import Point2D
from .entities import PlaceableObject
from .state import Phase, SimulationState


class PlayerSnapshot(BaseModel):
    """Player fields the HUD and ship sprite need."""
    position: Point2D
    radius: float
    facing_angle: float
    lives: int = Field(..., ge=0)
    score: int = Field(..., ge=0)
    shielded: bool

    model_config = ConfigDict(frozen=True)


class TargetSnapshot(BaseModel):
    """Target position on its path this frame."""
    position: Point2D
    radius: float
    t: float = Field(..., ge=0, le=1)

    model_config = ConfigDict(frozen=True)


class FrameSnapshot(BaseModel):
    """Everything drawn in one frame."""
    phase: Phase
    sim_time: float
    time_left: float = Field(..., ge=0)
    seconds_left: int = Field(..., ge=0)
    player: PlayerSnapshot
    target: TargetSnapshot
    obstacles: Tuple[PlaceableObject, ...] = ()
    collectibles: Tuple[PlaceableObject, ...] = ()
    powerups: Tuple[PlaceableObject, ...] = ()

    model_config = ConfigDict(frozen=True)


def take_snapshot(state: SimulationState) -> FrameSnapshot:
    """Copy the renderable parts of state into a FrameSnapshot."""
    player = state.player
    return FrameSnapshot(
        phase=state.phase,
        sim_time=state.now,
        time_left=state.round.time_left,
        seconds_left=state.round.seconds_left,
        player=PlayerSnapshot(
            position=player.position,
            radius=player.radius,
            facing_angle=player.facing_angle,
            lives=player.lives,
            score=player.score,
            shielded=player.shielded,
        ),
        target=TargetSnapshot(
            position=state.target.position,
            radius=state.target.radius,
            t=state.target.t,
        ),
        obstacles=tuple(state.obstacles),
        collectibles=tuple(state.collectibles),
        powerups=tuple(state.powerups),
    )
