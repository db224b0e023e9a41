"""Round state machine and per-frame tick.

Phases:
    EDIT --start--> PLAY --reach target--> WIN
                      \\--time up / no lives--> LOSE
    WIN/LOSE/EDIT --start--> PLAY (fresh round)

The external driver calls `step` (or `SimulationEngine.tick`) once per
frame with the elapsed time. The target always moves; everything else
only runs in PLAY. Time only advances through `dt`; the simulation never
reads a clock.
"""

from typing import Optional

from arcadekit.games.input import KeyState
from arcadekit.logging import get_logger
from models import Point2D
from ..config import SimulationConfig
from .entities import ObjectKind, PlaceableObject
from .geometry import circles_intersect
from .physics import MoveResult, resolve_movement
from .placement import can_place, place_object
from .powerups import collect_pickups, expire_effects
from .snapshot import FrameSnapshot, take_snapshot
from .state import Phase, SimulationState, create_state, spawn_point, target_path

log = get_logger('simulation')

_IDLE = KeyState()


def start_round(state: SimulationState) -> None:
    """Begin a fresh round from any phase.

    Player goes back to spawn with full lives, no score and no effects;
    the target path is rebuilt and restarted; the countdown is reset.
    Placed objects stay.
    """
    config = state.config
    state.player.respawn(spawn_point(config), config.max_lives)
    state.target.reset(target_path(config))

    rnd = state.round
    rnd.round_start_time = rnd.sim_time
    rnd.time_left = config.round_time
    _set_phase(state, Phase.PLAY)


def _set_phase(state: SimulationState, phase: Phase, reason: str = "") -> None:
    previous = state.round.phase
    state.round.phase = phase
    suffix = f" ({reason})" if reason else ""
    log.info(f"Phase {previous.value} -> {phase.value} at t={state.now:.2f}{suffix}")


def _update_countdown(state: SimulationState) -> bool:
    """Recompute time left. Returns True if time ran out."""
    rnd = state.round
    rnd.time_left = max(0.0, state.config.round_time - rnd.elapsed)
    return rnd.time_left <= 0


def _update_play(state: SimulationState, dt: float, keys: KeyState) -> Optional[MoveResult]:
    """One PLAY-phase tick: countdown, effects, movement, pickups, win."""
    if _update_countdown(state):
        _set_phase(state, Phase.LOSE, "time up")
        return None

    if expire_effects(state.player, state.now):
        log.debug(f"Shield expired at t={state.now:.2f}")

    result = resolve_movement(state, keys, dt)
    if state.player.lives == 0:
        _set_phase(state, Phase.LOSE, "out of lives")
        return result

    collect_pickups(state)

    player = state.player
    target = state.target
    if circles_intersect(player.position, player.radius, target.position, target.radius):
        _set_phase(state, Phase.WIN, "target reached")

    return result


def step(
    state: SimulationState,
    dt: float,
    keys: KeyState = _IDLE,
) -> SimulationState:
    """Advance the simulation by dt seconds.

    Args:
        state: State to advance (mutated in place)
        dt: Elapsed seconds; negative values count as zero
        keys: Directional keys held this frame (ignored outside PLAY)

    Returns:
        The same state, for chaining
    """
    dt = max(0.0, dt)
    state.round.sim_time += dt
    state.target.advance(dt)

    if state.round.phase is Phase.PLAY:
        _update_play(state, dt, keys)

    return state


class SimulationEngine:
    """Owns one SimulationState and exposes the game's operations.

    Usage:
        engine = SimulationEngine()
        engine.place(ObjectKind.OBSTACLE, 400, 300)
        engine.start_round()
        engine.tick(1 / 60, KeyState(up=True))
        frame = engine.snapshot()
    """

    def __init__(self, config: Optional[SimulationConfig] = None):
        """Initialize engine in the EDIT phase.

        Args:
            config: Simulation settings (defaults to SimulationConfig())
        """
        self._state = create_state(config)
        log.debug(f"Simulation created: {self._state.config.as_dict()}")

    @property
    def state(self) -> SimulationState:
        return self._state

    @property
    def config(self) -> SimulationConfig:
        return self._state.config

    @property
    def phase(self) -> Phase:
        return self._state.phase

    def tick(self, dt: float, keys: KeyState = _IDLE) -> SimulationState:
        """Advance one frame. See `step`."""
        return step(self._state, dt, keys)

    def start_round(self) -> None:
        """Start or restart the round (valid from any phase)."""
        start_round(self._state)

    def can_place(self, x: float, y: float, radius: float) -> bool:
        """Whether a circle of radius at (x, y) keeps its distance from everything."""
        return can_place(self._state, Point2D(x=x, y=y), radius)

    def place(self, kind: ObjectKind, x: float, y: float) -> Optional[PlaceableObject]:
        """Place an object during EDIT. Returns None if rejected."""
        return place_object(self._state, kind, Point2D(x=x, y=y))

    def snapshot(self) -> FrameSnapshot:
        """Read-only view for rendering."""
        return take_snapshot(self._state)
