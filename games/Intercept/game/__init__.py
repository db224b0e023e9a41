"""Intercept game simulation: entities, rules and the round state machine."""

from .entities import ObjectKind, PlaceableObject, Player, Target
from .state import Phase, RoundState, SimulationState, create_state
from .simulation import SimulationEngine, start_round, step
from .snapshot import FrameSnapshot

__all__ = [
    'ObjectKind', 'PlaceableObject', 'Player', 'Target',
    'Phase', 'RoundState', 'SimulationState', 'create_state',
    'SimulationEngine', 'start_round', 'step',
    'FrameSnapshot',
]
