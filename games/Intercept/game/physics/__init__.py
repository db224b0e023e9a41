"""Intercept movement and collision."""

from .collision import (
    MoveResult,
    current_speed,
    find_blocking_obstacle,
    clamp_to_arena,
    resolve_movement,
)

__all__ = [
    'MoveResult',
    'current_speed',
    'find_blocking_obstacle',
    'clamp_to_arena',
    'resolve_movement',
]
