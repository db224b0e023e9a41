"""Intercept game entities."""

from .placeable import ObjectKind, PlaceableObject
from .player import Player
from .target import Target, ControlPoints, control_points_for_arena

__all__ = [
    'ObjectKind', 'PlaceableObject',
    'Player',
    'Target', 'ControlPoints', 'control_points_for_arena',
]
