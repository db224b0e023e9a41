"""
Shared pydantic models.

- Primitives: Basic geometric types (Point2D, Vector2D, Rectangle)

Usage:
    >>> from models import Point2D, Rectangle
"""

from .primitives import (
    Point2D,
    Vector2D,  # Alias for Point2D
    Rectangle,
)

__all__ = [
    'Point2D',
    'Vector2D',
    'Rectangle',
]
