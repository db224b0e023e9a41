"""
Shared primitive data types for the game engine.

This module provides the basic geometric types used throughout the
codebase. Coordinates are world coordinates (y grows upward); only the
renderer converts to screen space.
"""

from pydantic import BaseModel, ConfigDict, computed_field, field_validator
from typing import Tuple


class Point2D(BaseModel):
    """Immutable 2D point/vector for positions, velocities, and coordinates.

    Attributes:
        x: X coordinate (horizontal)
        y: Y coordinate (vertical, up is positive)

    Examples:
        >>> pos = Point2D(x=100.0, y=200.0)
        >>> pos.as_tuple
        (100.0, 200.0)
    """
    x: float
    y: float

    model_config = ConfigDict(frozen=True)  # Immutable

    @property
    def as_tuple(self) -> Tuple[float, float]:
        """Return (x, y)."""
        return (self.x, self.y)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Point2D(x={self.x:.2f}, y={self.y:.2f})"


# Alias used where a value is a direction or velocity rather than a position
Vector2D = Point2D


class Rectangle(BaseModel):
    """Immutable axis-aligned rectangle.

    Position is the minimum corner (lowest x, lowest y). In world
    coordinates that is the bottom-left corner.

    Attributes:
        x: Minimum X
        y: Minimum Y
        width: Width of rectangle (must be positive)
        height: Height of rectangle (must be positive)

    Examples:
        >>> arena = Rectangle(x=0.0, y=120.0, width=1000.0, height=490.0)
        >>> arena.y_max
        610.0
        >>> arena.contains_point(Point2D(x=500.0, y=400.0))
        True
    """
    x: float
    y: float
    width: float
    height: float

    @field_validator('width', 'height')
    @classmethod
    def validate_positive_dimensions(cls, v: float) -> float:
        """Validate dimensions are positive."""
        if v <= 0:
            raise ValueError(f'Rectangle dimensions must be positive, got {v}')
        return v

    @computed_field
    @property
    def x_min(self) -> float:
        return self.x

    @computed_field
    @property
    def x_max(self) -> float:
        return self.x + self.width

    @computed_field
    @property
    def y_min(self) -> float:
        return self.y

    @computed_field
    @property
    def y_max(self) -> float:
        return self.y + self.height

    @computed_field
    @property
    def center(self) -> Point2D:
        """Calculate the center point of the rectangle."""
        return Point2D(
            x=self.x + self.width / 2,
            y=self.y + self.height / 2
        )

    def contains_point(self, point: Point2D) -> bool:
        """Check if a point is inside the rectangle.

        Args:
            point: The point to check

        Returns:
            True if point is inside or on the boundary of the rectangle

        Examples:
            >>> rect = Rectangle(x=0.0, y=0.0, width=100.0, height=100.0)
            >>> rect.contains_point(Point2D(x=100.0, y=50.0))
            True
            >>> rect.contains_point(Point2D(x=150.0, y=50.0))
            False
        """
        return (self.x_min <= point.x <= self.x_max and
                self.y_min <= point.y <= self.y_max)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Rectangle(x={self.x:.2f}, y={self.y:.2f}, w={self.width:.2f}, h={self.height:.2f})"
