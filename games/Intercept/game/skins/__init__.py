"""Intercept skins (rendering)."""

from .base import InterceptSkin
from .geometric import GeometricSkin

__all__ = ['InterceptSkin', 'GeometricSkin']
