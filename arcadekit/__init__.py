"""
Arcadekit - small framework for frame-driven pygame games.

Provides the standard game interface (BaseGame, GameState), shared
input types and the unified logging module used by every game.
"""

__version__ = "1.0.0"

__all__ = ['__version__']
