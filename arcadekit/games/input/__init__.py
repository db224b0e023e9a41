"""
Input abstraction layer for arcadekit games.

Pointer clicks arrive as InputEvent; held directional keys as KeyState.
"""

from arcadekit.games.input.input_event import InputEvent, KeyState

__all__ = ['InputEvent', 'KeyState']
