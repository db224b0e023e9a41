"""Base class for all arcadekit games.

All games should inherit from BaseGame to ensure a consistent interface
with launchers and tooling.

Game metadata (NAME, DESCRIPTION, etc.) and CLI arguments (ARGUMENTS)
are declared as class attributes, making them part of the plugin architecture.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List

import pygame

from arcadekit.games.game_state import GameState
from arcadekit.logging import get_logger

log = get_logger('base_game')


class BaseGame(ABC):
    """Abstract base class for all arcadekit games.

    Class Attributes (metadata):
        NAME: Display name for the game
        DESCRIPTION: Short description of gameplay
        VERSION: Semantic version string
        AUTHOR: Author/team name
        ARGUMENTS: List of CLI argument definitions for argparse

    Subclasses must implement:
        - _get_internal_state() -> GameState: Map internal state to standard state
        - get_score() -> int: Return current score
        - handle_input(events): Process input events
        - update(dt): Update game logic
        - render(screen): Draw the game

    Optional overrides:
        - reset(): Reset game to initial state
        - get_available_actions() / execute_action(id): Player actions

    Usage:
        class MyGame(BaseGame):
            NAME = "My Game"
            DESCRIPTION = "A fun game"

            ARGUMENTS = [
                {'name': '--round-time', 'type': int, 'default': 60,
                 'help': 'Round length in seconds'},
            ]

            def _get_internal_state(self) -> GameState:
                return GameState.PLAYING

            # ... implement other abstract methods
    """

    # =========================================================================
    # Game Metadata (override in subclasses)
    # =========================================================================

    NAME: str = "Unnamed Game"
    DESCRIPTION: str = "No description"
    VERSION: str = "1.0.0"
    AUTHOR: str = "Unknown"

    # CLI argument definitions for argparse
    # Each entry is a dict with keys: name, type, default, help, choices (optional), action (optional)
    ARGUMENTS: List[Dict[str, Any]] = []

    # Always available to every game; game-specific entries win on name clash
    _BASE_ARGUMENTS: List[Dict[str, Any]] = [
        {
            'name': '--log-level',
            'type': str,
            'default': None,
            'choices': ['TRACE', 'DEBUG', 'INFO', 'WARNING', 'ERROR', 'OFF'],
            'help': 'Default log level for all modules'
        },
    ]

    @classmethod
    def get_arguments(cls) -> List[Dict[str, Any]]:
        """Get all CLI arguments for this game (game-specific + base).

        Returns list of argument definitions suitable for argparse.
        Game-specific arguments come first, then base arguments.
        Duplicates by name are removed (game-specific takes precedence).
        """
        seen_names = set()
        result = []

        for arg in cls.ARGUMENTS + cls._BASE_ARGUMENTS:
            name = arg.get('name', '')
            if name and name not in seen_names:
                seen_names.add(name)
                result.append(arg)

        return result

    @classmethod
    def get_info(cls) -> Dict[str, Any]:
        """Get game metadata as a dictionary.

        Returns:
            Dict with keys: name, description, version, author, arguments
        """
        return {
            'name': cls.NAME,
            'description': cls.DESCRIPTION,
            'version': cls.VERSION,
            'author': cls.AUTHOR,
            'arguments': cls.get_arguments(),
        }

    # =========================================================================
    # Instance Interface
    # =========================================================================

    def __init__(self, **kwargs):
        """Initialize base game.

        Args:
            **kwargs: Unused launcher options (ignored so CLI dicts can be splatted)
        """
        if kwargs:
            log.debug(f"{self.NAME}: ignoring options {sorted(kwargs)}")

    @property
    def state(self) -> GameState:
        """Current game state (standard interface).

        Games should not override this - override _get_internal_state instead.
        """
        return self._get_internal_state()

    @abstractmethod
    def _get_internal_state(self) -> GameState:
        """Map internal game state to standard GameState.

        Returns:
            GameState.PLAYING, GameState.GAME_OVER, GameState.WON, etc.
        """
        pass

    @abstractmethod
    def get_score(self) -> int:
        """Get current score.

        Returns:
            Integer score value
        """
        pass

    @abstractmethod
    def handle_input(self, events: List) -> None:
        """Process input events.

        Args:
            events: List of InputEvent objects
        """
        pass

    @abstractmethod
    def update(self, dt: float) -> None:
        """Update game logic.

        Args:
            dt: Delta time in seconds since last frame
        """
        pass

    @abstractmethod
    def render(self, screen: pygame.Surface) -> None:
        """Render the game.

        Args:
            screen: Pygame surface to draw on
        """
        pass

    # =========================================================================
    # Optional Methods
    # =========================================================================

    def reset(self) -> None:
        """Reset game to initial state.

        Override this to implement game-specific reset logic.
        """
        pass

    def get_available_actions(self) -> List[Dict[str, Any]]:
        """Get list of actions currently available to the player.

        Each action has:
        - id: Unique identifier (e.g., 'restart')
        - label: Display text (e.g., 'Restart')
        - style: Optional style hint ('primary', 'secondary', 'danger')

        Base implementation returns empty list.
        """
        return []

    def execute_action(self, action_id: str) -> bool:
        """Execute a game action by ID.

        Args:
            action_id: The action identifier (e.g., 'restart')

        Returns:
            True if action was handled, False otherwise
        """
        return False
