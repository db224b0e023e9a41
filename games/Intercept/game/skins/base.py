"""Base class for Intercept game skins.

Skins handle ALL rendering - the game only manages state. Skins receive
world coordinates (y up) and convert to screen space themselves.
"""

from abc import ABC, abstractmethod
from typing import Optional, Tuple, TYPE_CHECKING

import pygame

if TYPE_CHECKING:
    from ...config import SimulationConfig
    from ..entities import ObjectKind, PlaceableObject
    from ..snapshot import FrameSnapshot, PlayerSnapshot, TargetSnapshot


class InterceptSkin(ABC):
    """Base class for game skins.

    The game calls `render_frame` once per frame with a snapshot; the
    default implementation draws layers in order using the abstract
    per-entity hooks.
    """

    NAME: str = "base"
    DESCRIPTION: str = "Base skin"

    def __init__(self, config: 'SimulationConfig'):
        """Initialize skin.

        Args:
            config: Layout source (screen size, panel heights)
        """
        self._config = config
        self._screen_height = config.screen_height

    def to_screen(self, x: float, y: float) -> Tuple[int, int]:
        """Convert world coordinates to pygame screen coordinates."""
        return int(round(x)), int(round(self._screen_height - y))

    def render_frame(
        self,
        frame: 'FrameSnapshot',
        screen: pygame.Surface,
        max_lives: int,
        place_mode: Optional['ObjectKind'] = None,
    ) -> None:
        """Draw one complete frame.

        Args:
            frame: Snapshot to draw
            screen: Pygame surface to draw on
            max_lives: Number of heart slots on the HUD
            place_mode: Currently selected palette kind
        """
        self.render_background(screen, frame.sim_time)

        for obj in frame.obstacles:
            self.render_obstacle(obj, screen)
        for obj in frame.collectibles:
            self.render_collectible(obj, screen, frame.sim_time)
        for obj in frame.powerups:
            self.render_powerup(obj, screen, frame.sim_time)

        self.render_target(frame.target, screen)
        self.render_player(frame.player, screen, frame.sim_time)

        self.render_hud(screen, frame, max_lives, place_mode)

        if frame.phase.is_terminal:
            self.render_round_over(screen, frame)

    @abstractmethod
    def render_background(self, screen: pygame.Surface, sim_time: float) -> None:
        """Render arena and panel backgrounds."""
        pass

    @abstractmethod
    def render_obstacle(self, obj: 'PlaceableObject', screen: pygame.Surface) -> None:
        """Render an obstacle."""
        pass

    @abstractmethod
    def render_collectible(
        self,
        obj: 'PlaceableObject',
        screen: pygame.Surface,
        sim_time: float,
    ) -> None:
        """Render a collectible."""
        pass

    @abstractmethod
    def render_powerup(
        self,
        obj: 'PlaceableObject',
        screen: pygame.Surface,
        sim_time: float,
    ) -> None:
        """Render a speed or shield power-up."""
        pass

    @abstractmethod
    def render_target(self, target: 'TargetSnapshot', screen: pygame.Surface) -> None:
        """Render the moving target."""
        pass

    @abstractmethod
    def render_player(
        self,
        player: 'PlayerSnapshot',
        screen: pygame.Surface,
        sim_time: float,
    ) -> None:
        """Render the player ship."""
        pass

    @abstractmethod
    def render_hud(
        self,
        screen: pygame.Surface,
        frame: 'FrameSnapshot',
        max_lives: int,
        place_mode: Optional['ObjectKind'],
    ) -> None:
        """Render lives, score, countdown and the placement palette."""
        pass

    @abstractmethod
    def render_round_over(self, screen: pygame.Surface, frame: 'FrameSnapshot') -> None:
        """Render the win/lose overlay."""
        pass
