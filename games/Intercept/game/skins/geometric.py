"""Geometric skin - flat shapes drawn with pygame.draw."""

import math
from typing import List, Optional, Sequence, Tuple, TYPE_CHECKING

import pygame

from .base import InterceptSkin
from ..entities import ObjectKind
from ..state import Phase
from ..palette import PALETTE_SLOTS, label_for, slot_center
from ...config import (
    ARENA_COLOR, BACKGROUND_COLOR, HUD_COLOR, OBJECT_COLORS, PANEL_COLOR,
    STRIPE_COLOR,
)

if TYPE_CHECKING:
    from ..entities import PlaceableObject
    from ..snapshot import FrameSnapshot, PlayerSnapshot, TargetSnapshot

Color = Tuple[int, int, int]


class GeometricSkin(InterceptSkin):
    """Renders the game using simple geometric shapes.

    - Obstacle: dark red square with an X
    - Collectible: gold triangle with a stem, bobbing
    - Speed power-up: green diamond, bobbing
    - Shield power-up: lavender star with a ring, bobbing
    - Target: red disc with crosshair
    - Player: hull polygon, fins, cockpit, flickering exhaust, shield ring
    """

    NAME = "geometric"
    DESCRIPTION = "Flat shapes"

    STRIPE_SPACING = 40
    STRIPE_WIDTH = 8
    STRIPE_DRIFT = 12.0  # pixels/second
    BOB_RATE = 2.2
    BOB_AMPLITUDE = 4.0

    def __init__(self, config):
        super().__init__(config)
        self._font: Optional[pygame.font.Font] = None
        self._big_font: Optional[pygame.font.Font] = None

    def _ensure_font(self) -> None:
        """Ensure fonts are initialized."""
        if self._font is None:
            pygame.font.init()
            self._font = pygame.font.Font(None, 24)
            self._big_font = pygame.font.Font(None, 48)

    def _bob(self, sim_time: float, scale: float) -> float:
        return math.sin(sim_time * self.BOB_RATE) * self.BOB_AMPLITUDE * scale

    def _polygon(self, screen: pygame.Surface, color: Color,
                 points: Sequence[Tuple[float, float]], width: int = 0) -> None:
        pygame.draw.polygon(screen, color, [self.to_screen(x, y) for x, y in points], width)

    def _text(self, screen: pygame.Surface, text: str, x: float, y: float,
              color: Color = HUD_COLOR, big: bool = False) -> None:
        """Draw text with its left baseline near world point (x, y)."""
        self._ensure_font()
        font = self._big_font if big else self._font
        surface = font.render(text, True, color)
        screen.blit(surface, surface.get_rect(bottomleft=self.to_screen(x, y)))

    # =========================================================================
    # Background and panels
    # =========================================================================

    def render_background(self, screen: pygame.Surface, sim_time: float) -> None:
        """Arena with drifting stripes, dark HUD and palette bands."""
        config = self._config
        screen.fill(BACKGROUND_COLOR)

        arena_top_left = self.to_screen(0, config.arena_y_max)
        arena_height = int(config.arena_y_max - config.arena_y_min)
        pygame.draw.rect(screen, ARENA_COLOR,
                         (0, arena_top_left[1], int(config.screen_width), arena_height))

        shift = (sim_time * self.STRIPE_DRIFT) % self.STRIPE_SPACING
        first = -5
        last = int(config.screen_width) // self.STRIPE_SPACING + 5
        for i in range(first, last):
            x = int(i * self.STRIPE_SPACING + shift)
            pygame.draw.rect(screen, STRIPE_COLOR,
                             (x, arena_top_left[1], self.STRIPE_WIDTH, arena_height))

        pygame.draw.rect(screen, PANEL_COLOR,
                         (0, 0, int(config.screen_width), int(config.top_panel_height)))
        pygame.draw.rect(screen, PANEL_COLOR,
                         (0, int(config.screen_height - config.bottom_panel_height),
                          int(config.screen_width), int(config.bottom_panel_height)))

    # =========================================================================
    # Placed objects
    # =========================================================================

    def _draw_obstacle(self, screen: pygame.Surface, x: float, y: float, r: float) -> None:
        left, top = self.to_screen(x - r, y + r)
        size = int(2 * r)
        pygame.draw.rect(screen, OBJECT_COLORS['obstacle'], (left, top, size, size))
        mark = OBJECT_COLORS['obstacle_mark']
        pygame.draw.line(screen, mark, self.to_screen(x - r, y - r), self.to_screen(x + r, y + r))
        pygame.draw.line(screen, mark, self.to_screen(x + r, y - r), self.to_screen(x - r, y + r))

    def _draw_collectible(self, screen: pygame.Surface, x: float, y: float, r: float) -> None:
        self._polygon(screen, OBJECT_COLORS['collectible'], [
            (x, y + r),
            (x - r * 0.8, y - r * 0.6),
            (x + r * 0.8, y - r * 0.6),
        ])
        mark = OBJECT_COLORS['collectible_mark']
        pygame.draw.line(screen, mark, self.to_screen(x, y + r * 0.2), self.to_screen(x, y - r * 0.8))
        pygame.draw.circle(screen, mark, self.to_screen(x, y), 2)

    def _draw_speed(self, screen: pygame.Surface, x: float, y: float, r: float) -> None:
        diamond = [(x, y + r), (x + r, y), (x, y - r), (x - r, y)]
        self._polygon(screen, OBJECT_COLORS['speed'], diamond)
        self._polygon(screen, OBJECT_COLORS['speed_outline'], diamond, 1)

    def _draw_shield(self, screen: pygame.Surface, x: float, y: float, r: float) -> None:
        color = OBJECT_COLORS['shield']
        self._polygon(screen, color, [
            (x, y + r), (x + r * 0.9, y - r * 0.2), (x - r * 0.9, y - r * 0.2)])
        self._polygon(screen, color, [
            (x, y - r), (x + r * 0.9, y + r * 0.2), (x - r * 0.9, y + r * 0.2)])
        pygame.draw.circle(screen, OBJECT_COLORS['shield_outline'],
                           self.to_screen(x, y), int(r + 3), 1)

    def _draw_kind(self, screen: pygame.Surface, kind: ObjectKind,
                   x: float, y: float, r: float) -> None:
        drawers = {
            ObjectKind.OBSTACLE: self._draw_obstacle,
            ObjectKind.COLLECTIBLE: self._draw_collectible,
            ObjectKind.SPEED_POWERUP: self._draw_speed,
            ObjectKind.SHIELD_POWERUP: self._draw_shield,
        }
        drawers[kind](screen, x, y, r)

    def render_obstacle(self, obj: 'PlaceableObject', screen: pygame.Surface) -> None:
        self._draw_obstacle(screen, obj.x, obj.y, obj.radius)

    def render_collectible(self, obj: 'PlaceableObject', screen: pygame.Surface,
                           sim_time: float) -> None:
        self._draw_collectible(screen, obj.x, obj.y + self._bob(sim_time, 0.25), obj.radius)

    def render_powerup(self, obj: 'PlaceableObject', screen: pygame.Surface,
                       sim_time: float) -> None:
        self._draw_kind(screen, obj.kind, obj.x, obj.y + self._bob(sim_time, 0.35), obj.radius)

    # =========================================================================
    # Target and player
    # =========================================================================

    def render_target(self, target: 'TargetSnapshot', screen: pygame.Surface) -> None:
        x, y, r = target.position.x, target.position.y, target.radius
        pygame.draw.circle(screen, OBJECT_COLORS['target'], self.to_screen(x, y), int(r))
        mark = OBJECT_COLORS['target_mark']
        pygame.draw.line(screen, mark, self.to_screen(x - r, y), self.to_screen(x + r, y))
        pygame.draw.line(screen, mark, self.to_screen(x, y - r), self.to_screen(x, y + r))

    def _ship_points(self, player: 'PlayerSnapshot',
                     local: Sequence[Tuple[float, float]]) -> List[Tuple[float, float]]:
        """Rotate ship-local points by the facing angle and move to the ship."""
        angle = math.radians(player.facing_angle)
        c, s = math.cos(angle), math.sin(angle)
        px, py = player.position.x, player.position.y
        return [(px + lx * c - ly * s, py + lx * s + ly * c) for lx, ly in local]

    def render_player(self, player: 'PlayerSnapshot', screen: pygame.Surface,
                      sim_time: float) -> None:
        """Ship pointing along +x in local space, rotated to its heading."""
        length = player.radius * 2.2
        half = player.radius * 1.2

        hull = [
            (length * 0.55, 0), (length * 0.10, half * 0.95), (-length * 0.25, half * 0.70),
            (-length * 0.55, 0), (-length * 0.25, -half * 0.70), (length * 0.10, -half * 0.95),
        ]
        fins = [
            [(-length * 0.18, half * 0.65), (-length * 0.60, half * 1.15), (-length * 0.35, half * 0.40)],
            [(-length * 0.18, -half * 0.65), (-length * 0.60, -half * 1.15), (-length * 0.35, -half * 0.40)],
        ]
        flame = 6.0 + 4.0 * (0.5 + 0.5 * math.sin(sim_time * 18.0))
        exhaust = [(-length * 0.55, 4.0), (-length * 0.55, -4.0), (-length * 0.55 - flame, 0.0)]

        self._polygon(screen, (26, 102, 204), self._ship_points(player, hull))
        for fin in fins:
            self._polygon(screen, (217, 51, 51), self._ship_points(player, fin))
        cockpit = self._ship_points(player, [(length * 0.18, 0)])[0]
        pygame.draw.circle(screen, (255, 255, 255), self.to_screen(*cockpit), int(player.radius * 0.45))
        self._polygon(screen, (13, 20, 38), self._ship_points(player, hull), 1)
        self._polygon(screen, (255, 166, 51), self._ship_points(player, exhaust))

        if player.shielded:
            pygame.draw.circle(screen, (204, 204, 255),
                               self.to_screen(player.position.x, player.position.y),
                               int(player.radius + 7), 2)

    # =========================================================================
    # HUD
    # =========================================================================

    def _draw_heart(self, screen: pygame.Surface, color: Color,
                    cx: float, cy: float, size: float) -> None:
        pygame.draw.circle(screen, color, self.to_screen(cx - 0.3 * size, cy), int(0.35 * size))
        pygame.draw.circle(screen, color, self.to_screen(cx + 0.3 * size, cy), int(0.35 * size))
        self._polygon(screen, color, [
            (cx - 0.75 * size, cy), (cx + 0.75 * size, cy), (cx, cy - 0.9 * size)])

    def render_hud(self, screen: pygame.Surface, frame: 'FrameSnapshot',
                   max_lives: int, place_mode: Optional[ObjectKind]) -> None:
        config = self._config
        width = config.screen_width
        height = config.screen_height

        for i in range(max_lives):
            key = 'heart_full' if i < frame.player.lives else 'heart_empty'
            self._draw_heart(screen, OBJECT_COLORS[key], 20.0 + i * 30.0, height - 45.0, 12.0)

        self._text(screen, f"Score: {frame.player.score}", width / 2 - 40, height - 30)
        self._text(screen, f"Time: {frame.seconds_left}", width - 130, height - 30)

        panel = config.bottom_panel_height
        for slot in PALETTE_SLOTS:
            center = slot_center(slot, panel)
            radius = config.obstacle_radius if slot.kind is ObjectKind.OBSTACLE else 16.0
            self._draw_kind(screen, slot.kind, center.x, center.y, radius)
            self._text(screen, slot.label, slot.x - 30, 10)

        self._text(screen, label_for(place_mode), width - 220, 10)
        self._text(screen, "Press R to start", width - 160, 32)

    def render_round_over(self, screen: pygame.Surface, frame: 'FrameSnapshot') -> None:
        """Black out the arena and show the result."""
        config = self._config
        top_left = self.to_screen(0, config.arena_y_max)
        pygame.draw.rect(screen, (0, 0, 0),
                         (0, top_left[1], int(config.screen_width),
                          int(config.arena_y_max - config.arena_y_min)))

        mid_y = (config.arena_y_min + config.arena_y_max) / 2
        won = frame.phase is Phase.WIN
        title = "YOU WIN!" if won else "YOU LOSE"
        color = (0, 255, 0) if won else (255, 0, 0)
        self._text(screen, title, config.screen_width / 2 - 80, mid_y + 10, color, big=True)
        self._text(screen, f"Final Score: {frame.player.score}",
                   config.screen_width / 2 - 60, mid_y - 30, color)
