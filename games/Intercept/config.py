"""Configuration for Intercept game.

Contains screen layout, physics and timing constants, object radii,
and color definitions. Numeric settings can be overridden from the
environment or from a .env file next to this module.
"""
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Dict, Tuple

from dotenv import load_dotenv

# Load .env from game directory
_env_path = Path(__file__).parent / '.env'
load_dotenv(_env_path)


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


def _get_float(key: str, default: float) -> float:
    """Get float from environment."""
    return float(os.getenv(key, str(default)))


# Window layout (world coordinates, y up)
SCREEN_WIDTH: int = _get_int('INTERCEPT_SCREEN_WIDTH', 1000)
SCREEN_HEIGHT: int = _get_int('INTERCEPT_SCREEN_HEIGHT', 700)
TOP_PANEL_HEIGHT: int = 90      # HUD band
BOTTOM_PANEL_HEIGHT: int = 120  # Placement palette band
FPS: int = 60

# Round rules
MAX_LIVES: int = _get_int('INTERCEPT_MAX_LIVES', 5)
ROUND_TIME_SEC: float = _get_float('INTERCEPT_ROUND_TIME', 60.0)
HIT_COOLDOWN: float = _get_float('INTERCEPT_HIT_COOLDOWN', 0.5)  # i-frames after damage

# Physics constants
PLAYER_SPEED: float = _get_float('INTERCEPT_PLAYER_SPEED', 240.0)  # pixels/second
SPEED_BOOST: float = _get_float('INTERCEPT_SPEED_BOOST', 420.0)
TARGET_SPEED: float = _get_float('INTERCEPT_TARGET_SPEED', 0.35)   # path parameter/second

# Power-ups
POWERUP_DURATION: float = _get_float('INTERCEPT_POWERUP_DURATION', 4.0)
SHIELD_DURATION: float = _get_float('INTERCEPT_SHIELD_DURATION', 4.0)

# Build phase
PLACE_MIN_DIST: float = _get_float('INTERCEPT_PLACE_MIN_DIST', 26.0)

# Sizes
PLAYER_RADIUS: float = 14.0
TARGET_RADIUS: float = 16.0
OBSTACLE_RADIUS: float = 18.0
COLLECTIBLE_RADIUS: float = 14.0
POWERUP_RADIUS: float = 14.0

COLLECTIBLE_SCORE: int = 5

# Player spawns this far above the arena floor
SPAWN_OFFSET_Y: float = 40.0
# Target path sits this far below the HUD band
TARGET_PATH_OFFSET_Y: float = 60.0

# Visual
BACKGROUND_COLOR: Tuple[int, int, int] = (0, 0, 0)
ARENA_COLOR: Tuple[int, int, int] = (242, 250, 255)
STRIPE_COLOR: Tuple[int, int, int] = (230, 242, 255)
PANEL_COLOR: Tuple[int, int, int] = (38, 38, 51)
HUD_COLOR: Tuple[int, int, int] = (255, 255, 255)

OBJECT_COLORS: Dict[str, Tuple[int, int, int]] = {
    'obstacle': (153, 51, 51),
    'obstacle_mark': (26, 0, 0),
    'collectible': (255, 214, 0),
    'collectible_mark': (51, 51, 0),
    'speed': (51, 255, 102),
    'speed_outline': (0, 77, 26),
    'shield': (179, 179, 255),
    'shield_outline': (51, 51, 153),
    'target': (255, 77, 77),
    'target_mark': (102, 0, 0),
    'heart_full': (255, 0, 0),
    'heart_empty': (89, 38, 38),
}


@dataclass(frozen=True)
class SimulationConfig:
    """Every tunable constant the simulation reads.

    Defaults mirror the module constants; tests build variants with
    `dataclasses.replace` or keyword overrides.
    """

    screen_width: float = 1000.0
    screen_height: float = 700.0
    top_panel_height: float = 90.0
    bottom_panel_height: float = 120.0

    max_lives: int = 5
    round_time: float = 60.0
    hit_cooldown: float = 0.5

    player_speed: float = 240.0
    speed_boost: float = 420.0
    target_speed: float = 0.35

    powerup_duration: float = 4.0
    shield_duration: float = 4.0

    min_separation: float = 26.0

    player_radius: float = 14.0
    target_radius: float = 16.0
    obstacle_radius: float = 18.0
    collectible_radius: float = 14.0
    powerup_radius: float = 14.0

    collectible_score: int = 5
    spawn_offset_y: float = 40.0
    target_path_offset_y: float = 60.0

    def __post_init__(self):
        """Reject settings the simulation cannot run with."""
        if self.max_lives < 1:
            raise ValueError(f'max_lives must be at least 1, got {self.max_lives}')
        if self.collectible_score < 0:
            raise ValueError(f'collectible_score must be non-negative, got {self.collectible_score}')
        if self.min_separation < 0:
            raise ValueError(f'min_separation must be non-negative, got {self.min_separation}')

        positive = (
            'screen_width', 'screen_height', 'round_time', 'player_speed',
            'speed_boost', 'target_speed', 'powerup_duration', 'shield_duration',
            'player_radius', 'target_radius', 'obstacle_radius',
            'collectible_radius', 'powerup_radius',
        )
        for name in positive:
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(f'{name} must be positive, got {value}')

        if self.hit_cooldown < 0:
            raise ValueError(f'hit_cooldown must be non-negative, got {self.hit_cooldown}')
        if self.top_panel_height + self.bottom_panel_height >= self.screen_height:
            raise ValueError('Panels leave no room for the arena')

    @property
    def arena_y_min(self) -> float:
        """Arena floor (top edge of the palette panel)."""
        return self.bottom_panel_height

    @property
    def arena_y_max(self) -> float:
        """Arena ceiling (bottom edge of the HUD panel)."""
        return self.screen_height - self.top_panel_height

    @classmethod
    def from_env(cls) -> 'SimulationConfig':
        """Build config from the module-level (env-overridable) constants."""
        return cls(
            screen_width=float(SCREEN_WIDTH),
            screen_height=float(SCREEN_HEIGHT),
            top_panel_height=float(TOP_PANEL_HEIGHT),
            bottom_panel_height=float(BOTTOM_PANEL_HEIGHT),
            max_lives=MAX_LIVES,
            round_time=ROUND_TIME_SEC,
            hit_cooldown=HIT_COOLDOWN,
            player_speed=PLAYER_SPEED,
            speed_boost=SPEED_BOOST,
            target_speed=TARGET_SPEED,
            powerup_duration=POWERUP_DURATION,
            shield_duration=SHIELD_DURATION,
            min_separation=PLACE_MIN_DIST,
            player_radius=PLAYER_RADIUS,
            target_radius=TARGET_RADIUS,
            obstacle_radius=OBSTACLE_RADIUS,
            collectible_radius=COLLECTIBLE_RADIUS,
            powerup_radius=POWERUP_RADIUS,
            collectible_score=COLLECTIBLE_SCORE,
            spawn_offset_y=SPAWN_OFFSET_Y,
            target_path_offset_y=TARGET_PATH_OFFSET_Y,
        )

    def as_dict(self) -> Dict[str, float]:
        """Plain dict of every setting (for logging)."""
        return {f.name: getattr(self, f.name) for f in fields(self)}
