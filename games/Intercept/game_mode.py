"""Intercept - place obstacles and pickups, then fly the ship to the target.

Features:
- Edit phase: pick a kind from the bottom palette, click the arena to place it
- Play phase: WASD / arrow keys fly the ship against a 60 second clock
- Speed and shield power-ups, collectibles for score
- Target sweeps back and forth along a Bezier curve
"""

from dataclasses import replace
from typing import Any, Dict, List, Optional

import pygame

from arcadekit.games import BaseGame, GameState
from arcadekit.games.input import InputEvent, KeyState
from arcadekit.logging import emit_record, get_logger

from .config import SimulationConfig
from .game import ObjectKind, Phase, SimulationEngine
from .game.palette import pick_slot
from .game.skins import GeometricSkin, InterceptSkin

log = get_logger('intercept')

# Directional bindings: WASD and arrows feed the same intent
_KEY_DIRECTIONS: Dict[int, str] = {
    pygame.K_w: 'up',
    pygame.K_UP: 'up',
    pygame.K_s: 'down',
    pygame.K_DOWN: 'down',
    pygame.K_a: 'left',
    pygame.K_LEFT: 'left',
    pygame.K_d: 'right',
    pygame.K_RIGHT: 'right',
}

_PHASE_TO_STATE: Dict[Phase, GameState] = {
    Phase.EDIT: GameState.PAUSED,
    Phase.PLAY: GameState.PLAYING,
    Phase.WIN: GameState.WON,
    Phase.LOSE: GameState.GAME_OVER,
}


class InterceptMode(BaseGame):
    """Intercept game mode.

    Wraps a SimulationEngine with pointer/keyboard input, a skin, and a
    structured `rounds` record emitted whenever a round ends.
    """

    # Game metadata
    NAME = "Intercept"
    DESCRIPTION = "Build an obstacle course, then race the clock to reach a moving target."
    VERSION = "1.0.0"
    AUTHOR = "Intercept Team"

    # CLI arguments
    ARGUMENTS = [
        {
            'name': '--skin',
            'type': str,
            'default': 'geometric',
            'choices': ['geometric'],
            'help': 'Visual skin (geometric=shapes)'
        },
        {
            'name': '--lives',
            'type': int,
            'default': None,
            'help': 'Starting lives (default: INTERCEPT_MAX_LIVES or 5)'
        },
        {
            'name': '--round-time',
            'type': float,
            'default': None,
            'help': 'Round length in seconds (default: INTERCEPT_ROUND_TIME or 60)'
        },
    ]

    SKINS: Dict[str, type] = {
        'geometric': GeometricSkin,
    }

    def __init__(
        self,
        skin: str = 'geometric',
        lives: Optional[int] = None,
        round_time: Optional[float] = None,
        config: Optional[SimulationConfig] = None,
        **kwargs,
    ):
        """Initialize Intercept game.

        Args:
            skin: Visual skin to use
            lives: Starting lives, overriding the config
            round_time: Round length in seconds, overriding the config
            config: Base settings (defaults to SimulationConfig.from_env())
            **kwargs: Base game args
        """
        config = config or SimulationConfig.from_env()
        overrides: Dict[str, Any] = {}
        if lives is not None:
            overrides['max_lives'] = lives
        if round_time is not None:
            overrides['round_time'] = round_time
        if overrides:
            config = replace(config, **overrides)
        self._config = config

        self._engine = SimulationEngine(config)
        self._place_mode: Optional[ObjectKind] = None
        self._held: Dict[int, bool] = {}
        self._last_phase = self._engine.phase

        skin_class = self.SKINS.get(skin, GeometricSkin)
        self._skin: InterceptSkin = skin_class(config)

        super().__init__(**kwargs)

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def engine(self) -> SimulationEngine:
        return self._engine

    @property
    def phase(self) -> Phase:
        return self._engine.phase

    @property
    def place_mode(self) -> Optional[ObjectKind]:
        """Kind the next arena click places, or None."""
        return self._place_mode

    @property
    def key_state(self) -> KeyState:
        """Directional intent from every held binding."""
        held = {direction: False for direction in ('up', 'down', 'left', 'right')}
        for key, pressed in self._held.items():
            if pressed:
                held[_KEY_DIRECTIONS[key]] = True
        return KeyState(**held)

    def _get_internal_state(self) -> GameState:
        return _PHASE_TO_STATE[self._engine.phase]

    def get_score(self) -> int:
        """Get current score."""
        return self._engine.state.player.score

    # =========================================================================
    # Input
    # =========================================================================

    def handle_input(self, events: List[InputEvent]) -> None:
        """Process pointer clicks (world coordinates, y up).

        Clicks inside the bottom panel pick the placement mode in any
        phase. Clicks in the arena place an object of that kind, but only
        during the edit phase.

        Args:
            events: List of input events
        """
        panel_height = self._config.bottom_panel_height
        for event in events:
            point = event.position
            if point.y <= panel_height:
                self._place_mode = pick_slot(point, panel_height)
                log.debug(f"Place mode: {self._place_mode}")
                continue

            if self._engine.phase is not Phase.EDIT or self._place_mode is None:
                continue

            placed = self._engine.place(self._place_mode, point.x, point.y)
            if placed is not None:
                log.debug(f"Placed {placed}")

    def handle_key(self, key: int, pressed: bool) -> None:
        """Track a key press or release.

        Directional bindings update the held-key state; pressing R starts
        (or restarts) the round. Other keys are ignored.

        Args:
            key: pygame key code
            pressed: True on key down, False on key up
        """
        if key in _KEY_DIRECTIONS:
            self._held[key] = pressed
        elif key == pygame.K_r and pressed:
            self.execute_action('restart')

    # =========================================================================
    # Update / Render
    # =========================================================================

    def update(self, dt: float) -> None:
        """Advance the simulation one frame.

        Args:
            dt: Delta time in seconds
        """
        self._engine.tick(dt, self.key_state)

        phase = self._engine.phase
        if phase is not self._last_phase and phase.is_terminal:
            self._record_round(phase)
        self._last_phase = phase

    def _record_round(self, phase: Phase) -> None:
        """Emit the structured end-of-round record."""
        state = self._engine.state
        record = {
            'outcome': phase.value,
            'score': state.player.score,
            'lives': state.player.lives,
            'time_left': round(state.round.time_left, 3),
            'duration': round(state.round.elapsed, 3),
            'obstacles': len(state.obstacles),
            'collectibles_left': len(state.collectibles),
            'powerups_left': len(state.powerups),
        }
        log.info(f"Round over: {phase.value}, score={record['score']}")
        emit_record('rounds', record)

    def render(self, screen: pygame.Surface) -> None:
        """Render the game via the skin.

        Args:
            screen: Pygame surface to draw on
        """
        self._skin.render_frame(
            self._engine.snapshot(),
            screen,
            self._config.max_lives,
            self._place_mode,
        )

    # =========================================================================
    # Actions
    # =========================================================================

    def start_round(self) -> None:
        """Start or restart the round, keeping placed objects."""
        self._engine.start_round()
        self._last_phase = self._engine.phase

    def reset(self) -> None:
        """Back to an empty edit phase: objects cleared, palette deselected."""
        self._engine = SimulationEngine(self._config)
        self._place_mode = None
        self._held.clear()
        self._last_phase = self._engine.phase
        log.info("Game reset")

    def get_available_actions(self) -> List[Dict[str, Any]]:
        """Start from edit, restart from anywhere else."""
        label = "Start Round" if self._engine.phase is Phase.EDIT else "Restart"
        return [{'id': 'restart', 'label': label, 'style': 'primary'}]

    def execute_action(self, action_id: str) -> bool:
        """Run a UI action.

        Args:
            action_id: Action to run

        Returns:
            True if the action was recognized
        """
        if action_id == 'restart':
            self.start_round()
            return True
        return False
