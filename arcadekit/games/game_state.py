"""Common GameState enum for all arcadekit games.

All games must use this standard GameState enum so launchers and
tooling can treat them uniformly.

Games can have additional internal states, but must map them to these
standard states via the `state` property.
"""
from enum import Enum


class GameState(Enum):
    """Standard game states used by arcadekit.

    All games must report one of these states via their `state` property.
    Games may have additional internal states (phases), but the external
    interface must use these values.

    States:
        PLAYING: Active gameplay in progress
        PAUSED: Game not running (setup, build phase, manual pause)
        GAME_OVER: Game ended in loss/failure
        WON: Game ended in success/victory

    For games with internal states:
        class MyGameMode(BaseGame):
            def _get_internal_state(self) -> GameState:
                if self._phase == "building":
                    return GameState.PAUSED
                elif self._phase == "lost":
                    return GameState.GAME_OVER
                ...
    """
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"
    WON = "won"
