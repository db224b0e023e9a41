"""Tests for InterceptMode (input, actions, state mapping, round records)."""

import pygame
import pytest

from arcadekit.games import GameState
from arcadekit.games.input import InputEvent
from arcadekit.logging import LogSink, close_all_sinks, register_sink
from games.Intercept.config import SimulationConfig
from games.Intercept.game import ObjectKind, Phase
from games.Intercept.game_mode import InterceptMode
from models import Point2D


def click(x, y, t=0.0):
    return InputEvent(position=Point2D(x=x, y=y), timestamp=t)


class RecordingSink(LogSink):
    """Keeps emitted records in memory."""

    def __init__(self):
        self.records = []

    def emit(self, module, record):
        self.records.append((module, record))

    def flush(self):
        pass

    def close(self):
        pass


@pytest.fixture
def game(config):
    return InterceptMode(config=config)


@pytest.fixture
def rounds_sink():
    sink = RecordingSink()
    register_sink('rounds', sink)
    yield sink
    close_all_sinks()


class TestMetadata:
    """Test class-level game info."""

    def test_info(self):
        info = InterceptMode.get_info()
        assert info['name'] == "Intercept"
        names = [arg['name'] for arg in info['arguments']]
        assert names == ['--skin', '--lives', '--round-time', '--log-level']

    def test_overrides(self, config):
        game = InterceptMode(config=config, lives=3, round_time=30.0)
        assert game.engine.config.max_lives == 3
        assert game.engine.config.round_time == 30.0
        assert game.engine.state.player.lives == 3

    def test_invalid_override(self, config):
        with pytest.raises(ValueError):
            InterceptMode(config=config, lives=0)

    def test_unknown_kwargs_ignored(self, config):
        game = InterceptMode(config=config, palette='full')
        assert game.state is GameState.PAUSED


class TestPalette:
    """Test selecting the placement mode from the bottom panel."""

    @pytest.mark.parametrize("x,kind", [
        (80, ObjectKind.OBSTACLE),
        (240, ObjectKind.COLLECTIBLE),
        (400, ObjectKind.SPEED_POWERUP),
        (560, ObjectKind.SHIELD_POWERUP),
    ])
    def test_pick(self, game, x, kind):
        game.handle_input([click(x, 60)])
        assert game.place_mode is kind

    def test_pick_within_radius(self, game):
        game.handle_input([click(80 + 30, 60)])
        assert game.place_mode is ObjectKind.OBSTACLE

    def test_empty_panel_clears(self, game):
        game.handle_input([click(80, 60)])
        game.handle_input([click(800, 60)])
        assert game.place_mode is None

    def test_pick_during_play(self, game):
        game.execute_action('restart')
        game.handle_input([click(240, 60)])
        assert game.place_mode is ObjectKind.COLLECTIBLE


class TestPlacementClicks:
    """Test placing objects by clicking the arena."""

    def test_place_selected_kind(self, game):
        game.handle_input([click(80, 60), click(500, 400)])
        obstacles = game.engine.state.obstacles
        assert len(obstacles) == 1
        assert obstacles[0].position.as_tuple == (500.0, 400.0)

    def test_no_mode_no_placement(self, game):
        game.handle_input([click(500, 400)])
        assert list(game.engine.state.placed_objects()) == []

    def test_no_placement_during_play(self, game):
        game.handle_input([click(80, 60)])
        game.execute_action('restart')
        game.handle_input([click(500, 400)])
        assert game.engine.state.obstacles == []

    def test_crowded_click_rejected(self, game):
        game.handle_input([click(240, 60), click(500, 400), click(505, 400)])
        assert len(game.engine.state.collectibles) == 1


class TestKeys:
    """Test keyboard bindings."""

    def test_wasd_and_arrows(self, game):
        game.handle_key(pygame.K_w, True)
        game.handle_key(pygame.K_LEFT, True)
        keys = game.key_state
        assert keys.up and keys.left
        assert not keys.down and not keys.right

    def test_bindings_combine(self, game):
        game.handle_key(pygame.K_d, True)
        game.handle_key(pygame.K_RIGHT, True)
        game.handle_key(pygame.K_d, False)
        assert game.key_state.right
        game.handle_key(pygame.K_RIGHT, False)
        assert game.key_state.is_idle

    def test_r_starts_round(self, game):
        game.handle_key(pygame.K_r, True)
        assert game.phase is Phase.PLAY

    def test_r_release_ignored(self, game):
        game.handle_key(pygame.K_r, False)
        assert game.phase is Phase.EDIT

    def test_held_keys_move_ship(self, game):
        game.execute_action('restart')
        game.handle_key(pygame.K_UP, True)
        game.update(0.5)
        assert game.engine.state.player.y == 280.0


class TestStateMapping:
    """Test mapping phases onto the framework GameState."""

    def test_edit_is_paused(self, game):
        assert game.state is GameState.PAUSED

    def test_play_is_playing(self, game):
        game.execute_action('restart')
        assert game.state is GameState.PLAYING

    def test_win_is_won(self, game):
        game.execute_action('restart')
        state = game.engine.state
        state.player.position = state.target.position
        game.update(0.0)
        assert game.state is GameState.WON

    def test_lose_is_game_over(self, game):
        game.execute_action('restart')
        game.update(100.0)
        assert game.state is GameState.GAME_OVER


class TestActions:
    """Test restart/reset actions."""

    def test_label_in_edit(self, game):
        assert game.get_available_actions() == [
            {'id': 'restart', 'label': 'Start Round', 'style': 'primary'},
        ]

    def test_label_after_start(self, game):
        game.execute_action('restart')
        assert game.get_available_actions()[0]['label'] == 'Restart'

    def test_unknown_action(self, game):
        assert not game.execute_action('fly')

    def test_score(self, game):
        game.execute_action('restart')
        game.engine.state.player.score = 15
        assert game.get_score() == 15

    def test_reset_clears_everything(self, game):
        game.handle_input([click(80, 60), click(500, 400)])
        game.execute_action('restart')
        game.handle_key(pygame.K_w, True)

        game.reset()

        assert game.phase is Phase.EDIT
        assert game.place_mode is None
        assert game.key_state.is_idle
        assert list(game.engine.state.placed_objects()) == []


class TestRoundRecords:
    """Test the structured record emitted when a round ends."""

    def test_win_record(self, game, rounds_sink):
        game.execute_action('restart')
        game.engine.state.player.score = 10
        state = game.engine.state
        state.player.position = state.target.position
        game.update(0.0)

        assert len(rounds_sink.records) == 1
        module, record = rounds_sink.records[0]
        assert module == 'rounds'
        assert record['outcome'] == 'win'
        assert record['score'] == 10
        assert record['lives'] == 5

    def test_lose_record_once(self, game, rounds_sink):
        game.execute_action('restart')
        game.update(100.0)
        game.update(0.5)
        game.update(0.5)

        assert len(rounds_sink.records) == 1
        assert rounds_sink.records[0][1]['outcome'] == 'lose'
        assert rounds_sink.records[0][1]['time_left'] == 0.0

    def test_each_round_recorded(self, game, rounds_sink):
        for _ in range(2):
            game.execute_action('restart')
            game.update(100.0)
        assert len(rounds_sink.records) == 2

    def test_no_sink_is_fine(self, game):
        game.execute_action('restart')
        game.update(100.0)
        assert game.phase is Phase.LOSE


class TestRender:
    """Test drawing through the game mode."""

    @pytest.fixture(autouse=True)
    def pygame_init(self):
        pygame.init()
        yield
        pygame.quit()

    def test_render_edit(self, game):
        surface = pygame.Surface((1000, 700))
        game.handle_input([click(80, 60), click(500, 400)])
        game.render(surface)

    def test_render_after_win(self, game):
        surface = pygame.Surface((1000, 700))
        game.execute_action('restart')
        state = game.engine.state
        state.player.position = state.target.position
        game.update(0.0)
        game.render(surface)
