"""Tests for pickups and timed effects."""

import pytest

from arcadekit.games.input import KeyState
from games.Intercept.game import ObjectKind, PlaceableObject, Player
from games.Intercept.game.powerups import (
    PICKUP_EFFECTS,
    apply_pickup,
    collect_pickups,
    expire_effects,
)
from models import Point2D


def drop(state, kind, x=None, y=None):
    """Put an object straight into state, bypassing placement rules."""
    player = state.player
    obj = PlaceableObject(
        position=Point2D(x=player.x if x is None else x, y=player.y if y is None else y),
        radius=14.0,
        kind=kind,
    )
    state.collection_for(kind).append(obj)
    return obj


@pytest.fixture
def player():
    return Player(position=Point2D(x=500, y=160), radius=14.0, lives=5)


class TestApplyPickup:
    """Test individual pickup effects."""

    def test_every_consumable_kind_has_an_effect(self):
        assert set(PICKUP_EFFECTS) == {
            ObjectKind.COLLECTIBLE,
            ObjectKind.SPEED_POWERUP,
            ObjectKind.SHIELD_POWERUP,
        }

    def test_collectible_scores(self, player, config):
        apply_pickup(player, ObjectKind.COLLECTIBLE, config, now=1.0)
        assert player.score == 5

    def test_speed_sets_expiry(self, player, config):
        apply_pickup(player, ObjectKind.SPEED_POWERUP, config, now=2.0)
        assert player.speed_boost_expires_at == 6.0
        assert player.is_boosted(5.99)
        assert not player.is_boosted(6.0)

    def test_shield_sets_flag_and_expiry(self, player, config):
        apply_pickup(player, ObjectKind.SHIELD_POWERUP, config, now=10.0)
        assert player.shielded
        assert player.shield_expires_at == 14.0

    def test_repickup_restarts_window(self, player, config):
        """A second pickup resets the expiry instead of stacking."""
        apply_pickup(player, ObjectKind.SHIELD_POWERUP, config, now=0.0)
        apply_pickup(player, ObjectKind.SHIELD_POWERUP, config, now=3.0)
        assert player.shield_expires_at == 7.0

    def test_obstacle_not_consumable(self, player, config):
        with pytest.raises(KeyError):
            apply_pickup(player, ObjectKind.OBSTACLE, config, now=0.0)


class TestExpireEffects:
    """Test shield expiry."""

    def test_active_before_expiry(self, player, config):
        apply_pickup(player, ObjectKind.SHIELD_POWERUP, config, now=10.0)
        assert not expire_effects(player, 13.99)
        assert player.shielded

    def test_expires_at_deadline(self, player, config):
        apply_pickup(player, ObjectKind.SHIELD_POWERUP, config, now=10.0)
        assert expire_effects(player, 14.0)
        assert not player.shielded

    def test_noop_when_unshielded(self, player):
        assert not expire_effects(player, 100.0)


class TestCollectPickups:
    """Test consuming overlapping objects during play."""

    def test_collectible_once(self, engine):
        engine.place(ObjectKind.COLLECTIBLE, 500, 400)
        engine.start_round()
        engine.state.player.position = Point2D(x=500, y=400)

        engine.tick(0.1)
        assert engine.state.player.score == 5
        assert engine.state.collectibles == []

        engine.tick(0.1)
        assert engine.state.player.score == 5

    def test_fly_into_collectible(self, engine):
        engine.place(ObjectKind.COLLECTIBLE, 500, 300)
        engine.start_round()
        for _ in range(10):
            engine.tick(0.1, KeyState(up=True))
        assert engine.state.player.score == 5

    def test_all_overlaps_in_one_tick(self, playing):
        state = playing.state
        drop(state, ObjectKind.COLLECTIBLE)
        drop(state, ObjectKind.COLLECTIBLE, x=510)
        drop(state, ObjectKind.SPEED_POWERUP, x=490)

        consumed = collect_pickups(state)

        assert state.player.score == 10
        assert state.player.is_boosted(state.now)
        assert state.collectibles == []
        assert state.powerups == []
        # Collectibles resolve before power-ups
        assert [obj.kind for obj in consumed] == [
            ObjectKind.COLLECTIBLE, ObjectKind.COLLECTIBLE, ObjectKind.SPEED_POWERUP,
        ]

    def test_untouched_objects_stay(self, playing):
        state = playing.state
        far = drop(state, ObjectKind.COLLECTIBLE, x=900, y=300)
        collect_pickups(state)
        assert state.collectibles == [far]
        assert state.player.score == 0

    def test_shield_window_in_simulation(self, playing):
        """Shield picked up at t=10 holds through [10, 14) and drops at 14."""
        state = playing.state
        for _ in range(19):
            playing.tick(0.5)
        drop(state, ObjectKind.SHIELD_POWERUP)

        playing.tick(0.5)
        assert state.now == 10.0
        assert state.player.shielded
        assert state.player.shield_expires_at == 14.0

        for _ in range(7):
            playing.tick(0.5)
            assert state.player.shielded
        assert state.now == 13.5

        playing.tick(0.5)
        assert state.now == 14.0
        assert not state.player.shielded

    def test_obstacles_untouched(self, engine):
        engine.place(ObjectKind.OBSTACLE, 500, 400)
        engine.start_round()
        engine.state.player.position = Point2D(x=500, y=400)
        collect_pickups(engine.state)
        assert len(engine.state.obstacles) == 1
