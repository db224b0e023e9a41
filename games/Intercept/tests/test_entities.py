"""Tests for player and placed-object entities."""

import pytest
from pydantic import ValidationError

from games.Intercept.game.entities import ObjectKind, PlaceableObject, Player
from models import Point2D


@pytest.fixture
def player():
    return Player(position=Point2D(x=500, y=160), radius=14.0, lives=5)


class TestObjectKind:
    """Test ObjectKind enum."""

    def test_powerup_kinds(self):
        assert ObjectKind.SPEED_POWERUP.is_powerup
        assert ObjectKind.SHIELD_POWERUP.is_powerup

    def test_non_powerup_kinds(self):
        assert not ObjectKind.OBSTACLE.is_powerup
        assert not ObjectKind.COLLECTIBLE.is_powerup


class TestPlaceableObject:
    """Test PlaceableObject model."""

    def test_valid(self):
        obj = PlaceableObject(position=Point2D(x=1, y=2), radius=18, kind=ObjectKind.OBSTACLE)
        assert obj.x == 1.0
        assert obj.y == 2.0
        assert obj.radius == 18.0

    @pytest.mark.parametrize("radius", [0, -5])
    def test_radius_must_be_positive(self, radius):
        with pytest.raises(ValidationError):
            PlaceableObject(position=Point2D(x=0, y=0), radius=radius, kind=ObjectKind.OBSTACLE)

    def test_frozen(self):
        obj = PlaceableObject(position=Point2D(x=0, y=0), radius=14, kind=ObjectKind.COLLECTIBLE)
        with pytest.raises(ValidationError):
            obj.radius = 20

    def test_str(self):
        obj = PlaceableObject(position=Point2D(x=10, y=20), radius=14, kind=ObjectKind.COLLECTIBLE)
        assert str(obj) == "collectible@(10, 20) r=14"


class TestPlayer:
    """Test Player damage and effect bookkeeping."""

    def test_defaults(self, player):
        assert player.facing_angle == 90.0
        assert player.score == 0
        assert not player.shielded

    def test_take_hit(self, player):
        player.take_hit(now=2.0, cooldown=0.5)
        assert player.lives == 4
        assert player.next_hit_time == 2.5

    def test_lives_floor_at_zero(self, player):
        player.lives = 0
        player.take_hit(now=1.0, cooldown=0.5)
        assert player.lives == 0

    def test_cooldown_blocks_damage(self, player):
        player.take_hit(now=2.0, cooldown=0.5)
        assert not player.can_take_damage(2.25)
        assert player.can_take_damage(2.5)

    def test_shield_blocks_damage(self, player):
        player.shielded = True
        assert not player.can_take_damage(100.0)

    def test_boost_window(self, player):
        player.speed_boost_expires_at = 6.0
        assert player.is_boosted(5.99)
        assert not player.is_boosted(6.0)

    def test_respawn_clears_everything(self, player):
        player.score = 25
        player.lives = 1
        player.shielded = True
        player.shield_expires_at = 9.0
        player.speed_boost_expires_at = 9.0
        player.next_hit_time = 9.0
        player.facing_angle = -45.0

        player.respawn(Point2D(x=1, y=2), lives=5)

        assert player.position.as_tuple == (1.0, 2.0)
        assert player.lives == 5
        assert player.score == 0
        assert player.facing_angle == 90.0
        assert not player.shielded
        assert player.shield_expires_at == 0.0
        assert player.speed_boost_expires_at == 0.0
        assert player.next_hit_time == 0.0
