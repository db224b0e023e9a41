"""Shared fixtures for Intercept tests."""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from arcadekit.logging import disable_logging
from games.Intercept.config import SimulationConfig
from games.Intercept.game import SimulationEngine


@pytest.fixture(autouse=True)
def quiet_logs():
    """Keep phase-change INFO lines out of test output."""
    disable_logging()


@pytest.fixture
def config():
    """Default settings (independent of the environment)."""
    return SimulationConfig()


@pytest.fixture
def engine(config):
    """Fresh engine in the EDIT phase."""
    return SimulationEngine(config)


@pytest.fixture
def playing(engine):
    """Engine with a round already started."""
    engine.start_round()
    return engine
