"""Shared pytest fixtures for Dodgefall tests."""
import copy
import os

# Headless pygame: must be set before pygame is first imported
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

import pygame
import pytest

from dodgefall import logging as dlog
from dodgefall.models.entities import Obstacle, ObstacleKind
from dodgefall.session import Session
from dodgefall.tuning import default_profile

# Far longer than any test runs, so no obstacle ever spawns on its own
NO_SPAWN_INTERVAL = 1e9


@pytest.fixture(scope='session', autouse=True)
def pygame_init():
    """Initialize pygame once with the dummy drivers."""
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture(autouse=True)
def isolated_logging():
    """Silence console logging and restore logger config and sinks afterwards."""
    saved = copy.deepcopy(dlog._config)
    dlog.disable_logging()
    yield
    dlog.close_all_sinks()
    dlog._config.clear()
    dlog._config.update(saved)


@pytest.fixture
def quiet_tuning():
    """Default tuning with spontaneous spawning switched off."""
    return default_profile().with_overrides(spawn_interval=NO_SPAWN_INTERVAL)


@pytest.fixture
def session(quiet_tuning):
    """Idle 600x800 session that never spawns obstacles by itself."""
    return Session(600, 800, tuning=quiet_tuning, seed=1234)


@pytest.fixture
def playing_session(session):
    """Same session, already started."""
    session.start()
    return session


def make_obstacle(x, y, size=40.0, kind=ObstacleKind.HAZARD, speed=0.0):
    """Obstacle that stays put unless given a speed."""
    return Obstacle(x=x, y=y, size=size, speed=speed, kind=kind)
