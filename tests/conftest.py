"""
Shared fixtures for the Butterfly Catch test suite.

Pygame runs with the dummy video and audio drivers so tests need no
display. Sessions use a fixed seed and, unless a test asks otherwise, no
random bonus groups, so every run is deterministic.
"""

import os

os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

import pytest

from butterfly_catch.game.session import GameSession
from butterfly_catch.logging import configure_logging
from butterfly_catch.models import BonusSpawnConfig, GameModeConfig, Resolution

configure_logging(level='WARNING')

# Exact in binary floating point, so simulated clocks land on whole seconds
STEP = 0.25


def run_for(session: GameSession, seconds: float, step: float = STEP) -> None:
    """Tick a session for the given simulated time."""
    for _ in range(int(round(seconds / step))):
        session.tick(step)


@pytest.fixture
def bounds():
    return Resolution(width=800, height=600)


@pytest.fixture
def config():
    """Classic tuning without random bonus groups."""
    return GameModeConfig(bonus=BonusSpawnConfig(chance_per_frame=0.0))


@pytest.fixture
def session(config, bounds):
    return GameSession(config=config, bounds=bounds, seed=42, strict=True)


@pytest.fixture
def advance():
    """Helper that ticks a session for N simulated seconds."""
    return run_for


@pytest.fixture
def playing_session(session):
    """A session that finished its countdown and is on level 1."""
    session.start_game()
    run_for(session, session.config.countdown.seconds * session.config.countdown.interval)
    return session


@pytest.fixture
def empty_playing_session(session):
    """A PLAYING session with no wave, for hand-placed butterflies."""
    session.start_game()
    session.machine.begin_playing()
    return session
