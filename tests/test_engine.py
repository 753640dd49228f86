"""
Tests for the pygame engine loop.

The dummy SDL video driver (set in conftest) lets the engine open a real
window surface without a display.
"""

import pygame
import pytest

from butterfly_catch.engine import GameEngine
from butterfly_catch.models import (
    BonusSpawnConfig,
    BossConfig,
    GameModeConfig,
    GamePhase,
    LevelsConfig,
    Resolution,
)


@pytest.fixture
def engine():
    mode = GameModeConfig(bonus=BonusSpawnConfig(chance_per_frame=0.0))
    engine = GameEngine(mode=mode, seed=5, resolution=Resolution(width=320, height=240), fps=120)
    yield engine
    engine.quit()


@pytest.fixture
def one_level_engine():
    mode = GameModeConfig(
        levels=LevelsConfig(max_level=1),
        boss=BossConfig(minion_level=1),
        bonus=BonusSpawnConfig(chance_per_frame=0.0),
    )
    engine = GameEngine(mode=mode, seed=5, resolution=Resolution(width=320, height=240), fps=120)
    yield engine
    engine.quit()


def finish_game(engine):
    engine.start_game()
    engine.session.machine.begin_playing()
    engine.session.level_complete()
    assert engine.session.phase == GamePhase.COMPLETE


class TestEngine:

    def test_window_size(self, engine):
        assert engine.screen.get_size() == (320, 240)
        assert engine.session.bounds == Resolution(width=320, height=240)

    def test_run_frames(self, engine):
        engine.run(max_frames=5)
        assert engine.running
        assert engine.session.phase == GamePhase.COUNTDOWN

    def test_escape_quits(self, engine):
        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
        engine.run(max_frames=50)
        assert not engine.running

    def test_quit_event(self, engine):
        engine.start_game()
        pygame.event.post(pygame.event.Event(pygame.QUIT))
        engine.handle_events()
        assert not engine.running

    def test_click_moves_net(self, engine):
        engine.start_game()
        engine.session.machine.begin_playing()
        pygame.event.post(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(30, 40), button=1))
        engine.handle_events()
        assert (engine.session.pursuer.x, engine.session.pursuer.y) == (30.0, 40.0)


class TestRestart:
    """After the game completes, SPACE or a click starts a new one."""

    def test_record_kept(self, one_level_engine):
        finish_game(one_level_engine)
        assert one_level_engine.last_record is not None
        assert one_level_engine.last_record.seed == 5

    def test_summary_renders(self, one_level_engine):
        finish_game(one_level_engine)
        one_level_engine.render()

    def test_space_restarts(self, one_level_engine):
        finish_game(one_level_engine)
        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))
        one_level_engine.handle_events()
        assert one_level_engine.session.phase == GamePhase.COUNTDOWN
        assert one_level_engine.session.record is None

    def test_click_restarts(self, one_level_engine):
        finish_game(one_level_engine)
        pygame.event.post(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(5, 5), button=1))
        one_level_engine.handle_events()
        assert one_level_engine.session.phase == GamePhase.COUNTDOWN

    def test_space_ignored_mid_game(self, one_level_engine):
        one_level_engine.start_game()
        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))
        one_level_engine.handle_events()
        assert one_level_engine.session.phase == GamePhase.COUNTDOWN
        assert one_level_engine.session.get_state().countdown == 3
