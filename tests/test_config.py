"""
Tests for environment-driven settings.
"""

import importlib

from butterfly_catch import config


def test_defaults():
    assert config.MODES_DIR.name == 'modes'
    assert (config.MODES_DIR / 'classic.yaml').exists()
    assert config.Colors.NET == config.NET_BROWN
    assert config.Fonts.HUGE > config.Fonts.SMALL


def test_environment_overrides(monkeypatch):
    with monkeypatch.context() as m:
        m.setenv('SCREEN_WIDTH', '640')
        m.setenv('BUTTERFLY_SEED', '99')
        m.setenv('BUTTERFLY_STRICT_CONTRACTS', 'false')
        m.setenv('BUTTERFLY_SHOW_CATCH_RADII', 'yes')
        importlib.reload(config)

        assert config.SCREEN_WIDTH == 640
        assert config.SEED == 99
        assert config.STRICT_CONTRACTS is False
        assert config.SHOW_CATCH_RADII is True

    importlib.reload(config)


def test_empty_seed_is_random(monkeypatch):
    with monkeypatch.context() as m:
        m.setenv('BUTTERFLY_SEED', '  ')
        importlib.reload(config)
        assert config.SEED is None

    importlib.reload(config)


def test_debug_turns_on_overlays(monkeypatch):
    with monkeypatch.context() as m:
        m.setenv('BUTTERFLY_DEBUG', '1')
        m.delenv('BUTTERFLY_SHOW_CATCH_RADII', raising=False)
        m.setenv('BUTTERFLY_SHOW_CROSSING_POINTS', 'false')
        importlib.reload(config)
        assert config.SHOW_CATCH_RADII is True
        assert config.SHOW_CROSSING_POINTS is False

    importlib.reload(config)
