"""
Tests for the leveled logger.
"""

import pytest

from butterfly_catch import logging as game_logging
from butterfly_catch.logging import LogLevel, configure_logging, disable_logging, get_logger


@pytest.fixture(autouse=True)
def restore_config():
    saved = dict(game_logging._config)
    saved['module_levels'] = dict(saved['module_levels'])
    yield
    game_logging._config.clear()
    game_logging._config.update(saved)


def test_default_level_filters(capsys):
    configure_logging(level='INFO', timestamps=False)
    log = get_logger('session')
    log.debug("hidden")
    log.info("Level %d complete", 3)
    err = capsys.readouterr().err
    assert "hidden" not in err
    assert "[INFO] [session] Level 3 complete" in err


def test_module_override(capsys):
    configure_logging(level='WARNING', modules={'spawner': 'DEBUG'}, timestamps=False)
    get_logger('spawner').debug("clamped level %d", 12)
    get_logger('session').info("quiet")
    err = capsys.readouterr().err
    assert "[DEBUG] [spawner] clamped level 12" in err
    assert "quiet" not in err


def test_trace_below_debug():
    configure_logging(level='DEBUG')
    log = get_logger('scheduler')
    assert not log.is_enabled_for(LogLevel.TRACE)
    assert log.is_enabled_for(LogLevel.DEBUG)


def test_bad_format_args_still_logged(capsys):
    configure_logging(level='INFO', timestamps=False)
    get_logger('engine').info("no placeholders", 1)
    assert "no placeholders (1,)" in capsys.readouterr().err


def test_unknown_level_name_is_info():
    configure_logging(level='LOUD')
    assert get_logger('engine').level == LogLevel.INFO


def test_disable(capsys):
    disable_logging()
    get_logger('engine').error("boom")
    assert capsys.readouterr().err == ""


def test_loggers_cached():
    assert get_logger('renderer') is get_logger('renderer')


def test_env_config(monkeypatch):
    monkeypatch.setenv('BUTTERFLY_LOG_LEVEL', 'ERROR')
    monkeypatch.setenv('BUTTERFLY_LOG_MODE_LOADER', 'TRACE')
    game_logging._load_env_config()
    assert get_logger('session').level == LogLevel.ERROR
    assert get_logger('mode_loader').level == LogLevel.TRACE


def test_exception_includes_traceback(capsys):
    configure_logging(level='INFO', timestamps=False)
    try:
        raise RuntimeError("bad frame")
    except RuntimeError:
        get_logger('engine').exception("Frame %d failed", 7)
    err = capsys.readouterr().err
    assert "[ERROR] [engine] Frame 7 failed" in err
    assert "RuntimeError: bad frame" in err


def test_warn_tag(capsys):
    configure_logging(level='WARN', timestamps=False)
    get_logger('renderer').warning("missing font")
    assert "[WARN] [renderer] missing font" in capsys.readouterr().err
