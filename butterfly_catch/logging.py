"""
Leveled stderr logger for Butterfly Catch.

Each subsystem asks for its own named logger; a line is printed only when
its level reaches the threshold set for that name (or the global one).

Usage:
    from butterfly_catch.logging import get_logger

    log = get_logger('spawner')
    log.info("Level %d wave: %d butterflies", 3, 15)
    log.trace("Insertion at t=%.2f", 1.25)

Thresholds:
    BUTTERFLY_LOG_LEVEL=DEBUG          # every logger
    BUTTERFLY_LOG_SCHEDULER=TRACE      # just the 'scheduler' logger
    BUTTERFLY_LOG_MODE_LOADER=OFF

    or configure_logging(level='DEBUG', modules={'renderer': 'WARNING'})
"""

import os
import sys
import time
import traceback
from enum import IntEnum
from functools import lru_cache
from typing import Any, Dict, Optional


class LogLevel(IntEnum):
    """Thresholds, numerically compatible with the stdlib logging module."""
    TRACE = 5      # per-frame detail
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
    OFF = 100


_ENV_PREFIX = 'BUTTERFLY_LOG_'
_ENV_DEFAULT = _ENV_PREFIX + 'LEVEL'

# Short tags printed in each line
_TAGS = {
    LogLevel.TRACE: 'TRACE',
    LogLevel.DEBUG: 'DEBUG',
    LogLevel.INFO: 'INFO',
    LogLevel.WARNING: 'WARN',
    LogLevel.ERROR: 'ERROR',
    LogLevel.CRITICAL: 'CRIT',
}

_config: Dict[str, Any] = {
    'default_level': LogLevel.INFO,
    'module_levels': {},
    'timestamps': True,
}


def _parse_level(name: str) -> LogLevel:
    """Level for a name such as 'debug' or 'WARN'; unknown names mean INFO."""
    name = name.strip().upper()
    if name == 'WARN':
        return LogLevel.WARNING
    try:
        return LogLevel[name]
    except KeyError:
        return LogLevel.INFO


def _module_key(name: str) -> str:
    return name.lower().replace('.', '_').replace('/', '_')


def configure_logging(
    level: str = 'INFO',
    modules: Optional[Dict[str, str]] = None,
    timestamps: bool = True,
) -> None:
    """Set the global threshold and optional per-logger thresholds.

    Args:
        level: Threshold for loggers without their own setting
        modules: Logger name -> threshold name
        timestamps: Start each line with HH:MM:SS
    """
    _config['default_level'] = _parse_level(level)
    for name, module_level in (modules or {}).items():
        _config['module_levels'][_module_key(name)] = _parse_level(module_level)
    _config['timestamps'] = timestamps


def disable_logging() -> None:
    """Silence every logger."""
    _config['default_level'] = LogLevel.OFF
    _config['module_levels'].clear()


def _load_env_config() -> None:
    """Read BUTTERFLY_LOG_LEVEL and BUTTERFLY_LOG_<NAME> thresholds."""
    for key, value in os.environ.items():
        if not key.startswith(_ENV_PREFIX):
            continue
        if key == _ENV_DEFAULT:
            _config['default_level'] = _parse_level(value)
        else:
            _config['module_levels'][_module_key(key[len(_ENV_PREFIX):])] = _parse_level(value)


_load_env_config()


class GameLogger:
    """Named logger. Arguments are %-formatted only when the line is printed."""

    def __init__(self, module: str):
        self.module = module
        self._key = _module_key(module)

    @property
    def level(self) -> LogLevel:
        """Threshold in effect for this logger right now."""
        return _config['module_levels'].get(self._key, _config['default_level'])

    def is_enabled_for(self, level: LogLevel) -> bool:
        return level >= self.level

    def log(self, level: LogLevel, msg: str, *args) -> None:
        if level < self.level:
            return
        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                msg = f"{msg} {args}"

        line = f"[{_TAGS[level]}] [{self.module}] {msg}"
        if _config['timestamps']:
            line = f"[{time.strftime('%H:%M:%S')}] {line}"
        print(line, file=sys.stderr)

    def trace(self, msg: str, *args) -> None:
        self.log(LogLevel.TRACE, msg, *args)

    def debug(self, msg: str, *args) -> None:
        self.log(LogLevel.DEBUG, msg, *args)

    def info(self, msg: str, *args) -> None:
        self.log(LogLevel.INFO, msg, *args)

    def warning(self, msg: str, *args) -> None:
        self.log(LogLevel.WARNING, msg, *args)

    def error(self, msg: str, *args) -> None:
        self.log(LogLevel.ERROR, msg, *args)

    def exception(self, msg: str, *args) -> None:
        """Log an error followed by the traceback being handled, if any."""
        self.log(LogLevel.ERROR, msg, *args)
        if sys.exc_info()[0] is None:
            return
        for line in traceback.format_exc().rstrip().splitlines():
            self.log(LogLevel.ERROR, "  %s", line)


@lru_cache(maxsize=64)
def get_logger(module: str) -> GameLogger:
    """Shared logger for a subsystem name ('session', 'spawner', ...)."""
    return GameLogger(module)
