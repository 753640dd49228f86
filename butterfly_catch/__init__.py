"""
Butterfly Catch - catch butterflies with a net across ten levels.

The simulation core (spawning, level progression, hit testing) lives in
``butterfly_catch.game`` and runs without a display. ``butterfly_catch.engine``
wraps it in a pygame window.

Usage:
    >>> from butterfly_catch import GameSession
    >>> session = GameSession(seed=42)
    >>> session.start_game()
    >>> session.tick(1 / 60)
"""

__version__ = "1.0.0"

from butterfly_catch.game.session import GameSession, CatchResult

__all__ = [
    "GameSession",
    "CatchResult",
    "__version__",
]
