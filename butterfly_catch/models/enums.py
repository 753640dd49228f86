"""
Enumerations for Butterfly Catch gameplay.
"""

from enum import Enum


class GamePhase(str, Enum):
    """Phase of the level/wave state machine. Exactly one is active.

    Attributes:
        IDLE: No game started yet (session created, start_game not called)
        COUNTDOWN: Pre-game 3-2-1 countdown; gameplay and clicks suppressed
        PLAYING: Butterflies fly and can be caught
        TRANSITIONING: Short interstitial between levels
        COMPLETE: Run finished; score and counts are final
    """
    IDLE = "idle"
    COUNTDOWN = "countdown"
    PLAYING = "playing"
    TRANSITIONING = "transitioning"
    COMPLETE = "complete"


class MovementPattern(str, Enum):
    """How a butterfly moves between frames.

    Attributes:
        LINEAR: Straight line, no heading changes
        DIRECT: Straight line with occasional small random heading wobble
    """
    LINEAR = "linear"
    DIRECT = "direct"


class Formation(str, Enum):
    """Formation tag assigned to a spawned batch."""
    LINE = "line"
    V = "v"
    CIRCLE = "circle"
    GRID = "grid"
    RANDOM = "random"


class SpawnEdge(int, Enum):
    """Screen edge a butterfly enters from."""
    TOP = 0
    RIGHT = 1
    BOTTOM = 2
    LEFT = 3


class CompletionCause(str, Enum):
    """Why a level ended."""
    TIME_LIMIT = "time_limit"
    CLEARED = "cleared"
    BOSS_DEFEATED = "boss_defeated"
    MANUAL = "manual"


class EventType(str, Enum):
    """Types of input events.

    Attributes:
        CLICK: A click or tap; triggers a catch attempt
        MOVE: Pointer or touch movement; moves the net
    """
    CLICK = "click"
    MOVE = "move"
