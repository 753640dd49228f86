"""
Simulation core: butterflies, spawning, level progression and scoring.

Nothing in here opens a window; the renderer module is the only part that
draws, and it only reads snapshots.
"""

from butterfly_catch.game.butterfly import Butterfly
from butterfly_catch.game.levels import LevelStateMachine, LevelTransition, WaveState
from butterfly_catch.game.pursuer import Pursuer
from butterfly_catch.game.scheduler import ScheduledEvent, Scheduler
from butterfly_catch.game.scoring import ScoreTracker
from butterfly_catch.game.session import CatchResult, GameSession
from butterfly_catch.game.spawner import PlannedSpawn, Spawner, choose_formation

__all__ = [
    "Butterfly",
    "CatchResult",
    "GameSession",
    "LevelStateMachine",
    "LevelTransition",
    "PlannedSpawn",
    "Pursuer",
    "ScheduledEvent",
    "Scheduler",
    "ScoreTracker",
    "Spawner",
    "WaveState",
    "choose_formation",
]
