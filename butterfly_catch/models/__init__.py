"""
Data models for Butterfly Catch.

- Primitives: Point2D/Vector2D, Resolution
- Enums: GamePhase, MovementPattern, Formation, SpawnEdge, CompletionCause, EventType
- Views: ButterflyData, TransitionData, ScoreData, GameRecord, GameSnapshot
- Config: GameModeConfig and its sections, loaded from YAML mode files

Usage:
    >>> from butterfly_catch.models import Point2D, GamePhase, GameModeConfig
"""

from .primitives import (
    Point2D,
    Vector2D,
    Resolution,
)

from .enums import (
    GamePhase,
    MovementPattern,
    Formation,
    SpawnEdge,
    CompletionCause,
    EventType,
)

from .models import (
    ButterflyData,
    TransitionData,
    ScoreData,
    GameRecord,
    GameSnapshot,
)

from .game_mode_config import (
    GameModeConfig,
    LevelsConfig,
    CountdownConfig,
    TransitionConfig,
    BossConfig,
    BonusSpawnConfig,
    EntityConfig,
    ScoringConfig,
    PursuerConfig,
)

__all__ = [
    # Primitives
    "Point2D",
    "Vector2D",
    "Resolution",
    # Enums
    "GamePhase",
    "MovementPattern",
    "Formation",
    "SpawnEdge",
    "CompletionCause",
    "EventType",
    # Views
    "ButterflyData",
    "TransitionData",
    "ScoreData",
    "GameRecord",
    "GameSnapshot",
    # Config
    "GameModeConfig",
    "LevelsConfig",
    "CountdownConfig",
    "TransitionConfig",
    "BossConfig",
    "BonusSpawnConfig",
    "EntityConfig",
    "ScoringConfig",
    "PursuerConfig",
]
