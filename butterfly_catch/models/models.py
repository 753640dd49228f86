"""
Immutable views of the simulation state.

The session mutates plain Python objects every frame; these pydantic models
are what it hands out to collaborators (renderer, leaderboard, tests), so
nothing outside the core can change core state through them.
"""

from typing import Dict, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from .enums import CompletionCause, GamePhase
from .primitives import Point2D


class ButterflyData(BaseModel):
    """What the renderer needs to draw one butterfly.

    Attributes:
        position: Center of the butterfly in screen coordinates
        width: Drawn width in pixels
        height: Drawn height in pixels
        rotation: Heading of the velocity vector in radians
        wing_flap: Wing animation phase in [0, 1]
        level: Butterfly level (1-10), selects art and fallback color
        is_boss: True for the level 10 queen
        health: Remaining hits (1 for regular butterflies)
        max_health: Hits a full-health butterfly takes
        catch_radius: Hit radius, for debug overlays
        crossing_point: Interior point the spawn heading aimed through
    """
    position: Point2D
    width: float = Field(..., gt=0)
    height: float = Field(..., gt=0)
    rotation: float
    wing_flap: float = Field(..., ge=0, le=1)
    level: int = Field(..., ge=1)
    is_boss: bool = False
    health: int = Field(default=1, ge=0)
    max_health: int = Field(default=1, ge=1)
    catch_radius: float = Field(..., gt=0)
    crossing_point: Optional[Point2D] = None

    model_config = ConfigDict(frozen=True)


class TransitionData(BaseModel):
    """Progress of the between-levels interstitial.

    Attributes:
        progress: Fraction of the transition elapsed, clamped to [0, 1]
        to_level: Level that starts when the transition finishes
        cause: Why the previous level ended
        fast: Whether the completion asked for a fast transition
    """
    progress: float = Field(..., ge=0, le=1)
    to_level: int = Field(..., ge=1)
    cause: CompletionCause
    fast: bool = False

    model_config = ConfigDict(frozen=True)


class ScoreData(BaseModel):
    """Score and per-level catch tally.

    Attributes:
        score: Total points (10 x level per catch by default)
        counts: Catches per level; counts[0] is level 1

    Examples:
        >>> data = ScoreData(score=30, counts=(1, 1, 0))
        >>> data.total_caught
        2
        >>> data.butterfly_counts
        {1: 1, 2: 1, 3: 0}
    """
    score: int = Field(default=0, ge=0)
    counts: Tuple[int, ...] = ()

    model_config = ConfigDict(frozen=True)

    @field_validator('counts')
    @classmethod
    def validate_counts(cls, v: Tuple[int, ...]) -> Tuple[int, ...]:
        """Catch counts can never be negative."""
        if any(c < 0 for c in v):
            raise ValueError(f'Catch counts must be non-negative, got {v}')
        return v

    @computed_field
    @property
    def total_caught(self) -> int:
        """Total butterflies caught across all levels."""
        return sum(self.counts)

    @property
    def butterfly_counts(self) -> Dict[int, int]:
        """Catches keyed by level number (a fresh dict each call)."""
        return {level: count for level, count in enumerate(self.counts, start=1)}


class GameRecord(BaseModel):
    """Final result of a run, handed to the leaderboard collaborator.

    Attributes:
        score: Final score
        per_level_counts: Catches per level; index 0 is level 1
        seed: RNG seed the run used, so it can be replayed
    """
    score: int = Field(..., ge=0)
    per_level_counts: Tuple[int, ...]
    seed: Optional[int] = None

    model_config = ConfigDict(frozen=True)

    @computed_field
    @property
    def total_caught(self) -> int:
        """Total butterflies caught in the run."""
        return sum(self.per_level_counts)

    def counts_by_level(self) -> Dict[int, int]:
        """Catches keyed by level number (a fresh dict each call)."""
        return {level: count for level, count in enumerate(self.per_level_counts, start=1)}


class GameSnapshot(BaseModel):
    """Read-only view of the session returned by GameSession.get_state().

    Attributes:
        phase: Active state machine phase
        level: Current level (1-based)
        score: Current score
        level_timer: Seconds elapsed in the current level
        time_remaining: Seconds left before the level time limit
        countdown: Countdown value while in COUNTDOWN, else 0
        transition: Transition progress while TRANSITIONING, else None
        butterflies: Live butterflies in insertion order
        pursuer: Net position
        pursuer_radius: Net catch radius
        epoch: Current epoch; changes on every phase change
    """
    phase: GamePhase
    level: int = Field(..., ge=1)
    score: int = Field(..., ge=0)
    level_timer: float = Field(..., ge=0)
    time_remaining: float = Field(..., ge=0)
    countdown: int = Field(default=0, ge=0)
    transition: Optional[TransitionData] = None
    butterflies: Tuple[ButterflyData, ...] = ()
    pursuer: Point2D
    pursuer_radius: float = Field(..., gt=0)
    epoch: int = Field(..., ge=0)

    model_config = ConfigDict(frozen=True)

    @computed_field
    @property
    def live_entities(self) -> int:
        """Number of live butterflies."""
        return len(self.butterflies)
