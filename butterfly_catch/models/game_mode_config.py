"""
Pydantic v2 models for game mode YAML configuration.

These models validate and parse game mode files that tune level pacing,
spawning, the boss level and scoring. Every field defaults to the classic
game's value, so ``GameModeConfig()`` is a complete classic mode.
"""

from typing import Tuple

from pydantic import BaseModel, Field, field_validator, model_validator


class LevelsConfig(BaseModel):
    """
    Level progression and per-level wave settings.
    """
    model_config = {"frozen": True}

    max_level: int = Field(
        default=10,
        description="Number of levels; the last one is the boss level",
        ge=1,
        le=10
    )
    wave_size: int = Field(
        default=15,
        description="Butterflies spawned by a regular level's wave",
        ge=1
    )
    level_time_limit: float = Field(
        default=10.0,
        description="Seconds before a level completes on its own",
        gt=0.0
    )
    progression_grace: float = Field(
        default=2.0,
        description="Seconds of level time before an empty screen can complete the level",
        ge=0.0
    )
    stagger_interval: float = Field(
        default=0.05,
        description="Seconds between inserting consecutive wave butterflies",
        ge=0.0
    )
    speed_bonus_per_level: float = Field(
        default=0.1,
        description="Extra speed fraction per level above 1",
        ge=0.0
    )
    speed_variation: Tuple[float, float] = Field(
        default=(0.8, 1.2),
        description="Per-butterfly random speed multiplier range (min, max)"
    )

    @field_validator("speed_variation")
    @classmethod
    def validate_speed_variation(cls, v: Tuple[float, float]) -> Tuple[float, float]:
        """Ensure 0 < min <= max."""
        low, high = v
        if low <= 0.0 or high <= 0.0:
            raise ValueError("Speed variation values must be positive")
        if low > high:
            raise ValueError("Speed variation min must not exceed max")
        return v


class CountdownConfig(BaseModel):
    """
    Pre-game countdown shown once per session.
    """
    model_config = {"frozen": True}

    seconds: int = Field(
        default=3,
        description="Countdown start value",
        ge=0
    )
    interval: float = Field(
        default=1.0,
        description="Seconds between countdown steps",
        gt=0.0
    )


class TransitionConfig(BaseModel):
    """
    Between-levels interstitial.
    """
    model_config = {"frozen": True}

    duration: float = Field(
        default=1.0,
        description="Transition length in seconds",
        gt=0.0
    )


class BossConfig(BaseModel):
    """
    Boss level: one queen butterfly escorted by minions.
    """
    model_config = {"frozen": True}

    size_multiplier: float = Field(default=2.5, gt=0.0)
    catch_radius_multiplier: float = Field(default=0.7, gt=0.0)
    speed_multiplier: float = Field(default=0.8, gt=0.0)
    health: int = Field(
        default=5,
        description="Hits needed to catch the queen",
        ge=1
    )
    insert_delay: float = Field(
        default=1.0,
        description="Seconds before the queen appears",
        ge=0.0
    )
    minion_count: int = Field(default=8, ge=0)
    minion_level: int = Field(
        default=9,
        description="Level whose art and stats the minions use",
        ge=1
    )
    minion_radius: float = Field(
        default=150.0,
        description="Radius of the minion circle around screen center",
        ge=0.0
    )
    minion_delay: float = Field(default=0.5, ge=0.0)
    minion_delay_step: float = Field(default=0.1, ge=0.0)
    defeat_completes_level: bool = Field(
        default=True,
        description="Catching the queen ends the boss level immediately"
    )


class BonusSpawnConfig(BaseModel):
    """
    Random extra groups spawned during play.
    """
    model_config = {"frozen": True}

    chance_per_frame: float = Field(default=0.01, ge=0.0, le=1.0)
    max_live: int = Field(
        default=20,
        description="No bonus groups while this many butterflies are live",
        ge=0
    )
    group_min: int = Field(default=3, ge=1)
    group_max: int = Field(default=5, ge=1)
    speed_multiplier: float = Field(default=1.2, gt=0.0)

    @model_validator(mode='after')
    def validate_group_range(self) -> 'BonusSpawnConfig':
        """Ensure group_min <= group_max."""
        if self.group_min > self.group_max:
            raise ValueError("group_min must not exceed group_max")
        return self


class EntityConfig(BaseModel):
    """
    Butterfly movement tuning shared by all levels.
    """
    model_config = {"frozen": True}

    screen_margin: float = Field(
        default=100.0,
        description="Pixels past the screen edge before a crossed butterfly is removed",
        ge=0.0
    )
    wobble_chance: float = Field(
        default=0.05,
        description="Per-frame chance of a heading wobble for 'direct' movers",
        ge=0.0,
        le=1.0
    )
    wobble_amount: float = Field(
        default=0.1,
        description="Total wobble range in radians (applied as +/- half)",
        ge=0.0
    )
    slingshot: float = Field(
        default=1.05,
        description="One-time speed multiplier on first entering the screen",
        gt=0.0
    )
    boss_hit_speedup: float = Field(default=1.1, gt=0.0)


class ScoringConfig(BaseModel):
    """
    Points awarded per catch.
    """
    model_config = {"frozen": True}

    points_per_level: int = Field(
        default=10,
        description="A level L butterfly is worth L x points_per_level",
        ge=0
    )


class PursuerConfig(BaseModel):
    """
    The player's net.
    """
    model_config = {"frozen": True}

    catch_radius: float = Field(default=40.0, gt=0.0)


class GameModeConfig(BaseModel):
    """
    Complete game mode configuration.

    Examples:
        >>> config = GameModeConfig()
        >>> config.levels.max_level
        10
        >>> config.boss.health
        5
    """
    model_config = {"frozen": True}

    name: str = Field(default="Classic", min_length=1)
    description: str = ""
    version: str = "1.0.0"

    levels: LevelsConfig = Field(default_factory=LevelsConfig)
    countdown: CountdownConfig = Field(default_factory=CountdownConfig)
    transition: TransitionConfig = Field(default_factory=TransitionConfig)
    boss: BossConfig = Field(default_factory=BossConfig)
    bonus: BonusSpawnConfig = Field(default_factory=BonusSpawnConfig)
    entity: EntityConfig = Field(default_factory=EntityConfig)
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    pursuer: PursuerConfig = Field(default_factory=PursuerConfig)

    max_frame_dt: float = Field(
        default=0.25,
        description="Longest frame the simulation will step in one tick",
        gt=0.0
    )

    @model_validator(mode='after')
    def validate_minion_level(self) -> 'GameModeConfig':
        """Minions must use a level that exists."""
        if self.boss.minion_level > self.levels.max_level:
            raise ValueError(
                f"boss.minion_level ({self.boss.minion_level}) exceeds "
                f"levels.max_level ({self.levels.max_level})"
            )
        return self
