"""
Tests for the pydantic data models.

Covers primitives, the immutable views handed out by the session and the
game mode configuration validators.
"""

import pytest
from pydantic import ValidationError

from butterfly_catch.models import (
    BonusSpawnConfig,
    BossConfig,
    ButterflyData,
    CompletionCause,
    GameModeConfig,
    GamePhase,
    GameRecord,
    GameSnapshot,
    LevelsConfig,
    Point2D,
    Resolution,
    ScoreData,
    TransitionData,
)


# ============================================================================
# Primitives
# ============================================================================


class TestPoint2D:
    """Test Point2D model."""

    def test_point_creation(self):
        point = Point2D(x=1.5, y=-2.0)
        assert point.x == 1.5
        assert point.y == -2.0

    def test_point_is_frozen(self):
        point = Point2D(x=0.0, y=0.0)
        with pytest.raises(ValidationError):
            point.x = 5.0

    def test_str(self):
        assert str(Point2D(x=1.0, y=2.5)) == "Point2D(x=1.00, y=2.50)"


class TestResolution:
    """Test Resolution model."""

    def test_center(self):
        assert Resolution(width=800, height=600).center == Point2D(x=400.0, y=300.0)

    def test_str(self):
        assert str(Resolution(width=800, height=600)) == "800x600"

    def test_non_positive_size_rejected(self):
        with pytest.raises(ValidationError):
            Resolution(width=0, height=600)


# ============================================================================
# Views
# ============================================================================


class TestScoreData:
    """Test ScoreData model."""

    def test_defaults(self):
        data = ScoreData()
        assert data.score == 0
        assert data.counts == ()
        assert data.total_caught == 0

    def test_negative_counts_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            ScoreData(score=0, counts=(1, -1))
        assert 'non-negative' in str(exc_info.value).lower()

    def test_negative_score_rejected(self):
        with pytest.raises(ValidationError):
            ScoreData(score=-10)

    def test_butterfly_counts_is_a_fresh_dict(self):
        data = ScoreData(score=30, counts=(1, 1))
        counts = data.butterfly_counts
        counts[1] = 99
        assert data.butterfly_counts == {1: 1, 2: 1}


class TestGameRecord:
    """Test GameRecord model."""

    def test_total_caught(self):
        record = GameRecord(score=50, per_level_counts=(3, 1, 0))
        assert record.total_caught == 4
        assert record.counts_by_level() == {1: 3, 2: 1, 3: 0}

    def test_record_is_read_only(self):
        record = GameRecord(score=50, per_level_counts=(3, 1))
        with pytest.raises(ValidationError):
            record.score = 1000


class TestButterflyData:
    """Test ButterflyData model."""

    def test_wing_flap_range(self):
        with pytest.raises(ValidationError):
            ButterflyData(position=Point2D(x=0, y=0), width=10, height=10,
                          rotation=0.0, wing_flap=1.5, level=1, catch_radius=10)

    def test_defaults(self):
        data = ButterflyData(position=Point2D(x=0, y=0), width=10, height=10,
                             rotation=0.0, wing_flap=0.5, level=2, catch_radius=10)
        assert not data.is_boss
        assert data.health == 1
        assert data.max_health == 1
        assert data.crossing_point is None


class TestTransitionData:
    """Test TransitionData model."""

    def test_progress_range(self):
        with pytest.raises(ValidationError):
            TransitionData(progress=1.2, to_level=2, cause=CompletionCause.CLEARED)


class TestGameSnapshot:
    """Test GameSnapshot model."""

    def test_live_entities(self):
        butterfly = ButterflyData(position=Point2D(x=0, y=0), width=10, height=10,
                                  rotation=0.0, wing_flap=0.0, level=1, catch_radius=10)
        snapshot = GameSnapshot(
            phase=GamePhase.PLAYING, level=1, score=0, level_timer=0.0,
            time_remaining=10.0, butterflies=(butterfly, butterfly),
            pursuer=Point2D(x=0, y=0), pursuer_radius=40.0, epoch=2,
        )
        assert snapshot.live_entities == 2

    def test_snapshot_is_frozen(self):
        snapshot = GameSnapshot(
            phase=GamePhase.IDLE, level=1, score=0, level_timer=0.0,
            time_remaining=10.0, pursuer=Point2D(x=0, y=0), pursuer_radius=40.0, epoch=0,
        )
        with pytest.raises(ValidationError):
            snapshot.level = 3


# ============================================================================
# Game mode configuration
# ============================================================================


class TestGameModeConfig:
    """Test GameModeConfig defaults and validators."""

    def test_defaults_are_classic(self):
        config = GameModeConfig()
        assert config.levels.max_level == 10
        assert config.levels.wave_size == 15
        assert config.levels.level_time_limit == 10.0
        assert config.levels.progression_grace == 2.0
        assert config.levels.speed_variation == (0.8, 1.2)
        assert config.countdown.seconds == 3
        assert config.transition.duration == 1.0
        assert config.boss.health == 5
        assert config.boss.minion_count == 8
        assert config.bonus.chance_per_frame == 0.01
        assert config.entity.screen_margin == 100.0
        assert config.scoring.points_per_level == 10
        assert config.pursuer.catch_radius == 40.0
        assert config.max_frame_dt == 0.25

    def test_config_is_frozen(self):
        config = GameModeConfig()
        with pytest.raises(ValidationError):
            config.name = "Other"

    def test_max_level_bounded(self):
        assert LevelsConfig(max_level=1).max_level == 1
        with pytest.raises(ValidationError, match="less than or equal to 10"):
            LevelsConfig(max_level=12)

    def test_speed_variation_order(self):
        with pytest.raises(ValidationError):
            LevelsConfig(speed_variation=(1.5, 1.0))

    def test_speed_variation_positive(self):
        with pytest.raises(ValidationError):
            LevelsConfig(speed_variation=(0.0, 1.0))

    def test_bonus_group_range(self):
        with pytest.raises(ValidationError):
            BonusSpawnConfig(group_min=6, group_max=3)

    def test_minion_level_must_exist(self):
        with pytest.raises(ValidationError):
            GameModeConfig(levels=LevelsConfig(max_level=5), boss=BossConfig(minion_level=9))

    def test_short_game(self):
        config = GameModeConfig(levels=LevelsConfig(max_level=3), boss=BossConfig(minion_level=2))
        assert config.levels.max_level == 3
