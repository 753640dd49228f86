"""
Score tracking for Butterfly Catch.

This module implements the ScoreTracker class, which manages the score and
per-level catch tally using an immutable state pattern. All score operations
return new instances rather than modifying existing state.

Examples:
    >>> tracker = ScoreTracker(max_level=10)
    >>> tracker2 = tracker.record_catch(3)
    >>> tracker2.get_stats().score
    30
    >>> tracker.get_stats().score  # Original unchanged
    0
"""

from typing import Optional

from butterfly_catch.models import GameRecord, ScoreData


class ScoreTracker:
    """Tracks score and catches per level with an immutable state pattern.

    Uses the ScoreData Pydantic model for validated, immutable score state.

    Attributes:
        _score: Internal ScoreData model (private, immutable)
        points_per_level: A level L butterfly is worth L * points_per_level

    Examples:
        >>> tracker = ScoreTracker(max_level=3)
        >>> tracker = tracker.record_catch(1).record_catch(2).record_catch(2)
        >>> tracker.get_stats().butterfly_counts
        {1: 1, 2: 2, 3: 0}
        >>> tracker.get_stats().total_caught
        3
    """

    def __init__(
        self,
        score: Optional[ScoreData] = None,
        max_level: int = 10,
        points_per_level: int = 10,
    ):
        """Initialize score tracker.

        Args:
            score: Initial score data. If None, starts with zeros.
            max_level: Number of levels to keep counts for
            points_per_level: Points per level of the caught butterfly
        """
        if score is None:
            score = ScoreData(score=0, counts=(0,) * max_level)
        self._score = score
        self.points_per_level = points_per_level

    def record_catch(self, level: int) -> 'ScoreTracker':
        """Record a caught butterfly of the given level.

        Returns a new ScoreTracker instance with:
        - score increased by level * points_per_level
        - counts[level - 1] incremented by 1

        Levels past the tracked range extend the tally rather than fail.
        """
        counts = list(self._score.counts)
        if level > len(counts):
            counts.extend([0] * (level - len(counts)))
        counts[level - 1] += 1

        new_score = ScoreData(
            score=self._score.score + level * self.points_per_level,
            counts=tuple(counts),
        )
        return ScoreTracker(new_score, points_per_level=self.points_per_level)

    def get_stats(self) -> ScoreData:
        """Get current score data.

        Returns:
            Immutable ScoreData instance with current statistics
        """
        return self._score

    def to_record(self, seed: Optional[int] = None) -> GameRecord:
        """Build the final, read-only record of the run."""
        return GameRecord(
            score=self._score.score,
            per_level_counts=self._score.counts,
            seed=seed,
        )

    def __repr__(self) -> str:
        """Developer-friendly representation."""
        return f"ScoreTracker({self._score!r})"

    def __str__(self) -> str:
        """User-friendly string representation."""
        return f"Score: {self._score.score} ({self._score.total_caught} caught)"
