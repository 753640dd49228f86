"""
End-to-end gameplay scenarios driven through the public session surface.

Each scenario plays a seeded game with 0.25 s frames:
- quick clear: catching a whole wave ends the level once the grace passes
- timeout: the level ends at its time limit and the screen is cleared
- boss defeat: catching the queen ends the game exactly once
- countdown gating and level monotonicity across a full run
"""

import pytest
from pydantic import ValidationError

from butterfly_catch.game.session import GameSession
from butterfly_catch.models import CompletionCause, GamePhase, Resolution

STEP = 0.25


def finish_levels_until(session, level):
    """Complete levels by hand until the session is playing the given level."""
    while session.level < level:
        session.level_complete()
        for _ in range(4):
            session.tick(STEP)
    assert session.phase == GamePhase.PLAYING


class TestQuickClear:
    """Level 3: catch all 15 quickly and the game moves on to level 4."""

    def test_quick_clear(self, playing_session):
        session = playing_session
        finish_levels_until(session, 3)
        for _ in range(3):
            session.tick(STEP)
        assert len(session.butterflies) == 15
        assert session.pending_insertions == 0

        clicks = 0
        while session.butterflies and clicks < 50:
            target = session.butterflies[0]
            assert session.handle_click(target.x, target.y) is not None
            clicks += 1

        assert clicks == 15
        assert session.score == 15 * 30
        assert session.stats.butterfly_counts[3] == 15

        # Empty, but inside the 2 s grace: the level is not over yet
        assert session.phase == GamePhase.PLAYING

        for _ in range(7):
            session.tick(STEP)

        state = session.get_state()
        assert state.phase == GamePhase.TRANSITIONING
        assert state.level == 4
        assert state.transition.cause == CompletionCause.CLEARED


class TestTimeout:
    """Level 1: nobody catches anything, the time limit ends the level."""

    def test_timeout(self, config, advance):
        # Large canvas so no butterfly crosses and leaves before the limit
        session = GameSession(config=config, bounds=Resolution(width=4000, height=4000), seed=8)
        session.start_game()
        advance(session, 3.0)

        for _ in range(39):
            session.tick(STEP)
        assert session.phase == GamePhase.PLAYING
        assert session.level == 1
        assert len(session.butterflies) > 0

        session.tick(STEP)
        state = session.get_state()
        assert state.phase == GamePhase.TRANSITIONING
        assert state.level == 2
        assert state.live_entities == 0
        assert state.level_timer == 0.0
        assert state.transition.cause == CompletionCause.TIME_LIMIT


class TestBossDefeat:
    """Level 10: five hits on the queen end the game, once."""

    def test_boss_defeat(self, playing_session):
        session = playing_session
        records = []
        session.add_completion_listener(records.append)

        finish_levels_until(session, 10)
        for _ in range(4):
            session.tick(STEP)

        queens = [b for b in session.butterflies if b.is_boss]
        assert len(queens) == 1
        queen = queens[0]
        score_before = session.score

        for _ in range(4):
            assert session.handle_click(queen.x, queen.y) is None
        result = session.handle_click(queen.x, queen.y)
        assert result is not None
        assert result.is_boss
        assert session.score == score_before + 100
        assert len(session.butterflies) > 0  # minions still flying

        session.tick(STEP)
        assert session.phase == GamePhase.COMPLETE
        assert len(records) == 1
        assert session.butterflies == ()

        for _ in range(20):
            session.tick(STEP)
        assert len(records) == 1
        assert session.butterflies == ()

        record = records[0]
        assert record.score == session.score
        assert record.counts_by_level()[10] == 1
        with pytest.raises(ValidationError):
            record.score = 0


class TestCountdownGating:
    """Nothing moves or scores until the countdown ends."""

    def test_countdown_gating(self, session):
        session.start_game()
        for expected in (3, 3, 3, 3, 2, 2, 2, 2, 1, 1, 1):
            assert session.get_state().countdown == expected
            assert session.handle_click(400, 300) is None
            assert session.butterflies == ()
            assert session.get_state().level_timer == 0.0
            session.tick(STEP)

        session.tick(STEP)
        assert session.phase == GamePhase.PLAYING


class TestMonotonicLevels:
    """Levels only go up, one at a time, until the game completes."""

    def test_full_run(self, session):
        session.start_game()
        seen = [session.level]
        frames = 0
        while session.phase != GamePhase.COMPLETE and frames < 2000:
            session.tick(STEP)
            if session.phase == GamePhase.PLAYING and session.get_state().level_timer >= 1.0:
                session.level_complete()
            seen.append(session.level)
            frames += 1

        assert session.phase == GamePhase.COMPLETE
        assert seen[-1] == 10
        for previous, current in zip(seen, seen[1:]):
            assert current - previous in (0, 1)
        assert session.record is not None
