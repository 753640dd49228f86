"""
Level/wave state machine.

Phases run COUNTDOWN -> PLAYING -> (TRANSITIONING <-> PLAYING) -> COMPLETE.
The machine owns the current level, the level timer, the countdown value,
the transition and the epoch. It never touches butterflies; the session
acts on what the machine reports (clear the live set, spawn a wave, build
the final record).

The epoch increments on every phase change. Deferred events tagged with an
older epoch are stale and never run.
"""

from dataclasses import dataclass, field
from typing import Optional

from butterfly_catch.logging import get_logger
from butterfly_catch.models import (
    CompletionCause,
    GameModeConfig,
    GamePhase,
    TransitionData,
)

log = get_logger('levels')


@dataclass
class LevelTransition:
    """The interstitial between two levels.

    ``elapsed`` accumulates simulated time, so a paused or slow game
    stretches the transition with it.
    """
    to_level: int
    duration: float
    cause: CompletionCause
    fast: bool = False
    elapsed: float = 0.0
    completed: bool = False

    @property
    def progress(self) -> float:
        """Fraction elapsed, clamped to [0, 1]."""
        return min(max(self.elapsed / self.duration, 0.0), 1.0)

    def to_data(self) -> TransitionData:
        return TransitionData(
            progress=self.progress,
            to_level=self.to_level,
            cause=self.cause,
            fast=self.fast,
        )


@dataclass
class WaveState:
    """Mutable level state, owned by one session."""
    phase: GamePhase = GamePhase.IDLE
    current_level: int = 1
    level_timer: float = 0.0
    countdown_value: int = 0
    transition: Optional[LevelTransition] = None
    epoch: int = 0
    boss_defeated: bool = False
    last_cause: Optional[CompletionCause] = field(default=None)


class LevelStateMachine:
    """Phase transitions and the level completion rules.

    Examples:
        >>> machine = LevelStateMachine(GameModeConfig())
        >>> machine.start_countdown()
        >>> machine.state.phase
        <GamePhase.COUNTDOWN: 'countdown'>
        >>> [machine.step_countdown() for _ in range(3)]
        [False, False, True]
        >>> machine.begin_playing()
        >>> machine.level_complete(CompletionCause.CLEARED)
        <GamePhase.TRANSITIONING: 'transitioning'>
        >>> machine.state.current_level
        2
    """

    def __init__(self, config: GameModeConfig):
        self.config = config
        self.state = WaveState()

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def phase(self) -> GamePhase:
        return self.state.phase

    @property
    def epoch(self) -> int:
        return self.state.epoch

    @property
    def level(self) -> int:
        return self.state.current_level

    @property
    def time_remaining(self) -> float:
        """Seconds left before the level time limit, never negative."""
        return max(self.config.levels.level_time_limit - self.state.level_timer, 0.0)

    def _enter(self, phase: GamePhase) -> None:
        self.state.phase = phase
        self.state.epoch += 1
        log.trace("Phase %s (epoch %d)", phase.value, self.state.epoch)

    # =========================================================================
    # Countdown
    # =========================================================================

    def start_countdown(self) -> None:
        """Reset for a new game and enter COUNTDOWN.

        The epoch carries over from the previous game so anything it left
        scheduled stays stale.
        """
        self.state = WaveState(
            countdown_value=self.config.countdown.seconds,
            epoch=self.state.epoch,
        )
        self._enter(GamePhase.COUNTDOWN)

    def step_countdown(self) -> bool:
        """Count down one step. Returns True once the countdown reaches zero."""
        if self.state.phase != GamePhase.COUNTDOWN:
            return False
        self.state.countdown_value = max(self.state.countdown_value - 1, 0)
        return self.state.countdown_value == 0

    # =========================================================================
    # Playing
    # =========================================================================

    def begin_playing(self) -> None:
        """Enter PLAYING with a fresh level timer."""
        self.state.level_timer = 0.0
        self.state.boss_defeated = False
        self.state.transition = None
        self._enter(GamePhase.PLAYING)
        log.info("Level %d started", self.state.current_level)

    def advance_timer(self, dt: float) -> None:
        if self.state.phase == GamePhase.PLAYING:
            self.state.level_timer += dt

    def mark_boss_defeated(self) -> None:
        self.state.boss_defeated = True

    def completion_cause(self, live_count: int, pending_inserts: int) -> Optional[CompletionCause]:
        """Check whether the current level is over.

        A defeated boss ends the level at once (when the mode says so).
        Otherwise nothing completes until there are live butterflies or the
        progression grace has passed; after that the level ends at the time
        limit, or when the screen is empty with nothing left to insert.

        Args:
            live_count: Butterflies currently live
            pending_inserts: Insertions still scheduled for this epoch

        Returns:
            Why the level is complete, or None if it is not
        """
        if self.state.phase != GamePhase.PLAYING:
            return None

        if self.state.boss_defeated and self.config.boss.defeat_completes_level:
            return CompletionCause.BOSS_DEFEATED

        levels = self.config.levels
        timer = self.state.level_timer
        if live_count == 0 and timer < levels.progression_grace:
            return None

        if timer >= levels.level_time_limit:
            return CompletionCause.TIME_LIMIT
        if live_count == 0 and pending_inserts == 0:
            return CompletionCause.CLEARED
        return None

    def level_complete(
        self,
        cause: CompletionCause = CompletionCause.MANUAL,
        fast_transition: bool = False,
    ) -> Optional[GamePhase]:
        """Finish the current level.

        Ignored unless PLAYING, so calling it twice in a row has no extra
        effect. Below the last level this moves to the next level and starts
        the transition; on the last level it completes the game.

        Returns:
            The phase entered, or None if the call was ignored
        """
        if self.state.phase != GamePhase.PLAYING:
            return None

        self.state.last_cause = cause
        finished = self.state.current_level

        if finished >= self.config.levels.max_level:
            self.game_complete()
            return GamePhase.COMPLETE

        self.state.current_level += 1
        self.state.level_timer = 0.0
        self.state.transition = LevelTransition(
            to_level=self.state.current_level,
            duration=self.config.transition.duration,
            cause=cause,
            fast=fast_transition,
        )
        self._enter(GamePhase.TRANSITIONING)
        log.info("Level %d complete (%s), next level %d",
                 finished, cause.value, self.state.current_level)
        return GamePhase.TRANSITIONING

    # =========================================================================
    # Transition and completion
    # =========================================================================

    def advance_transition(self, dt: float) -> bool:
        """Advance the transition. Returns True on the tick it finishes.

        Finishing starts the next level (PLAYING); the completed flag keeps
        that from happening twice.
        """
        transition = self.state.transition
        if self.state.phase != GamePhase.TRANSITIONING or transition is None:
            return False

        transition.elapsed += dt
        if transition.progress >= 1.0 and not transition.completed:
            transition.completed = True
            self.begin_playing()
            return True
        return False

    def game_complete(self) -> None:
        """Enter the terminal COMPLETE phase."""
        if self.state.phase == GamePhase.COMPLETE:
            return
        self.state.transition = None
        self._enter(GamePhase.COMPLETE)
        log.info("Game complete at level %d", self.state.current_level)
