"""
Game session - the single per-frame driver of Butterfly Catch.

GameSession ties the pieces together: the level state machine decides the
phase, the scheduler runs staggered insertions and countdown steps, the
spawner creates butterflies, and the score tracker keeps the tally. Only
tick() advances time, and every mutation of the live butterflies goes
through the session.

The session has no display dependency; the engine feeds it pointer input
and draws its snapshots.

Examples:
    >>> session = GameSession(seed=7)
    >>> session.start_game()
    >>> session.phase
    <GamePhase.COUNTDOWN: 'countdown'>
    >>> for _ in range(12):
    ...     session.tick(0.25)
    >>> session.phase
    <GamePhase.PLAYING: 'playing'>
"""

import os
import random
from typing import Callable, Iterable, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from butterfly_catch import config as settings
from butterfly_catch.errors import ContractViolation
from butterfly_catch.game.butterfly import Butterfly
from butterfly_catch.game.levels import LevelStateMachine
from butterfly_catch.game.pursuer import Pursuer
from butterfly_catch.game.scheduler import Scheduler
from butterfly_catch.game.scoring import ScoreTracker
from butterfly_catch.game.spawner import PlannedSpawn, Spawner
from butterfly_catch.logging import get_logger
from butterfly_catch.models import (
    CompletionCause,
    EventType,
    GameModeConfig,
    GamePhase,
    GameRecord,
    GameSnapshot,
    Point2D,
    Resolution,
    ScoreData,
)

log = get_logger('session')

CompletionListener = Callable[[GameRecord], None]


class CatchResult(BaseModel):
    """Outcome of a click that caught a butterfly.

    Attributes:
        level: Level of the caught butterfly
        points: Points awarded for it
        position: Where it was caught
        is_boss: True if it was the queen
        score: Total score after the catch
    """
    level: int = Field(..., ge=1)
    points: int = Field(..., ge=0)
    position: Point2D
    is_boss: bool = False
    score: int = Field(..., ge=0)

    model_config = ConfigDict(frozen=True)


def _random_seed() -> int:
    return int.from_bytes(os.urandom(8), 'big')


class GameSession:
    """One player's game: state machine, live butterflies, score and net.

    Per tick, in PLAYING: due deferred events run first, then the level
    timer advances, butterflies move and leave, the completion rules are
    checked, and finally a bonus group may spawn. In COUNTDOWN and
    TRANSITIONING only that sub-state advances.
    """

    def __init__(
        self,
        config: Optional[GameModeConfig] = None,
        bounds: Optional[Resolution] = None,
        seed: Optional[int] = None,
        strict: Optional[bool] = None,
    ):
        """Create an idle session. Call start_game() to begin.

        Args:
            config: Game mode tuning (classic when None)
            bounds: Canvas size (from SCREEN_WIDTH/SCREEN_HEIGHT when None)
            seed: RNG seed used by every game of this session; when None
                (and BUTTERFLY_SEED is unset) each game draws a fresh one
            strict: Raise ContractViolation on bad input instead of
                clamping (BUTTERFLY_STRICT_CONTRACTS when None)
        """
        self.config = config if config is not None else GameModeConfig()
        self.bounds = bounds if bounds is not None else Resolution(
            width=settings.SCREEN_WIDTH, height=settings.SCREEN_HEIGHT)
        self.strict = settings.STRICT_CONTRACTS if strict is None else strict

        self._fixed_seed = seed if seed is not None else settings.SEED
        self._seed = self._fixed_seed if self._fixed_seed is not None else _random_seed()
        self.rng = random.Random(self._seed)

        self.machine = LevelStateMachine(self.config)
        self.scheduler = Scheduler()
        self.spawner = Spawner(self.bounds, self.config, self.rng, strict=self.strict)
        self.pursuer = Pursuer(self.bounds, self.config.pursuer.catch_radius)

        self._butterflies: List[Butterfly] = []
        self._scores = self._new_score_tracker()
        self._record: Optional[GameRecord] = None
        self._listeners: List[CompletionListener] = []

    def _new_score_tracker(self) -> ScoreTracker:
        return ScoreTracker(max_level=self.config.levels.max_level,
                            points_per_level=self.config.scoring.points_per_level)

    # =========================================================================
    # Read-only surface
    # =========================================================================

    @property
    def phase(self) -> GamePhase:
        return self.machine.phase

    @property
    def level(self) -> int:
        return self.machine.level

    @property
    def score(self) -> int:
        return self._scores.get_stats().score

    @property
    def stats(self) -> ScoreData:
        return self._scores.get_stats()

    @property
    def butterflies(self) -> Tuple[Butterfly, ...]:
        """Live butterflies in insertion order."""
        return tuple(self._butterflies)

    @property
    def record(self) -> Optional[GameRecord]:
        """Final record once the game is complete, else None."""
        return self._record

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def pending_insertions(self) -> int:
        """Scheduled events still waiting in the current epoch."""
        return self.scheduler.pending(self.machine.epoch)

    def add_completion_listener(self, callback: CompletionListener) -> None:
        """Register a callback that receives the GameRecord once per game."""
        self._listeners.append(callback)

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def start_game(self) -> None:
        """Reset everything and begin the countdown."""
        if self._fixed_seed is None:
            self._seed = _random_seed()
        self.rng.seed(self._seed)

        self.scheduler.reset()
        self._butterflies.clear()
        self._scores = self._new_score_tracker()
        self._record = None

        self.machine.start_countdown()
        log.info("New game (mode=%s, seed=%d)", self.config.name, self._seed)

        countdown = self.config.countdown
        if countdown.seconds == 0:
            self._start_playing()
            return

        epoch = self.machine.epoch
        for step in range(1, countdown.seconds + 1):
            self.scheduler.schedule(step * countdown.interval, epoch,
                                    self._countdown_step, label="countdown")

    def _countdown_step(self) -> None:
        if self.machine.step_countdown():
            self._start_playing()

    def _start_playing(self) -> None:
        self.machine.begin_playing()
        self._spawn_wave()

    def _spawn_wave(self) -> None:
        epoch = self.machine.epoch
        for plan in self.spawner.spawn_wave(self.machine.level):
            if plan.delay <= 0:
                self._insert(plan.butterfly)
            else:
                self.scheduler.schedule(plan.delay, epoch, self._insertion(plan),
                                        label="insert")

    def _insertion(self, plan: PlannedSpawn) -> Callable[[], None]:
        return lambda: self._insert(plan.butterfly)

    def _insert(self, butterfly: Butterfly) -> None:
        self._butterflies.append(butterfly)

    def level_complete(self, fast_transition: bool = False) -> None:
        """Finish the current level now. Ignored unless PLAYING."""
        self._complete_level(CompletionCause.MANUAL, fast_transition)

    def _complete_level(self, cause: CompletionCause, fast_transition: bool) -> None:
        entered = self.machine.level_complete(cause, fast_transition)
        if entered is None:
            return

        self._butterflies.clear()
        self.scheduler.discard_stale(self.machine.epoch)

        if entered == GamePhase.COMPLETE:
            self._finish_game()

    def _finish_game(self) -> None:
        if self._record is not None:
            return
        self._record = self._scores.to_record(seed=self._seed)
        log.info("Final score %d, %d butterflies caught",
                 self._record.score, self._record.total_caught)
        for callback in self._listeners:
            callback(self._record)

    # =========================================================================
    # Per-frame update
    # =========================================================================

    def _sanitize_dt(self, dt: float) -> float:
        if dt < 0:
            if self.strict:
                raise ContractViolation(f"dt must be non-negative, got {dt}")
            log.debug("Clamped negative dt %.4f to 0", dt)
            return 0.0
        if dt > self.config.max_frame_dt:
            log.debug("Clamped long frame %.3fs to %.3fs", dt, self.config.max_frame_dt)
            return self.config.max_frame_dt
        return dt

    def tick(self, dt: float) -> None:
        """Advance the game by dt seconds of simulated time.

        Raises:
            ContractViolation: If dt is negative and the session is strict
        """
        dt = self._sanitize_dt(dt)

        phase = self.machine.phase
        if phase in (GamePhase.IDLE, GamePhase.COMPLETE):
            return

        self.scheduler.advance(dt)
        self.scheduler.drain(lambda: self.machine.epoch)

        if phase == GamePhase.COUNTDOWN:
            return

        if phase == GamePhase.TRANSITIONING:
            if self.machine.advance_transition(dt):
                self._spawn_wave()
            return

        if self.machine.phase != GamePhase.PLAYING:
            return

        self.machine.advance_timer(dt)
        self._update_butterflies(dt)

        cause = self.machine.completion_cause(len(self._butterflies), self.pending_insertions)
        if cause is not None:
            self._complete_level(cause, fast_transition=True)
            return

        self._maybe_spawn_bonus()

    def _update_butterflies(self, dt: float) -> None:
        width, height = self.bounds.width, self.bounds.height
        for butterfly in self._butterflies:
            butterfly.update(dt, width, height)

        before = len(self._butterflies)
        self._butterflies = [b for b in self._butterflies if not b.should_remove]
        if len(self._butterflies) != before:
            log.trace("%d butterflies left the screen", before - len(self._butterflies))

    def _maybe_spawn_bonus(self) -> None:
        bonus = self.config.bonus
        if len(self._butterflies) >= bonus.max_live:
            return
        if self.rng.random() >= bonus.chance_per_frame:
            return
        self._butterflies.extend(self.spawner.spawn_bonus_group(self.machine.level))

    # =========================================================================
    # Input
    # =========================================================================

    def move_pursuer(self, x: float, y: float) -> None:
        self.pursuer.move_to(x, y)

    def handle_click(self, x: float, y: float) -> Optional[CatchResult]:
        """Try to catch a butterfly at (x, y).

        Newest butterflies are tested first and at most one is caught per
        click. A boss hit that does not finish her is not a catch, so the
        search continues past her.

        Returns:
            The catch, or None if nothing was caught
        """
        if self.machine.phase != GamePhase.PLAYING:
            return None

        radius = self.pursuer.catch_radius
        for i in range(len(self._butterflies) - 1, -1, -1):
            butterfly = self._butterflies[i]
            if not butterfly.check_catch(x, y, radius):
                continue

            del self._butterflies[i]
            self._scores = self._scores.record_catch(butterfly.level)
            if butterfly.is_boss:
                self.machine.mark_boss_defeated()
                log.info("Queen caught")

            return CatchResult(
                level=butterfly.level,
                points=butterfly.level * self.config.scoring.points_per_level,
                position=Point2D(x=butterfly.x, y=butterfly.y),
                is_boss=butterfly.is_boss,
                score=self.score,
            )
        return None

    def handle_input(self, events: Iterable) -> List[CatchResult]:
        """Apply a frame's input events in order.

        MOVE and CLICK both move the net; CLICK also tries a catch.
        Processing stops as soon as the phase changes underneath.

        Args:
            events: InputEvents from the input manager

        Returns:
            Catches made, in order
        """
        epoch = self.machine.epoch
        catches = []
        for event in events:
            if self.machine.epoch != epoch:
                break
            self.move_pursuer(event.position.x, event.position.y)
            if event.event_type == EventType.CLICK:
                result = self.handle_click(event.position.x, event.position.y)
                if result is not None:
                    catches.append(result)
        return catches

    # =========================================================================
    # Views
    # =========================================================================

    def get_state(self) -> GameSnapshot:
        """Immutable snapshot of everything a renderer or test needs."""
        state = self.machine.state
        transition = None
        if state.phase == GamePhase.TRANSITIONING and state.transition is not None:
            transition = state.transition.to_data()

        return GameSnapshot(
            phase=state.phase,
            level=state.current_level,
            score=self.score,
            level_timer=state.level_timer,
            time_remaining=self.machine.time_remaining,
            countdown=state.countdown_value if state.phase == GamePhase.COUNTDOWN else 0,
            transition=transition,
            butterflies=tuple(b.to_data() for b in self._butterflies),
            pursuer=self.pursuer.position,
            pursuer_radius=self.pursuer.catch_radius,
            epoch=state.epoch,
        )
