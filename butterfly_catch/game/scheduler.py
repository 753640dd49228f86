"""Scheduler - epoch-tagged deferred events on the simulated clock."""

import heapq
import itertools
from dataclasses import dataclass, field
from typing import Callable, List


@dataclass(order=True)
class ScheduledEvent:
    """A deferred mutation that runs once its due time is reached.

    Ordered by (due_at, sequence) so events due at the same moment run in
    the order they were scheduled.
    """
    due_at: float
    sequence: int
    epoch: int = field(compare=False)
    action: Callable[[], None] = field(compare=False)
    label: str = field(default="", compare=False)


class Scheduler:
    """Runs deferred events against a simulated clock.

    Every event carries the epoch that was current when it was scheduled.
    drain() only runs events whose epoch still matches; anything issued by
    a superseded phase (a staggered spawn from the previous level, a
    countdown step from an abandoned game) is dropped without running.

    Examples:
        >>> fired = []
        >>> scheduler = Scheduler()
        >>> _ = scheduler.schedule(0.5, epoch=1, action=lambda: fired.append("a"))
        >>> _ = scheduler.schedule(0.5, epoch=0, action=lambda: fired.append("stale"))
        >>> scheduler.advance(0.5)
        >>> scheduler.drain(lambda: 1)
        1
        >>> fired
        ['a']
    """

    def __init__(self) -> None:
        self._queue: List[ScheduledEvent] = []
        self._sequence = itertools.count()
        self._now = 0.0

    @property
    def now(self) -> float:
        """Simulated seconds since the scheduler was created or reset."""
        return self._now

    def __len__(self) -> int:
        return len(self._queue)

    def schedule(
        self,
        delay: float,
        epoch: int,
        action: Callable[[], None],
        label: str = "",
    ) -> ScheduledEvent:
        """Queue an action to run delay seconds from now.

        A zero delay runs on the next drain().
        """
        event = ScheduledEvent(
            due_at=self._now + max(delay, 0.0),
            sequence=next(self._sequence),
            epoch=epoch,
            action=action,
            label=label,
        )
        heapq.heappush(self._queue, event)
        return event

    def advance(self, dt: float) -> None:
        """Move the simulated clock forward."""
        self._now += dt

    def drain(self, current_epoch: Callable[[], int]) -> int:
        """Run every due event whose epoch is still current.

        The epoch is re-read before each event, so an action that changes
        phase invalidates the events queued behind it in the same drain.

        Args:
            current_epoch: Returns the state machine's epoch

        Returns:
            Number of events that ran
        """
        ran = 0
        while self._queue and self._queue[0].due_at <= self._now:
            event = heapq.heappop(self._queue)
            if event.epoch != current_epoch():
                continue
            event.action()
            ran += 1
        return ran

    def pending(self, epoch: int) -> int:
        """Number of queued events tagged with epoch."""
        return sum(1 for event in self._queue if event.epoch == epoch)

    def discard_stale(self, epoch: int) -> int:
        """Drop queued events not tagged with epoch. Returns how many."""
        before = len(self._queue)
        self._queue = [event for event in self._queue if event.epoch == epoch]
        heapq.heapify(self._queue)
        return before - len(self._queue)

    def reset(self) -> None:
        """Drop everything and rewind the clock."""
        self._queue.clear()
        self._now = 0.0
