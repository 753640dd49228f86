"""
Mouse and touch screen input.

Left clicks and finger taps are catch attempts (CLICK); mouse and finger
motion move the net (MOVE).
"""

import time
from typing import List, Tuple

import pygame

from butterfly_catch.input.input_event import InputEvent
from butterfly_catch.input.sources.base import InputSource
from butterfly_catch.models import EventType, Vector2D

# Only these are taken off the pygame queue; everything else stays for the engine
POINTER_EVENT_TYPES = (
    pygame.MOUSEBUTTONDOWN,
    pygame.MOUSEMOTION,
    pygame.FINGERDOWN,
    pygame.FINGERMOTION,
)


class PointerInputSource(InputSource):
    """Reads pointer events from the pygame queue.

    Finger coordinates come normalized to [0, 1] and are scaled to
    ``screen_size``. SDL also emits a mouse event for every touch; those
    carry ``touch=True`` and are skipped so a tap counts once.

    Examples:
        >>> source = PointerInputSource((800, 600))
        >>> source.process_event(pygame.event.Event(
        ...     pygame.FINGERDOWN, x=0.5, y=0.5, finger_id=0, touch_id=0))
        >>> print(source.poll_events()[0].position)
        Point2D(x=400.00, y=300.00)
    """

    def __init__(self, screen_size: Tuple[int, int]):
        self.screen_size = screen_size
        self._pending: List[InputEvent] = []

    def poll_events(self) -> List[InputEvent]:
        events, self._pending = self._pending, []
        return events

    def update(self, dt: float) -> None:
        for event in pygame.event.get(POINTER_EVENT_TYPES):
            self.process_event(event)

    def process_event(self, event: pygame.event.Event) -> None:
        """Buffer one pygame event if it is pointer input we care about."""
        if event.type == pygame.MOUSEBUTTONDOWN:
            if event.button == 1 and not getattr(event, 'touch', False):
                self._push(event.pos, EventType.CLICK)
        elif event.type == pygame.MOUSEMOTION:
            if not getattr(event, 'touch', False):
                self._push(event.pos, EventType.MOVE)
        elif event.type in (pygame.FINGERDOWN, pygame.FINGERMOTION):
            width, height = self.screen_size
            kind = EventType.CLICK if event.type == pygame.FINGERDOWN else EventType.MOVE
            self._push((event.x * width, event.y * height), kind)

    def _push(self, pos: Tuple[float, float], kind: EventType) -> None:
        self._pending.append(InputEvent(
            position=Vector2D(x=float(pos[0]), y=float(pos[1])),
            timestamp=time.monotonic(),
            event_type=kind,
        ))
