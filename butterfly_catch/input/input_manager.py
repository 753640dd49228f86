"""
Front door for pointer input: owns the active source and remembers where
the pointer was last seen.
"""

from typing import List, Optional

from butterfly_catch.input.input_event import InputEvent
from butterfly_catch.input.sources.base import InputSource
from butterfly_catch.models import Point2D


class InputManager:
    """Polls the active input source once per frame.

    The source can be swapped at runtime (mouse while developing, a touch
    screen on the kiosk). With no source, polling yields nothing.

    Examples:
        >>> from butterfly_catch.input.sources.mouse import PointerInputSource
        >>> manager = InputManager(PointerInputSource((1280, 720)))
        >>> events = manager.poll(0.016)
    """

    def __init__(self, source: Optional[InputSource] = None):
        self._source: Optional[InputSource] = None
        self.last_position: Optional[Point2D] = None
        if source is not None:
            self.source = source

    @property
    def source(self) -> Optional[InputSource]:
        return self._source

    @source.setter
    def source(self, source: InputSource) -> None:
        if not isinstance(source, InputSource):
            raise TypeError(f"Expected an InputSource, got {type(source).__name__}")
        self._source = source

    def poll(self, dt: float = 0.0) -> List[InputEvent]:
        """Update the source and return this frame's events in order."""
        if self._source is None:
            return []
        self._source.update(dt)
        events = self._source.poll_events()
        if events:
            self.last_position = events[-1].position
        return events

    def discard_pending(self) -> None:
        """Throw away input that arrived before a new game started."""
        if self._source is not None:
            self._source.reset()
