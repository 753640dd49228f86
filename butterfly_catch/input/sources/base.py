"""
Interface every pointer device implements to drive the net.
"""

from abc import ABC, abstractmethod
from typing import List

from butterfly_catch.input.input_event import InputEvent


class InputSource(ABC):
    """A device that turns raw input into InputEvents.

    Sources buffer events between polls. update() gives sources that need
    to read a device each frame a hook; push-driven sources can ignore it.
    """

    @abstractmethod
    def poll_events(self) -> List[InputEvent]:
        """Return the events buffered since the last poll, oldest first, and
        empty the buffer."""

    def update(self, dt: float) -> None:
        """Read the device; called once per frame before polling."""

    def reset(self) -> None:
        """Drop anything buffered, e.g. clicks made on the summary screen."""
        self.poll_events()
