"""
Pointer input as seen by the game: a position on screen, when it happened
and whether it was a catch attempt or just the net following the pointer.
"""

from pydantic import BaseModel, ConfigDict, Field

from butterfly_catch.models import EventType, Vector2D


class InputEvent(BaseModel):
    """One pointer event in screen pixels.

    Attributes:
        position: Pointer position
        timestamp: Monotonic clock reading in seconds
        event_type: CLICK tries a catch, MOVE only moves the net

    Examples:
        >>> tap = InputEvent(position=Vector2D(x=100.0, y=200.0),
        ...                  timestamp=1.5, event_type=EventType.CLICK)
        >>> tap.is_click
        True
        >>> print(tap)
        click at (100, 200) t=1.500
    """
    position: Vector2D
    timestamp: float = Field(..., ge=0)
    event_type: EventType

    model_config = ConfigDict(frozen=True)

    @property
    def is_click(self) -> bool:
        return self.event_type == EventType.CLICK

    def __str__(self) -> str:
        return (f"{self.event_type.value} at ({self.position.x:.0f}, {self.position.y:.0f}) "
                f"t={self.timestamp:.3f}")
