"""
Tests for the InputEvent model.
"""

import pytest
from pydantic import ValidationError

from butterfly_catch.input import InputEvent
from butterfly_catch.models import EventType, Vector2D


def test_valid_event():
    event = InputEvent(position=Vector2D(x=100.0, y=200.0), timestamp=1.5,
                       event_type=EventType.CLICK)
    assert event.position.x == 100.0
    assert event.event_type == EventType.CLICK


def test_negative_timestamp_rejected():
    with pytest.raises(ValidationError, match="greater than or equal to 0"):
        InputEvent(position=Vector2D(x=0.0, y=0.0), timestamp=-0.1,
                   event_type=EventType.MOVE)


def test_event_type_from_string():
    event = InputEvent(position=Vector2D(x=0.0, y=0.0), timestamp=0.0, event_type="move")
    assert event.event_type == EventType.MOVE


def test_frozen():
    event = InputEvent(position=Vector2D(x=0.0, y=0.0), timestamp=0.0,
                       event_type=EventType.MOVE)
    with pytest.raises(ValidationError):
        event.timestamp = 2.0


def test_str_and_is_click():
    event = InputEvent(position=Vector2D(x=100.0, y=200.0), timestamp=1.5,
                       event_type=EventType.CLICK)
    assert event.is_click
    assert str(event) == "click at (100, 200) t=1.500"
