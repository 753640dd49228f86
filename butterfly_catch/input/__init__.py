"""Pointer and touch input for Butterfly Catch."""
from butterfly_catch.input.input_event import InputEvent
from butterfly_catch.input.input_manager import InputManager
from butterfly_catch.input.sources import InputSource, PointerInputSource

__all__ = [
    'InputEvent',
    'InputManager',
    'InputSource',
    'PointerInputSource',
]
