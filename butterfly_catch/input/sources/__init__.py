"""Input source implementations."""

from butterfly_catch.input.sources.base import InputSource
from butterfly_catch.input.sources.mouse import PointerInputSource

__all__ = [
    'InputSource',
    'PointerInputSource',
]
