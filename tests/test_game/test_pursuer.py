"""
Tests for the player's net.
"""

from butterfly_catch.game.pursuer import Pursuer
from butterfly_catch.models import Point2D, Resolution


def test_starts_at_center():
    net = Pursuer(Resolution(width=800, height=600))
    assert net.position == Point2D(x=400.0, y=300.0)
    assert net.catch_radius == 40.0


def test_move_to():
    net = Pursuer(Resolution(width=800, height=600), catch_radius=55.0)
    net.move_to(12, 34)
    assert (net.x, net.y) == (12.0, 34.0)
    assert net.catch_radius == 55.0
