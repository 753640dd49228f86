"""
The player's net.
"""

from butterfly_catch.models import Point2D, Resolution


class Pursuer:
    """Tracks the pointer/touch position and carries the net's catch radius.

    Examples:
        >>> net = Pursuer(Resolution(width=800, height=600))
        >>> print(net.position)
        Point2D(x=400.00, y=300.00)
        >>> net.move_to(10.0, 20.0)
        >>> (net.x, net.y)
        (10.0, 20.0)
    """

    def __init__(self, bounds: Resolution, catch_radius: float = 40.0):
        """Start the net at the center of the screen.

        Args:
            bounds: Canvas size
            catch_radius: Radius added to a butterfly's own catch radius
        """
        self.catch_radius = catch_radius
        self.x = bounds.width / 2
        self.y = bounds.height / 2

    def move_to(self, x: float, y: float) -> None:
        """Follow the latest pointer or touch position."""
        self.x = float(x)
        self.y = float(y)

    @property
    def position(self) -> Point2D:
        return Point2D(x=self.x, y=self.y)
