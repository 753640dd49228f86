"""
Geometry shared by the simulation, the input layer and the renderer.
"""

from pydantic import BaseModel, ConfigDict, Field


class Point2D(BaseModel):
    """A screen-space point, frozen.

    Screen y grows downward. Negative and out-of-canvas values are valid:
    butterflies start outside the visible area.

    Examples:
        >>> Point2D(x=-115.0, y=240.0).x
        -115.0
    """
    x: float
    y: float

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"Point2D(x={self.x:.2f}, y={self.y:.2f})"


# Same model, used where the value is a direction or velocity
Vector2D = Point2D


class Resolution(BaseModel):
    """Canvas size in pixels; also the bounds butterflies fly across.

    Examples:
        >>> print(Resolution(width=1280, height=720).center)
        Point2D(x=640.00, y=360.00)
    """
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)

    model_config = ConfigDict(frozen=True)

    @property
    def center(self) -> Point2D:
        return Point2D(x=self.width / 2, y=self.height / 2)

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"
