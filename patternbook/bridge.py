"""Bridge: shapes drawn through interchangeable drawing back ends."""

from abc import ABC, abstractmethod


def _report(api_name: str, x: float, y: float, radius: float) -> str:
    message = f"{api_name}: Drawing circle at ({x:g}, {y:g}) with radius {radius:g}"
    print(message)
    return message


class DrawingAPI(ABC):
    """The implementation side: knows how to draw primitives."""

    @abstractmethod
    def draw_circle(self, x: float, y: float, radius: float) -> str:
        """Draw a circle; print and return the message."""


class OpenGLAPI(DrawingAPI):
    """OpenGL back end."""

    def draw_circle(self, x: float, y: float, radius: float) -> str:
        return _report("OpenGLAPI", x, y, radius)


class DirectXAPI(DrawingAPI):
    """DirectX back end."""

    def draw_circle(self, x: float, y: float, radius: float) -> str:
        return _report("DirectXAPI", x, y, radius)


class Shape(ABC):
    """The abstraction side: a shape that draws through an API."""

    def __init__(self, api: DrawingAPI) -> None:
        self.api = api

    @abstractmethod
    def draw(self) -> str:
        """Draw the shape; return the message reported."""


class Circle(Shape):
    def __init__(self, x: float, y: float, radius: float, api: DrawingAPI) -> None:
        super().__init__(api)
        self.x = x
        self.y = y
        self.radius = radius

    def draw(self) -> str:
        return self.api.draw_circle(self.x, self.y, self.radius)


def main(argv: list[str] | None = None) -> int:
    circles = (Circle(10, 20, 5, OpenGLAPI()), Circle(15, 25, 7, DirectXAPI()))
    for circle in circles:
        circle.draw()
    return 0