"""Flyweight: fonts are shared; text and position are supplied per use."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Font(ABC):
    """A shareable font."""

    @abstractmethod
    def display(self, text: str, x: int, y: int) -> str:
        """Display ``text`` at ``(x, y)``; print and return the message."""


class ConcreteFont(Font):
    """A font whose only intrinsic state is its name."""

    def __init__(self, font_name: str) -> None:
        self.font_name = font_name

    def display(self, text: str, x: int, y: int) -> str:
        message = (
            f"Displaying '{text}' using font '{self.font_name}' "
            f"at position ({x}, {y})"
        )
        print(message)
        return message


class FontFactory:
    """Hands out one shared font object per font name."""

    def __init__(self) -> None:
        self._fonts: dict[str, Font] = {}

    def get_font(self, font_name: str) -> Font:
        """Return the shared font called ``font_name``, creating it if needed."""
        font = self._fonts.get(font_name)
        if font is None:
            font = self._fonts[font_name] = ConcreteFont(font_name)
        return font

    def __len__(self) -> int:
        return len(self._fonts)


def main(argv: list[str] | None = None) -> int:
    factory = FontFactory()
    font1 = factory.get_font("Arial")
    font2 = factory.get_font("Arial")
    font3 = factory.get_font("Times")
    font1.display("Hello", 10, 20)
    font2.display("World", 30, 40)
    font3.display("Times Text", 50, 60)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())