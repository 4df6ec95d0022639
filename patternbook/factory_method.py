"""Factory method: subclasses decide which product a creator works with."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Product(ABC):
    """Something a creator operates on."""

    @abstractmethod
    def operation(self) -> str:
        """Perform the product's operation; print and return its message."""


class ConcreteProductA(Product):
    def operation(self) -> str:
        message = "ConcreteProductA operation"
        print(message)
        return message


class ConcreteProductB(Product):
    def operation(self) -> str:
        message = "ConcreteProductB operation"
        print(message)
        return message


class Creator(ABC):
    """Uses a product made by its own factory method."""

    @abstractmethod
    def factory_method(self) -> Product:
        """Create the product this creator works with."""

    def some_operation(self) -> str:
        """Make a product and run its operation, returning the message."""
        return self.factory_method().operation()


class ConcreteCreatorA(Creator):
    def factory_method(self) -> Product:
        return ConcreteProductA()


class ConcreteCreatorB(Creator):
    def factory_method(self) -> Product:
        return ConcreteProductB()


def main(argv: list[str] | None = None) -> int:
    ConcreteCreatorA().some_operation()
    ConcreteCreatorB().some_operation()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())