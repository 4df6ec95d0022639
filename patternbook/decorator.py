"""Decorator: coffee extras wrap a coffee and add to its description and cost."""

from abc import ABC, abstractmethod


class Coffee(ABC):
    """Something that can be ordered."""

    @abstractmethod
    def description(self) -> str:
        """Return what the order consists of."""

    @abstractmethod
    def cost(self) -> float:
        """Return the total price."""


class SimpleCoffee(Coffee):
    def description(self) -> str:
        return "Simple Coffee"

    def cost(self) -> float:
        return 5.0


class CoffeeDecorator(Coffee, ABC):
    """A coffee that wraps another one."""

    def __init__(self, coffee: Coffee) -> None:
        self.coffee = coffee


class MilkDecorator(CoffeeDecorator):
    """Adds milk."""

    def description(self) -> str:
        return f"{self.coffee.description()}, Milk"

    def cost(self) -> float:
        return self.coffee.cost() + 1.5


class SugarDecorator(CoffeeDecorator):
    """Adds sugar."""

    def description(self) -> str:
        return f"{self.coffee.description()}, Sugar"

    def cost(self) -> float:
        return self.coffee.cost() + 0.5


def main(argv: list[str] | None = None) -> int:
    coffee: Coffee = SimpleCoffee()
    for extra in (MilkDecorator, SugarDecorator):
        coffee = extra(coffee)
    print(f"Order: {coffee.description()}")
    print(f"Total Cost: ${coffee.cost():g}")
    return 0