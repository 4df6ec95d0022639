"""Simple factory: one static method picks the product by name."""

from abc import ABC, abstractmethod


def _report(message: str) -> str:
    print(message)
    return message


class Product(ABC):
    @abstractmethod
    def use(self) -> str:
        """Use the product; print and return its message."""


class ConcreteProductA(Product):
    def use(self) -> str:
        return _report("Using Product A")


class ConcreteProductB(Product):
    def use(self) -> str:
        return _report("Using Product B")


class SimpleFactory:
    """Creates products from a type name."""

    _PRODUCTS: dict[str, type[Product]] = {
        "A": ConcreteProductA,
        "B": ConcreteProductB,
    }

    @staticmethod
    def create_product(kind: str) -> Product:
        """Create the product named ``kind``; raise ValueError if unknown."""
        try:
            return SimpleFactory._PRODUCTS[kind]()
        except KeyError:
            raise ValueError(f"unknown product type: {kind!r}") from None


def main(argv: list[str] | None = None) -> int:
    for kind in ("A", "B", "C"):
        try:
            SimpleFactory.create_product(kind).use()
        except ValueError:
            print("Invalid product type!")
    return 0