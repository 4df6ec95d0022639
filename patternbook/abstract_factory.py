"""Abstract factory: families of related products created through one factory."""

from abc import ABC, abstractmethod


def _report(name: str) -> str:
    print(name)
    return name


class ProductA(ABC):
    """A product of kind A."""

    @abstractmethod
    def info(self) -> str:
        """Print and return a line naming the product."""


class ProductB(ABC):
    """A product of kind B."""

    @abstractmethod
    def info(self) -> str:
        """Print and return a line naming the product."""


class ProductA1(ProductA):
    """Kind A of the first family."""

    def info(self) -> str:
        return _report("ProductA1")


class ProductB1(ProductB):
    """Kind B of the first family."""

    def info(self) -> str:
        return _report("ProductB1")


class ProductA2(ProductA):
    """Kind A of the second family."""

    def info(self) -> str:
        return _report("ProductA2")


class ProductB2(ProductB):
    """Kind B of the second family."""

    def info(self) -> str:
        return _report("ProductB2")


class AbstractFactory(ABC):
    """Creates one product of each kind, all from the same family."""

    @abstractmethod
    def create_product_a(self) -> ProductA:
        """Create the family's product of kind A."""

    @abstractmethod
    def create_product_b(self) -> ProductB:
        """Create the family's product of kind B."""


class ConcreteFactory1(AbstractFactory):
    """Creates the first family."""

    def create_product_a(self) -> ProductA:
        return ProductA1()

    def create_product_b(self) -> ProductB:
        return ProductB1()


class ConcreteFactory2(AbstractFactory):
    """Creates the second family."""

    def create_product_a(self) -> ProductA:
        return ProductA2()

    def create_product_b(self) -> ProductB:
        return ProductB2()


def client_code(factory: AbstractFactory) -> list[str]:
    """Create both products with ``factory`` and report them; return the lines."""
    products = (factory.create_product_a(), factory.create_product_b())
    return [product.info() for product in products]


def main(argv: list[str] | None = None) -> int:
    runs = (("", "Factory1", ConcreteFactory1()), ("\n", "Factory2", ConcreteFactory2()))
    for prefix, label, factory in runs:
        print(f"{prefix}Using {label}:")
        client_code(factory)
    return 0