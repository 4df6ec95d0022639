import pytest

from patternbook.simple_factory import (
    ConcreteProductA,
    ConcreteProductB,
    Product,
    SimpleFactory,
    main,
)


@pytest.mark.parametrize(
    "kind, cls, message",
    [("A", ConcreteProductA, "Using Product A"), ("B", ConcreteProductB, "Using Product B")],
)
def test_create_and_use_known_products(capsys, kind, cls, message):
    product = SimpleFactory.create_product(kind)
    assert type(product) is cls
    assert product.use() == message
    assert capsys.readouterr().out == message + "\n"


@pytest.mark.parametrize("kind", ["C", "", "a", "AB"])
def test_create_unknown_raises(kind):
    with pytest.raises(ValueError):
        SimpleFactory.create_product(kind)


def test_product_is_abstract():
    with pytest.raises(TypeError):
        Product()


def test_main_output(capsys):
    assert main() == 0
    assert capsys.readouterr().out == (
        "Using Product A\nUsing Product B\nInvalid product type!\n"
    )