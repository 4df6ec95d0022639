import pytest

from patternbook.factory_method import (
    ConcreteCreatorA,
    ConcreteCreatorB,
    ConcreteProductA,
    ConcreteProductB,
    Creator,
    Product,
    main,
)


@pytest.mark.parametrize(
    "creator, product_type",
    [(ConcreteCreatorA(), ConcreteProductA), (ConcreteCreatorB(), ConcreteProductB)],
)
def test_factory_method_product_type(creator, product_type):
    assert type(creator.factory_method()) is product_type


def test_repeated_operations_give_same_result():
    creator = ConcreteCreatorB()
    results = [creator.some_operation() for _ in range(3)]
    assert results == ["ConcreteProductB operation"] * 3


def test_some_operation(capsys):
    assert ConcreteCreatorA().some_operation() == "ConcreteProductA operation"
    assert ConcreteCreatorB().some_operation() == "ConcreteProductB operation"
    assert capsys.readouterr().out == (
        "ConcreteProductA operation\nConcreteProductB operation\n"
    )


@pytest.mark.parametrize("cls", [Product, Creator])
def test_abstract_classes(cls):
    with pytest.raises(TypeError):
        cls()


def test_main_output(capsys):
    assert main() == 0
    assert capsys.readouterr().out == (
        "ConcreteProductA operation\nConcreteProductB operation\n"
    )