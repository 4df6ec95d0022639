# patternbook

A compact collection of classic design patterns, each in its own module and
each runnable as a short demonstration. It is meant for reading, experimenting
and teaching: every module is small enough to take in at a glance.

The package has no dependencies beyond the Python standard library and
supports Python 3.10 and later.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## What is inside

Creational patterns:

| Module                         | Pattern          | Demonstration command          |
|--------------------------------|------------------|--------------------------------|
| `patternbook.abstract_factory` | Abstract Factory | `patternbook-abstract-factory` |
| `patternbook.builder`          | Builder          | `patternbook-builder`          |
| `patternbook.factory_method`   | Factory Method   | `patternbook-factory-method`   |
| `patternbook.prototype`        | Prototype        | `patternbook-prototype`        |
| `patternbook.simple_factory`   | Simple Factory   | `patternbook-simple-factory`   |
| `patternbook.singleton`        | Singleton        | `patternbook-singleton`        |

Structural patterns:

| Module                  | Pattern   | Demonstration command   |
|-------------------------|-----------|-------------------------|
| `patternbook.adapter`   | Adapter   | `patternbook-adapter`   |
| `patternbook.bridge`    | Bridge    | `patternbook-bridge`    |
| `patternbook.decorator` | Decorator | `patternbook-decorator` |
| `patternbook.facade`    | Facade    | `patternbook-facade`    |
| `patternbook.flyweight` | Flyweight | `patternbook-flyweight` |
| `patternbook.proxy`     | Proxy     | `patternbook-proxy`     |

Each command prints a short walk-through of its pattern and exits with
status 0, for example:

```
patternbook-decorator
patternbook-proxy
```

`patternbook-decorator` prints:

```
Order: Simple Coffee, Milk, Sugar
Total Cost: $7
```

## Using the classes directly

Every demonstration is built from ordinary classes you can use in your own
code. Methods that report something print their message and also return it,
so the results can be checked in code as well as read on screen.

Wrapping a coffee in decorators:

```python
from patternbook.decorator import MilkDecorator, SimpleCoffee, SugarDecorator

coffee = SugarDecorator(MilkDecorator(SimpleCoffee()))
print(coffee.description())  # Simple Coffee, Milk, Sugar
print(coffee.cost())         # 7.0
```

Sharing flyweights:

```python
from patternbook.flyweight import FontFactory

factory = FontFactory()
assert factory.get_font("Arial") is factory.get_font("Arial")
factory.get_font("Times")
assert len(factory) == 2
```

A single shared instance (calling `PaymentGateway()` directly raises
`TypeError`):

```python
from patternbook.singleton import PaymentGateway

assert PaymentGateway.get_instance() is PaymentGateway.get_instance()
```

Building a car step by step:

```python
from patternbook.builder import CarDirector, SportsCarBuilder

builder = SportsCarBuilder()
car = CarDirector(builder).construct_car()
car.show_specifications()
```

Copying a prototype:

```python
from patternbook.prototype import Employee

original = Employee("Alice", 30)
copy = original.clone()
assert copy == original and copy is not original
```

## Errors

- `SimpleFactory.create_product` in `patternbook.simple_factory` raises
  `ValueError` for any type name other than `"A"` or `"B"`.
- `EmployeeProxy.create` and `EmployeeProxy.delete` in `patternbook.proxy`
  raise `PermissionError` unless the proxy's role is `"admin"`;
  `EmployeeProxy.get` is open to every role.

## What it does not do

The demonstration commands take no options and ignore any arguments; each
always runs the same fixed walk-through. The classes model their patterns
only: no payments are charged, no orders are stored, nothing is drawn on
screen and no employee records are kept.