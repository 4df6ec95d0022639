"""Prototype: new objects are made by copying an existing one."""

import dataclasses
from abc import ABC, abstractmethod
from dataclasses import dataclass


class Prototype(ABC):
    """An object that can produce a copy of itself."""

    @abstractmethod
    def clone(self) -> "Prototype":
        """Return an independent copy."""

    @abstractmethod
    def show(self) -> str:
        """Print and return a description."""


@dataclass
class Employee(Prototype):
    """An employee record that clones itself."""

    name: str
    age: int

    def clone(self) -> "Employee":
        return dataclasses.replace(self)

    def show(self) -> str:
        description = f"Employee: {self.name}, Age: {self.age}"
        print(description)
        return description


def main(argv: list[str] | None = None) -> int:
    original = Employee("Alice", 30)
    for employee in (original, original.clone()):
        employee.show()
    return 0