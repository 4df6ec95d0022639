"""Builder: assemble a car step by step, with or without a director."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class Car:
    """The product being built."""

    engine: str = ""
    body: str = ""
    wheels: str = ""

    def show_specifications(self) -> str:
        """Print and return the car's specification sheet."""
        text = (
            "Car Specifications:\n"
            f" Engine: {self.engine}\n"
            f" Body: {self.body}\n"
            f" Wheels: {self.wheels}\n"
        )
        print(text, end="")
        return text


class CarBuilder(ABC):
    """Builds the parts of one car."""

    def __init__(self) -> None:
        self._car = Car()

    @abstractmethod
    def build_engine(self) -> None:
        """Fit the engine."""

    @abstractmethod
    def build_body(self) -> None:
        """Fit the body."""

    @abstractmethod
    def build_wheels(self) -> None:
        """Fit the wheels."""

    def result(self) -> Car:
        """Return the car built so far."""
        return self._car


class SportsCarBuilder(CarBuilder):
    """Builds a sports car."""

    def build_engine(self) -> None:
        self._car.engine = "V8 Twin Turbo"

    def build_body(self) -> None:
        self._car.body = "Aerodynamic Carbon Fiber"

    def build_wheels(self) -> None:
        self._car.wheels = "Low-profile Racing Tires"


class SUVCarBuilder(CarBuilder):
    """Builds an SUV."""

    def build_engine(self) -> None:
        self._car.engine = "V6 Diesel"

    def build_body(self) -> None:
        self._car.body = "Sturdy Steel Frame"

    def build_wheels(self) -> None:
        self._car.wheels = "All-Terrain Tires"


class CarDirector:
    """Runs a builder through the full sequence of steps."""

    def __init__(self, builder: CarBuilder) -> None:
        self.builder = builder

    def construct_car(self) -> Car:
        """Build engine, body and wheels in order; return the builder's car."""
        self.builder.build_engine()
        self.builder.build_body()
        self.builder.build_wheels()
        return self.builder.result()


def main(argv: list[str] | None = None) -> int:
    print("--- Building Sports Car using Director ---")
    sports_builder = SportsCarBuilder()
    CarDirector(sports_builder).construct_car()
    sports_builder.result().show_specifications()

    print("\n--- Building SUV manually (without Director) ---")
    suv_builder = SUVCarBuilder()
    for step in (suv_builder.build_engine, suv_builder.build_body, suv_builder.build_wheels):
        step()
    suv_builder.result().show_specifications()
    return 0