import pytest

from patternbook.builder import (
    Car,
    CarBuilder,
    CarDirector,
    SportsCarBuilder,
    SUVCarBuilder,
    main,
)


def test_director_builds_sports_car():
    builder = SportsCarBuilder()
    car = CarDirector(builder).construct_car()
    assert car is builder.result()
    assert car == Car("V8 Twin Turbo", "Aerodynamic Carbon Fiber", "Low-profile Racing Tires")


def test_manual_build_matches_director():
    manual = SUVCarBuilder()
    manual.build_engine()
    manual.build_body()
    manual.build_wheels()
    directed = CarDirector(SUVCarBuilder()).construct_car()
    assert manual.result() == directed
    assert directed.engine == "V6 Diesel"


def test_partial_build_leaves_parts_empty():
    builder = SUVCarBuilder()
    builder.build_body()
    car = builder.result()
    assert car.body == "Sturdy Steel Frame"
    assert car.engine == ""
    assert car.wheels == ""


def test_show_specifications(capsys):
    car = Car("V6 Diesel", "Sturdy Steel Frame", "All-Terrain Tires")
    text = car.show_specifications()
    assert text == (
        "Car Specifications:\n Engine: V6 Diesel\n"
        " Body: Sturdy Steel Frame\n Wheels: All-Terrain Tires\n"
    )
    assert capsys.readouterr().out == text


def test_car_builder_is_abstract():
    with pytest.raises(TypeError):
        CarBuilder()


def test_main_output(capsys):
    assert main() == 0
    out = capsys.readouterr().out
    assert out.startswith("--- Building Sports Car using Director ---\n")
    assert "\n--- Building SUV manually (without Director) ---\n" in out
    assert out.count("Car Specifications:") == 2
    assert " Wheels: Low-profile Racing Tires\n" in out