import pytest

from patternbook.prototype import Employee, Prototype, main


@pytest.fixture
def alice():
    return Employee("Alice", 30)


def test_clone_is_equal_but_distinct(alice):
    duplicate = alice.clone()
    assert duplicate == alice
    duplicate.age += 1
    assert alice.age == 30


def test_clone_is_independent(alice):
    duplicate = alice.clone()
    duplicate.name = "Bob"
    duplicate.age = 41
    assert alice == Employee("Alice", 30)
    assert duplicate == Employee("Bob", 41)


def test_show(capsys, alice):
    text = alice.show()
    assert text == "Employee: Alice, Age: 30"
    assert capsys.readouterr().out == text + "\n"


def test_clone_shows_same():
    carol = Employee("Carol", 52)
    assert carol.clone().show() == "Employee: Carol, Age: 52"


def test_prototype_is_abstract():
    with pytest.raises(TypeError):
        Prototype()


def test_main_output(capsys):
    assert main() == 0
    assert capsys.readouterr().out.splitlines() == ["Employee: Alice, Age: 30"] * 2