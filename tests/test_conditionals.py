import pytest

from practicekit.solutions.conditionals import (
    animal_habitat,
    bigger,
    foo_if_fizz,
    is_even,
    sale_price,
)


@pytest.mark.parametrize("a, b, expected", [(10, 8, 10), (32, 42, 42), (42, 42, 42)])
def test_bigger(a, b, expected):
    assert bigger(a, b) == expected


@pytest.mark.parametrize(
    "word, expected", [("fizz", "foo"), ("fuzz", "bar"), ("literally anything", "baz")]
)
def test_foo_if_fizz(word, expected):
    assert foo_if_fizz(word) == expected


@pytest.mark.parametrize(
    "animal, expected",
    [("gopher", "Burrow"), ("snake", "Desert"), ("crab", "Beach"), ("dinosaur", "Unknown")],
)
def test_animal_habitat(animal, expected):
    assert animal_habitat(animal) == expected


def test_is_true_when_even():
    assert is_even(4) is True


def test_is_false_when_odd():
    assert is_even(5) is False


@pytest.mark.parametrize("price, expected", [(51, 48), (50, 40)])
def test_sale_price(price, expected):
    assert sale_price(price) == expected