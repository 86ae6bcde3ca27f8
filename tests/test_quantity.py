"""Tests for quantity extraction."""

import pytest

from macrotrack.services.quantity import parse_quantity


def test_defaults_to_one_serving() -> None:
    assert parse_quantity("chicken") == (1.0, "chicken")


def test_cups_take_precedence() -> None:
    quantity, remainder = parse_quantity("2 cups of rice")

    assert quantity == 2.0
    assert "rice" in remainder
    assert "cup" not in remainder


@pytest.mark.parametrize(
    ("fragment", "expected_quantity", "expected_remainder"),
    [
        ("3 slices of bread", 3.0, "of bread"),
        ("2 pieces chicken", 2.0, "chicken"),
        ("1.5 apples", 1.5, "apples"),
        ("two eggs", 2.0, "eggs"),
        ("half a banana", 0.5, "a banana"),
        ("an apple", 1.0, "apple"),
    ],
)
def test_quantity_forms(
    fragment: str, expected_quantity: float, expected_remainder: str
) -> None:
    assert parse_quantity(fragment) == (expected_quantity, expected_remainder)


def test_number_words_match_whole_words_only() -> None:
    quantity, remainder = parse_quantity("banana")

    assert quantity == 1.0
    assert remainder == "banana"


def test_cup_without_number_is_one() -> None:
    quantity, remainder = parse_quantity("cup of coffee")

    assert quantity == 1.0
    assert remainder == "cup of coffee"


def test_number_longer_than_six_digits_is_not_a_quantity() -> None:
    assert parse_quantity("999999 bananas") == (999999.0, "bananas")
    assert parse_quantity("9999999 bananas") == (1.0, "9999999 bananas")
