"""Tests for the food catalog matcher."""

from macrotrack.domain.nutrition import FoodItem
from macrotrack.services.catalog import DEFAULT_CATALOG, FoodCatalog


def test_find_exact_key() -> None:
    item = DEFAULT_CATALOG.find("banana")

    assert item is not None
    assert item.name == "Banana"
    assert item.calories == 105


def test_find_alias_maps_to_same_item() -> None:
    assert DEFAULT_CATALOG.find("chicken") == DEFAULT_CATALOG.find("chicken breast")
    assert DEFAULT_CATALOG.find("small fry") == DEFAULT_CATALOG.find("small fries")


def test_find_prefers_longest_contained_key() -> None:
    item = DEFAULT_CATALOG.find("cheeseburger with cheese")

    assert item is not None
    assert item.name == "Cheeseburger"


def test_find_more_specific_key_wins() -> None:
    item = DEFAULT_CATALOG.find("some brown rice please")

    assert item is not None
    assert item.name == "Brown Rice"


def test_find_key_containing_short_query() -> None:
    item = DEFAULT_CATALOG.find("mac")

    assert item is not None
    assert item.name == "Big Mac"


def test_find_synonym_table() -> None:
    catalog = FoodCatalog(
        foods={"chicken": FoodItem("Chicken Breast", 231, 43, 0, 0, 5, "1 breast")},
        synonyms=(("grilled hen", "chicken"),),
    )

    item = catalog.find("grilled hen thighs")

    assert item is not None
    assert item.name == "Chicken Breast"


def test_find_is_case_insensitive_and_trims() -> None:
    item = DEFAULT_CATALOG.find("  WHOPPER JR ")

    assert item is not None
    assert item.name == "Whopper Jr"


def test_find_returns_none_for_unknown_or_empty() -> None:
    assert DEFAULT_CATALOG.find("unobtainium surprise") is None
    assert DEFAULT_CATALOG.find("   ") is None


def test_items_are_unique() -> None:
    names = [item.name for item in DEFAULT_CATALOG.items()]

    assert len(names) == len(set(names))
    assert "French Fries" in names
    assert len(names) >= 50
