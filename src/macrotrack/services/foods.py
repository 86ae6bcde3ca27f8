"""Food extraction from coach notes."""

import logging

from macrotrack.domain.coach_notes import ParsedFood
from macrotrack.domain.nutrition import FoodItem
from macrotrack.services.catalog import DEFAULT_CATALOG, FoodCatalog
from macrotrack.services.quantity import parse_quantity
from macrotrack.services.text import (
    FOOD_SEPARATORS,
    contains_word,
    remove_word,
    split_fragments,
    squash,
)
from macrotrack.services.workouts import CARDIO_KEYWORDS, STRENGTH_KEYWORDS

_logger = logging.getLogger(__name__)

RESTAURANTS: tuple[str, ...] = (
    "from mcdonalds",
    "from mcdonald's",
    "from mcdonald",
    "mcdonalds",
    "mcdonald's",
    "from burger kings",
    "from burger king",
    "from bk",
    "burger kings",
    "burger king",
    "bk",
    "from wendy's",
    "from wendy",
    "wendy's",
    "wendy",
    "from taco bell",
    "taco bell",
    "from subway",
    "subway",
    "from chipotle",
    "chipotle",
)

ACTION_VERBS: tuple[str, ...] = (
    "i just ate",
    "i just had",
    "i just consumed",
    "i just finished",
    "just ate",
    "just had",
    "just consumed",
    "just finished",
    "i ate",
    "i had",
    "i consumed",
    "i finished",
    "i drank",
    "ate",
    "had",
    "consumed",
    "finished",
    "drank",
)

_SIZES: dict[str, str] = {
    "small": "small",
    "medium": "medium",
    "large": "large",
    "big": "large",
}

_FILLER_WORDS: tuple[str, ...] = ("a", "an", "the", "of", "just", "i")

# Leftovers like "ran" in "ate eggs and ran" are workouts, not foods.
_WORKOUT_WORDS: frozenset[str] = frozenset(
    ("cardio", "strength")
    + tuple(word for _, words in CARDIO_KEYWORDS for word in words)
    + tuple(word for _, words in STRENGTH_KEYWORDS for word in words)
)


def extract_foods(
    text: str, catalog: FoodCatalog = DEFAULT_CATALOG
) -> list[ParsedFood]:
    """Return catalog foods mentioned in lowercased text."""
    foods: list[ParsedFood] = []
    for fragment in split_fragments(_strip_restaurant(text), FOOD_SEPARATORS):
        parsed = _parse_fragment(fragment, catalog)
        if parsed is not None:
            foods.append(parsed)
    return foods


def _strip_restaurant(text: str) -> str:
    """Remove the first restaurant name found in text."""
    for name in RESTAURANTS:
        if contains_word(text, name):
            return remove_word(text, name)
    return text


def _parse_fragment(fragment: str, catalog: FoodCatalog) -> ParsedFood | None:
    cleaned = squash(fragment)
    if contains_word(cleaned, "water") and "food" not in cleaned:
        return None

    for verb in ACTION_VERBS:
        cleaned = remove_word(cleaned, verb)

    quantity, remainder = parse_quantity(cleaned)
    size, remainder = _take_size(remainder)

    name = remainder
    for filler in _FILLER_WORDS:
        name = remove_word(name, filler)
    name = squash(name)

    if len(name) < 2 or name == "water" or name in _WORKOUT_WORDS:
        return None

    item = _resolve(name, size, catalog)
    if item is None:
        _logger.debug("No catalog match for food phrase: %s", name)
        return None
    return ParsedFood(
        name=item.name,
        quantity=quantity,
        macros=item.macros.scaled(quantity),
    )


def _take_size(text: str) -> tuple[str | None, str]:
    """Pull a leading size word, skipping filler words before it."""
    words = text.split()
    for index, word in enumerate(words):
        if word in _FILLER_WORDS:
            continue
        size = _SIZES.get(word)
        if size is None:
            return None, text
        return size, " ".join(words[:index] + words[index + 1 :])
    return None, text


def _resolve(name: str, size: str | None, catalog: FoodCatalog) -> FoodItem | None:
    prefix = f"{size} " if size else ""
    item = catalog.find(prefix + name)
    if item is None and ("fry" in name or "fries" in name):
        if prefix:
            item = catalog.find(prefix + "fries")
        if item is None:
            item = catalog.find("fries")
    if item is None and prefix:
        item = catalog.find(name)
    return item
