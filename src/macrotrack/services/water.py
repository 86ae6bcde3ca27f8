"""Hydration extraction."""

import re

from macrotrack.domain.coach_notes import ParsedWater
from macrotrack.services.text import contains_word, parse_number, remove_word

OUNCES_PER_GLASS = 8
DEFAULT_OUNCES = 8

_OUNCES = re.compile(r"(\d+)\s*(?:ounces|ounce|oz)")
_GLASSES = re.compile(r"(\d+)\s*glass")
_WATER_PHRASES: tuple[str, ...] = ("drank water", "had water", "water")
_FOOD_VERBS: tuple[str, ...] = ("ate", "had", "consumed")


def extract_water(text: str) -> ParsedWater | None:
    """Return the water intake mentioned in lowercased text, if any."""
    if not contains_word(text, "water"):
        return None

    ounces = _amount(_OUNCES.search(text))
    if ounces:
        return ParsedWater(ounces=int(ounces))

    glasses = _amount(_GLASSES.search(text))
    if glasses:
        return ParsedWater(ounces=int(glasses) * OUNCES_PER_GLASS)

    # A bare mention counts only when no food verb outside the water phrase
    # suggests the water was incidental to a meal.
    remainder = text
    for phrase in _WATER_PHRASES:
        remainder = remove_word(remainder, phrase)
    if any(contains_word(remainder, verb) for verb in _FOOD_VERBS):
        return None
    return ParsedWater(ounces=DEFAULT_OUNCES)


def _amount(match: re.Match[str] | None) -> float | None:
    return parse_number(match.group(1)) if match else None
