"""Quantity extraction for food phrases."""

import re

from macrotrack.services.text import parse_number, squash

# First match wins; the unit only gates what counts as a quantity.
_NUMBER_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"(\d+(?:\.\d+)?)\s*(?:cups of|cup of|cups|cup)"),
    re.compile(r"(\d+(?:\.\d+)?)\s*(?:glasses of|glass of|glasses|glass)"),
    re.compile(r"(\d+(?:\.\d+)?)\s*(?:pieces|piece)"),
    re.compile(r"(\d+(?:\.\d+)?)\s*(?:slices|slice)"),
    re.compile(r"(\d+(?:\.\d+)?)\s*(?:ounces|ounce|oz)"),
    re.compile(r"(\d+(?:\.\d+)?)"),
)

_WORD_NUMBERS: dict[str, float] = {
    "one": 1.0,
    "two": 2.0,
    "three": 3.0,
    "four": 4.0,
    "five": 5.0,
    "six": 6.0,
    "seven": 7.0,
    "eight": 8.0,
    "nine": 9.0,
    "ten": 10.0,
    "a": 1.0,
    "an": 1.0,
    "half": 0.5,
    "quarter": 0.25,
}
_NUMBER_WORD = re.compile(r"(?<!\w)(" + "|".join(_WORD_NUMBERS) + r")(?!\w)")


def parse_quantity(fragment: str) -> tuple[float, str]:
    """Return the serving multiplier in a fragment and the remaining text.

    Numeric forms ("2 cups", "1.5", "3 slices") win over number words
    ("two", "a", "half"). Without either the quantity is 1.0.
    """
    text = fragment.lower()

    for pattern in _NUMBER_PATTERNS:
        match = pattern.search(text)
        if match is None:
            continue
        quantity = parse_number(match.group(1))
        if quantity is not None and quantity > 0:
            return quantity, squash(text[: match.start()] + " " + text[match.end() :])

    word = _NUMBER_WORD.search(text)
    if word is not None:
        quantity = _WORD_NUMBERS[word.group(1)]
        return quantity, squash(text[: word.start()] + " " + text[word.end() :])

    return 1.0, squash(text)
