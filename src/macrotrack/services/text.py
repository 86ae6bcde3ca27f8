"""Text helpers shared by the coach note extractors."""

import re
from collections.abc import Iterable

FOOD_SEPARATORS: tuple[str, ...] = (" and ", ", ", " plus ", " with ")
WORKOUT_SEPARATORS: tuple[str, ...] = (*FOOD_SEPARATORS, " then ")

_WHITESPACE = re.compile(r"\s+")

# Longer integer parts are noise, not amounts.
MAX_NUMBER_DIGITS = 6


def split_fragments(text: str, separators: Iterable[str]) -> list[str]:
    """Split text on each separator in turn, keeping every fragment."""
    parts = [text]
    for separator in separators:
        parts = [piece for part in parts for piece in part.split(separator)]
    return parts


def word_pattern(phrase: str) -> re.Pattern[str]:
    """Compile a pattern matching phrase as whole words."""
    return re.compile(rf"(?<!\w){re.escape(phrase)}(?!\w)")


def contains_word(text: str, phrase: str) -> bool:
    """Return True when phrase appears in text as whole words."""
    return word_pattern(phrase).search(text) is not None


def remove_word(text: str, phrase: str) -> str:
    """Remove every whole-word occurrence of phrase."""
    return word_pattern(phrase).sub(" ", text)


def squash(text: str) -> str:
    """Collapse whitespace runs and trim."""
    return _WHITESPACE.sub(" ", text).strip()


def parse_number(raw: str) -> float | None:
    """Convert a captured number, or return None when it is implausibly large."""
    if len(raw.partition(".")[0]) > MAX_NUMBER_DIGITS:
        return None
    return float(raw)
