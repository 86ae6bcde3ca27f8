"""Workout extraction from coach notes."""

import re
from typing import TypeVar

from macrotrack.domain.coach_notes import (
    CardioType,
    ParsedWorkout,
    StrengthExercise,
    WorkoutType,
)
from macrotrack.services.text import (
    WORKOUT_SEPARATORS,
    contains_word,
    parse_number,
    split_fragments,
)

KM_TO_MILES = 0.621371

_Kind = TypeVar("_Kind", CardioType, StrengthExercise)

CARDIO_KEYWORDS: tuple[tuple[CardioType, tuple[str, ...]], ...] = (
    (CardioType.RUN, ("ran", "run", "running", "jogged", "jogging")),
    (CardioType.BIKE, ("biked", "bike", "biking", "cycled", "cycling")),
    (CardioType.SWIM, ("swam", "swim", "swimming")),
    (CardioType.WALK, ("walked", "walk", "walking")),
    (CardioType.ELLIPTICAL, ("elliptical",)),
    (CardioType.ROW, ("rowed", "row", "rowing")),
)

STRENGTH_KEYWORDS: tuple[tuple[StrengthExercise, tuple[str, ...]], ...] = (
    (StrengthExercise.PUSH_UPS, ("push-ups", "pushups", "push ups", "push-up")),
    (StrengthExercise.SQUATS, ("squats", "squat")),
    (StrengthExercise.DEADLIFTS, ("deadlifts", "deadlift")),
    (StrengthExercise.BENCH_PRESS, ("bench press", "bench")),
    (StrengthExercise.PULL_UPS, ("pull-ups", "pullups", "pull ups", "pull-up")),
    (StrengthExercise.LUNGES, ("lunges", "lunge")),
    (StrengthExercise.PLANK, ("plank", "planks")),
)

CARDIO_COMPLETION_VERBS: tuple[str, ...] = (
    "completed",
    "did",
    "finished",
    "ran",
    "biked",
    "swam",
    "walked",
)
STRENGTH_COMPLETION_VERBS: tuple[str, ...] = ("completed", "did", "finished")

_MINUTES = re.compile(r"(\d+)\s*(?:minutes|minute|mins|min)")
_HALF_HOUR = re.compile(r"half\s*(?:an\s+)?hour")
_HOURS = re.compile(r"(\d+)\s*hour")
_MILES = re.compile(r"(\d+(?:\.\d+)?)\s*(?:miles|mile|mi\b)")
_KILOMETERS = re.compile(r"(\d+(?:\.\d+)?)\s*(?:kilometers|kilometer|km\b)")
_SETS_OF_REPS = re.compile(r"(\d+)\s*sets?\s*(?:of|x|×|\*)\s*(\d+)(?:\s*reps?)?")
_SETS_BY_REPS = re.compile(r"(\d+)\s*(?:x|×|\*)\s*(\d+)")
_SETS_ONLY = re.compile(r"(\d+)\s*sets?")


def extract_workouts(text: str) -> list[ParsedWorkout]:
    """Return cardio and strength workouts mentioned in lowercased text."""
    workouts: list[ParsedWorkout] = []
    for fragment in split_fragments(text, WORKOUT_SEPARATORS):
        cleaned = fragment.strip()
        # Both parsers always run, so one fragment can yield two records.
        cardio = parse_cardio(cleaned)
        if cardio is not None:
            workouts.append(cardio)
        strength = parse_strength(cleaned)
        if strength is not None:
            workouts.append(strength)
    return workouts


def parse_cardio(fragment: str) -> ParsedWorkout | None:
    """Parse one fragment into a cardio workout."""
    if contains_word(fragment, "cardio"):
        cardio_type, is_complete = CardioType.RUN, False
    else:
        cardio_type, is_complete = _match_keywords(fragment, CARDIO_KEYWORDS)
    if cardio_type is None:
        return None

    if not is_complete:
        is_complete = _any_word(fragment, CARDIO_COMPLETION_VERBS)

    return ParsedWorkout(
        type=WorkoutType.CARDIO,
        cardio_type=cardio_type,
        duration=_duration_minutes(fragment),
        distance=_distance_miles(fragment),
        is_complete=is_complete,
    )


def parse_strength(fragment: str) -> ParsedWorkout | None:
    """Parse one fragment into a strength workout."""
    if contains_word(fragment, "strength"):
        exercise, is_complete = StrengthExercise.SQUATS, False
    else:
        exercise, is_complete = _match_keywords(fragment, STRENGTH_KEYWORDS)
    if exercise is None:
        return None

    sets, reps = _sets_and_reps(fragment)
    if not is_complete:
        is_complete = _any_word(fragment, STRENGTH_COMPLETION_VERBS)

    return ParsedWorkout(
        type=WorkoutType.STRENGTH,
        strength_exercise=exercise,
        sets=sets,
        reps=reps,
        is_complete=is_complete,
    )


def _match_keywords(
    fragment: str, groups: tuple[tuple[_Kind, tuple[str, ...]], ...]
) -> tuple[_Kind | None, bool]:
    """Return the first keyword group hit and whether it implies completion."""
    for kind, keywords in groups:
        if _any_word(fragment, keywords):
            return kind, True
    return None, False


def _any_word(fragment: str, words: tuple[str, ...]) -> bool:
    return any(contains_word(fragment, word) for word in words)


def _duration_minutes(fragment: str) -> int | None:
    minutes = _captured(_MINUTES.search(fragment))
    if minutes is not None:
        return int(minutes)
    if _HALF_HOUR.search(fragment):
        return 30
    hours = _captured(_HOURS.search(fragment))
    if hours is not None:
        return int(hours) * 60
    return None


def _distance_miles(fragment: str) -> float | None:
    miles = _captured(_MILES.search(fragment))
    if miles is not None:
        return miles
    kilometers = _captured(_KILOMETERS.search(fragment))
    if kilometers is not None:
        return kilometers * KM_TO_MILES
    return None


def _sets_and_reps(fragment: str) -> tuple[int | None, int | None]:
    for pattern in (_SETS_OF_REPS, _SETS_BY_REPS):
        match = pattern.search(fragment)
        sets = _captured(match, 1)
        reps = _captured(match, 2)
        if sets is not None and reps is not None:
            return int(sets), int(reps)
    sets_only = _captured(_SETS_ONLY.search(fragment))
    if sets_only is not None:
        return int(sets_only), None
    return None, None


def _captured(match: re.Match[str] | None, group: int = 1) -> float | None:
    return parse_number(match.group(group)) if match else None
