"""Domain models for parsed coach notes."""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum

from macrotrack.domain.nutrition import MacroBreakdown


class WorkoutType(Enum):
    """Workout family."""

    CARDIO = "cardio"
    STRENGTH = "strength"


class CardioType(Enum):
    """Supported cardio activities."""

    RUN = "Run"
    BIKE = "Bike"
    SWIM = "Swim"
    WALK = "Walk"
    ELLIPTICAL = "Elliptical"
    ROW = "Row"


class StrengthExercise(Enum):
    """Supported strength exercises."""

    PUSH_UPS = "Push Ups"
    SQUATS = "Squats"
    DEADLIFTS = "Deadlifts"
    BENCH_PRESS = "Bench Press"
    PULL_UPS = "Pull Ups"
    LUNGES = "Lunges"
    PLANK = "Plank"


@dataclass(frozen=True)
class ParsedFood:
    """A catalog food with macros already scaled by quantity."""

    name: str
    quantity: float
    macros: MacroBreakdown


@dataclass(frozen=True)
class ParsedWater:
    """Aggregate water intake."""

    ounces: int


@dataclass(frozen=True)
class ParsedWorkout:
    """A cardio or strength workout mention."""

    type: WorkoutType
    cardio_type: CardioType | None = None
    strength_exercise: StrengthExercise | None = None
    duration: int | None = None
    distance: float | None = None
    sets: int | None = None
    reps: int | None = None
    is_complete: bool = True


@dataclass(frozen=True)
class ParsedResult:
    """Everything extracted from one utterance."""

    date: date
    foods: list[ParsedFood] = field(default_factory=list)
    water: ParsedWater | None = None
    workouts: list[ParsedWorkout] = field(default_factory=list)
    raw_text: str = ""

    @property
    def is_empty(self) -> bool:
        """True when nothing in the utterance was understood."""
        return not self.foods and self.water is None and not self.workouts

    def total_macros(self) -> MacroBreakdown:
        """Sum the macros of all parsed foods."""
        total = MacroBreakdown.zero()
        for food in self.foods:
            total = total + food.macros
        return total
