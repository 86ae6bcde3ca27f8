"""Models for AI extraction results."""

from pydantic import BaseModel, Field


class ExtractedFood(BaseModel):
    """Single food mentioned in the utterance."""

    name: str
    quantity: float = Field(default=1.0, gt=0.0)


class ExtractedWorkout(BaseModel):
    """Single workout mentioned in the utterance."""

    type: str
    cardio_type: str | None = None
    strength_exercise: str | None = None
    duration: int | None = Field(default=None, ge=0)
    distance: float | None = Field(default=None, ge=0.0)
    sets: int | None = Field(default=None, ge=0)
    reps: int | None = Field(default=None, ge=0)


class CoachExtract(BaseModel):
    """Structured output for coach note extraction."""

    date: str = "today"
    foods: list[ExtractedFood] = Field(default_factory=list)
    water_ounces: int = Field(default=0, ge=0)
    workouts: list[ExtractedWorkout] = Field(default_factory=list)


class MacroEstimate(BaseModel):
    """Estimated macros for a food missing from the catalog."""

    calories: int = Field(ge=0)
    protein: int = Field(ge=0)
    carbs: int = Field(ge=0)
    sugar: int = Field(ge=0)
    fat: int = Field(ge=0)
