"""Pydantic models for the HTTP API."""

from datetime import date

from pydantic import BaseModel, Field


class ParseRequest(BaseModel):
    """Coach notes to parse."""

    text: str
    use_ai: bool = True


class MacrosModel(BaseModel):
    """Macro breakdown payload."""

    calories: int
    protein: int
    carbs: int
    sugar: int
    fat: int


class FoodModel(BaseModel):
    """Parsed food payload."""

    name: str
    quantity: float
    macros: MacrosModel


class WorkoutModel(BaseModel):
    """Parsed workout payload."""

    type: str
    cardio_type: str | None = None
    strength_exercise: str | None = None
    duration: int | None = None
    distance: float | None = None
    sets: int | None = None
    reps: int | None = None
    is_complete: bool


class ParseResponse(BaseModel):
    """Result of parsing one utterance."""

    date: date
    foods: list[FoodModel] = Field(default_factory=list)
    water_ounces: int | None = None
    workouts: list[WorkoutModel] = Field(default_factory=list)
    raw_text: str
    understood: bool
    total_macros: MacrosModel


class CatalogFoodModel(BaseModel):
    """Catalog entry payload."""

    name: str
    serving_size: str
    macros: MacrosModel
