"""AI extraction service for coach notes."""

import logging
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta
from typing import Protocol, TypeVar

from macrotrack.domain.coach_notes import (
    CardioType,
    ParsedFood,
    ParsedResult,
    ParsedWater,
    ParsedWorkout,
    StrengthExercise,
    WorkoutType,
)
from macrotrack.domain.extraction import (
    CoachExtract,
    ExtractedFood,
    ExtractedWorkout,
    MacroEstimate,
)
from macrotrack.domain.nutrition import MacroBreakdown
from macrotrack.services.cache import Cache
from macrotrack.services.catalog import DEFAULT_CATALOG, FoodCatalog

_logger = logging.getLogger(__name__)

_Kind = TypeVar("_Kind", CardioType, StrengthExercise)

_DAYS_BACK: dict[str, int] = {
    "today": 0,
    "yesterday": 1,
    "2 days ago": 2,
    "two days ago": 2,
    "3 days ago": 3,
    "three days ago": 3,
}

ESTIMATE_SYSTEM_PROMPT = (
    "You are a nutrition expert. "
    "Provide accurate macro estimates based on typical serving sizes."
)


class ExtractionError(RuntimeError):
    """Raised when the AI service returns an unusable response."""


class ExtractionClient(Protocol):
    """Interface for LLM JSON completions."""

    async def complete_json(  # noqa: PLR0913
        self,
        *,
        model: str,
        temperature: float,
        max_tokens: int,
        system_prompt: str,
        user_prompt: str,
    ) -> dict[str, object]:
        """Return the JSON object produced by the model."""


@dataclass
class ExtractionService:
    """Service that prompts an LLM and maps its output to a ParsedResult."""

    client: ExtractionClient
    cache: Cache
    model: str = "gpt-4o-mini"
    temperature: float = 0.3
    max_tokens: int = 500
    estimate_max_tokens: int = 150
    estimate_ttl_seconds: int = 86400
    catalog: FoodCatalog = field(default_factory=lambda: DEFAULT_CATALOG)

    async def extract(self, text: str, now: datetime | None = None) -> ParsedResult:
        """Extract foods, water and workouts from text via the configured client."""
        raw = await self.client.complete_json(
            model=self.model,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
            system_prompt=build_system_prompt(self.catalog),
            user_prompt=text,
        )
        extract = CoachExtract.model_validate(raw)

        foods: list[ParsedFood] = []
        for food in extract.foods:
            parsed = await self._resolve_food(food)
            if parsed is not None:
                foods.append(parsed)

        water = (
            ParsedWater(ounces=extract.water_ounces)
            if extract.water_ounces > 0
            else None
        )
        workouts = [
            workout
            for workout in (_to_workout(item) for item in extract.workouts)
            if workout is not None
        ]
        return ParsedResult(
            date=_resolve_date_word(extract.date, now),
            foods=foods,
            water=water,
            workouts=workouts,
            raw_text=text,
        )

    async def estimate_macros(self, name: str, quantity: float) -> MacroBreakdown:
        """Ask the model for macros of a food missing from the catalog."""
        cache_key = f"estimate:{name.lower()}:{quantity:g}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, MacroBreakdown):
            return cached

        raw = await self.client.complete_json(
            model=self.model,
            temperature=self.temperature,
            max_tokens=self.estimate_max_tokens,
            system_prompt=ESTIMATE_SYSTEM_PROMPT,
            user_prompt=build_estimate_prompt(name, quantity),
        )
        estimate = MacroEstimate.model_validate(raw)
        macros = MacroBreakdown(
            calories=estimate.calories,
            protein=estimate.protein,
            carbs=estimate.carbs,
            sugar=estimate.sugar,
            fat=estimate.fat,
        )
        self.cache.set(cache_key, macros, ttl_seconds=self.estimate_ttl_seconds)
        return macros

    async def _resolve_food(self, food: ExtractedFood) -> ParsedFood | None:
        item = self.catalog.find(food.name)
        if item is not None:
            return ParsedFood(
                name=item.name,
                quantity=food.quantity,
                macros=item.macros.scaled(food.quantity),
            )

        _logger.info("Food '%s' not in catalog, estimating macros", food.name)
        try:
            macros = await self.estimate_macros(food.name, food.quantity)
        except Exception as exc:
            _logger.warning("Failed to estimate macros for '%s': %s", food.name, exc)
            return None
        return ParsedFood(name=f"{food.name} (est.)", quantity=food.quantity, macros=macros)


def build_system_prompt(catalog: FoodCatalog) -> str:
    """Build the extraction instructions including catalog food names."""
    food_list = "\n".join(f"- {item.name}" for item in catalog.items())
    cardio_types = " | ".join(f'"{kind.value}"' for kind in CardioType)
    exercises = " | ".join(f'"{exercise.value}"' for exercise in StrengthExercise)
    return f"""You are a fitness tracking assistant. Parse user input about food, water, and workouts.

Available foods in database:
{food_list}

The user can mention multiple items in one message (e.g., "I ate a burger and fries and drank 2 glasses of water").

Respond ONLY with valid JSON in this exact format:
{{
  "date": "today" | "yesterday" | "2 days ago" | "3 days ago",
  "foods": [{{"name": "Food Name from database", "quantity": 1.0}}],
  "water_ounces": 0,
  "workouts": [
    {{
      "type": "cardio" | "strength",
      "cardio_type": {cardio_types} | null,
      "strength_exercise": {exercises} | null,
      "duration": 30,
      "distance": 2.5,
      "sets": 3,
      "reps": 12
    }}
  ]
}}

Rules:
1. FOOD: match to database foods (fuzzy match ok, e.g. "big mac" -> "Big Mac"). Extract quantity (default 1.0).
2. WATER: extract ounces (8 oz per glass or cup). Sum all water mentioned.
3. WORKOUTS: extract type and any duration (minutes), distance (miles), sets and reps mentioned.
4. DATE: default to "today" unless the user says otherwise.
5. Arrays can be empty [] if nothing is mentioned.

Example:
Input: "I ate 2 chicken breasts and a large fries"
Output: {{"date": "today", "foods": [{{"name": "Chicken Breast", "quantity": 2.0}}, {{"name": "Large Fries", "quantity": 1.0}}], "water_ounces": 0, "workouts": []}}

Example:
Input: "Ran 3 miles yesterday"
Output: {{"date": "yesterday", "foods": [], "water_ounces": 0, "workouts": [{{"type": "cardio", "cardio_type": "Run", "strength_exercise": null, "duration": null, "distance": 3.0, "sets": null, "reps": null}}]}}
"""


def build_estimate_prompt(name: str, quantity: float) -> str:
    """Build the macro estimation request for one food."""
    return (
        f"Estimate the nutritional macros for: {quantity:g} serving(s) of {name}\n\n"
        "Respond ONLY with valid JSON in this exact format:\n"
        '{"calories": 285, "protein": 12, "carbs": 36, "sugar": 4, "fat": 10}\n\n'
        "Base estimates on typical serving sizes for common foods."
    )


def _resolve_date_word(word: str, now: datetime | None) -> date:
    today = (now or datetime.now()).date()
    return today - timedelta(days=_DAYS_BACK.get(word.strip().lower(), 0))


def _to_workout(item: ExtractedWorkout) -> ParsedWorkout | None:
    """Map an extracted workout, defaulting unknown kinds like the app does."""
    workout_type = item.type.strip().lower()
    if workout_type == WorkoutType.CARDIO.value and item.cardio_type:
        return ParsedWorkout(
            type=WorkoutType.CARDIO,
            cardio_type=_enum_or_default(CardioType, item.cardio_type, CardioType.RUN),
            duration=item.duration,
            distance=item.distance,
        )
    if workout_type == WorkoutType.STRENGTH.value and item.strength_exercise:
        return ParsedWorkout(
            type=WorkoutType.STRENGTH,
            strength_exercise=_enum_or_default(
                StrengthExercise, item.strength_exercise, StrengthExercise.SQUATS
            ),
            sets=item.sets,
            reps=item.reps,
        )
    return None


def _enum_or_default(enum_type: type[_Kind], value: str, default: _Kind) -> _Kind:
    try:
        return enum_type(value)
    except ValueError:
        return default
