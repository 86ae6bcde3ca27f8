"""FastAPI application factory."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from macrotrack.api.models import (
    CatalogFoodModel,
    FoodModel,
    MacrosModel,
    ParseRequest,
    ParseResponse,
    WorkoutModel,
)
from macrotrack.app_logging import configure_logging
from macrotrack.containers import AppContainer
from macrotrack.domain.coach_notes import ParsedResult, ParsedWorkout
from macrotrack.domain.nutrition import MacroBreakdown


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.post("/parse")
    async def parse(payload: ParseRequest, request: Request) -> ParseResponse:
        """Parse coach notes into foods, water and workouts."""
        state_container: AppContainer = request.app.state.container
        service = state_container.coach_notes_service
        if payload.use_ai:
            result = await service.parse_with_ai(payload.text)
        else:
            result = service.parse(payload.text)
        return _to_response(result)

    @app.get("/foods")
    async def foods(request: Request) -> list[CatalogFoodModel]:
        """List the foods the parser recognises."""
        state_container: AppContainer = request.app.state.container
        return [
            CatalogFoodModel(
                name=item.name,
                serving_size=item.serving_size,
                macros=_macros(item.macros),
            )
            for item in state_container.catalog.items()
        ]

    return app


def _to_response(result: ParsedResult) -> ParseResponse:
    return ParseResponse(
        date=result.date,
        foods=[
            FoodModel(name=food.name, quantity=food.quantity, macros=_macros(food.macros))
            for food in result.foods
        ],
        water_ounces=result.water.ounces if result.water else None,
        workouts=[_workout(workout) for workout in result.workouts],
        raw_text=result.raw_text,
        understood=not result.is_empty,
        total_macros=_macros(result.total_macros()),
    )


def _macros(macros: MacroBreakdown) -> MacrosModel:
    return MacrosModel(
        calories=macros.calories,
        protein=macros.protein,
        carbs=macros.carbs,
        sugar=macros.sugar,
        fat=macros.fat,
    )


def _workout(workout: ParsedWorkout) -> WorkoutModel:
    return WorkoutModel(
        type=workout.type.value,
        cardio_type=workout.cardio_type.value if workout.cardio_type else None,
        strength_exercise=(
            workout.strength_exercise.value if workout.strength_exercise else None
        ),
        duration=workout.duration,
        distance=workout.distance,
        sets=workout.sets,
        reps=workout.reps,
        is_complete=workout.is_complete,
    )
