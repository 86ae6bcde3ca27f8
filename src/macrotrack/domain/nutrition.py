"""Nutrition domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MacroBreakdown:
    """Calories and macronutrients in whole kcal and grams."""

    calories: int
    protein: int
    carbs: int
    sugar: int
    fat: int

    @classmethod
    def zero(cls) -> "MacroBreakdown":
        """Return an empty breakdown."""
        return cls(calories=0, protein=0, carbs=0, sugar=0, fat=0)

    def __add__(self, other: "MacroBreakdown") -> "MacroBreakdown":
        if not isinstance(other, MacroBreakdown):
            return NotImplemented
        return MacroBreakdown(
            calories=self.calories + other.calories,
            protein=self.protein + other.protein,
            carbs=self.carbs + other.carbs,
            sugar=self.sugar + other.sugar,
            fat=self.fat + other.fat,
        )

    def scaled(self, quantity: float) -> "MacroBreakdown":
        """Multiply every component by quantity, flooring to whole units."""
        return MacroBreakdown(
            calories=int(self.calories * quantity),
            protein=int(self.protein * quantity),
            carbs=int(self.carbs * quantity),
            sugar=int(self.sugar * quantity),
            fat=int(self.fat * quantity),
        )


@dataclass(frozen=True)
class FoodItem:
    """Reference nutrition facts for one serving of a food."""

    name: str
    calories: int
    protein: int
    carbs: int
    sugar: int
    fat: int
    serving_size: str

    @property
    def macros(self) -> MacroBreakdown:
        return MacroBreakdown(
            calories=self.calories,
            protein=self.protein,
            carbs=self.carbs,
            sugar=self.sugar,
            fat=self.fat,
        )
