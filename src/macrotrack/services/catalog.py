"""Static food catalog with fuzzy lookup."""

from dataclasses import dataclass, field

from macrotrack.domain.nutrition import FoodItem

# Each entry lists its lookup keys, canonical key first.
_ENTRIES: tuple[tuple[tuple[str, ...], FoodItem], ...] = (
    # Fruits
    (("banana",), FoodItem("Banana", 105, 1, 27, 14, 0, "1 medium")),
    (("apple",), FoodItem("Apple", 95, 0, 25, 19, 0, "1 medium")),
    (("orange",), FoodItem("Orange", 62, 1, 15, 12, 0, "1 medium")),
    (("strawberry", "strawberries"), FoodItem("Strawberries", 49, 1, 12, 7, 0, "1 cup")),
    (("grapes",), FoodItem("Grapes", 104, 1, 27, 23, 0, "1 cup")),
    # Proteins
    (
        ("chicken", "chicken breast"),
        FoodItem("Chicken Breast", 231, 43, 0, 0, 5, "1 breast"),
    ),
    (("chicken leg",), FoodItem("Chicken Leg", 209, 27, 0, 0, 11, "1 leg")),
    (("chicken thigh",), FoodItem("Chicken Thigh", 229, 26, 0, 0, 13, "1 thigh")),
    (("beef",), FoodItem("Beef", 250, 26, 0, 0, 15, "3 oz")),
    (("ground beef",), FoodItem("Ground Beef", 218, 22, 0, 0, 15, "3 oz")),
    (("pork",), FoodItem("Pork", 206, 22, 0, 0, 12, "3 oz")),
    (("fish",), FoodItem("Fish", 206, 22, 0, 0, 12, "3 oz")),
    (("salmon",), FoodItem("Salmon", 206, 22, 0, 0, 13, "3 oz")),
    (("tuna",), FoodItem("Tuna", 99, 22, 0, 0, 1, "3 oz")),
    (("eggs",), FoodItem("Eggs", 72, 6, 0, 0, 5, "1 large")),
    (("egg",), FoodItem("Egg", 72, 6, 0, 0, 5, "1 large")),
    # Grains and carbs
    (("rice",), FoodItem("White Rice", 205, 4, 45, 0, 0, "1 cup cooked")),
    (("brown rice",), FoodItem("Brown Rice", 216, 5, 45, 0, 2, "1 cup cooked")),
    (("bread",), FoodItem("Bread", 79, 3, 15, 2, 1, "1 slice")),
    (("pasta",), FoodItem("Pasta", 221, 8, 43, 1, 1, "1 cup cooked")),
    (("potato",), FoodItem("Potato", 164, 4, 37, 2, 0, "1 medium")),
    (("sweet potato",), FoodItem("Sweet Potato", 103, 2, 24, 7, 0, "1 medium")),
    (("oats",), FoodItem("Oats", 154, 6, 28, 1, 3, "1 cup cooked")),
    (("quinoa",), FoodItem("Quinoa", 222, 8, 39, 2, 4, "1 cup cooked")),
    # Vegetables
    (("broccoli",), FoodItem("Broccoli", 55, 4, 11, 3, 0, "1 cup")),
    (("spinach",), FoodItem("Spinach", 7, 1, 1, 0, 0, "1 cup")),
    (("carrots",), FoodItem("Carrots", 50, 1, 12, 6, 0, "1 cup")),
    (("lettuce",), FoodItem("Lettuce", 5, 0, 1, 1, 0, "1 cup")),
    (("tomato",), FoodItem("Tomato", 32, 2, 7, 5, 0, "1 medium")),
    (("onion",), FoodItem("Onion", 64, 2, 15, 7, 0, "1 cup")),
    # Dairy
    (("milk",), FoodItem("Milk", 103, 8, 12, 12, 2, "1 cup")),
    (("cheese",), FoodItem("Cheese", 113, 7, 1, 0, 9, "1 oz")),
    (("yogurt",), FoodItem("Yogurt", 154, 13, 17, 17, 4, "1 cup")),
    (("greek yogurt",), FoodItem("Greek Yogurt", 100, 17, 6, 4, 0, "1 cup")),
    # Nuts and seeds
    (("almonds",), FoodItem("Almonds", 164, 6, 6, 1, 14, "1 oz")),
    (("peanut",), FoodItem("Peanuts", 166, 7, 6, 1, 14, "1 oz")),
    (("peanut butter",), FoodItem("Peanut Butter", 188, 8, 7, 3, 16, "2 tbsp")),
    # Beverages
    (("coffee",), FoodItem("Coffee", 2, 0, 0, 0, 0, "1 cup")),
    (("orange juice",), FoodItem("Orange Juice", 112, 2, 26, 22, 0, "1 cup")),
    (("apple juice",), FoodItem("Apple Juice", 114, 0, 28, 24, 0, "1 cup")),
    # McDonald's
    (("mcdouble",), FoodItem("McDouble", 400, 22, 33, 7, 19, "1 sandwich")),
    (("big mac",), FoodItem("Big Mac", 563, 25, 45, 9, 30, "1 sandwich")),
    (
        ("quarter pounder",),
        FoodItem("Quarter Pounder", 520, 25, 42, 10, 26, "1 sandwich"),
    ),
    (("mchicken",), FoodItem("McChicken", 400, 16, 40, 7, 21, "1 sandwich")),
    (
        ("chicken nuggets", "mcnuggets"),
        FoodItem("Chicken McNuggets", 250, 14, 15, 1, 15, "6 pieces"),
    ),
    (("small fries", "small fry"), FoodItem("Small Fries", 230, 3, 29, 0, 11, "1 small")),
    (
        ("medium fries", "medium fry"),
        FoodItem("Medium Fries", 320, 4, 43, 0, 15, "1 medium"),
    ),
    (("large fries", "large fry"), FoodItem("Large Fries", 510, 7, 66, 0, 24, "1 large")),
    (("fries", "french fries"), FoodItem("French Fries", 320, 4, 43, 0, 15, "1 medium")),
    # Burger King
    (("whopper",), FoodItem("Whopper", 657, 28, 49, 11, 40, "1 sandwich")),
    (("whopper jr",), FoodItem("Whopper Jr", 310, 13, 26, 6, 18, "1 sandwich")),
    (("chicken fries",), FoodItem("Chicken Fries", 280, 12, 23, 1, 17, "9 pieces")),
    # Generic fast food
    (("burger", "hamburger"), FoodItem("Burger", 354, 17, 33, 7, 17, "1 burger")),
    (("cheeseburger",), FoodItem("Cheeseburger", 313, 15, 33, 7, 13, "1 burger")),
    (
        ("chicken sandwich",),
        FoodItem("Chicken Sandwich", 470, 28, 41, 6, 21, "1 sandwich"),
    ),
)

# Phrase found in the search text -> catalog key to look up directly.
_SYNONYMS: tuple[tuple[str, str], ...] = (
    ("baked chicken", "chicken"),
    ("grilled chicken", "chicken"),
    ("fried chicken", "chicken"),
    ("white rice", "rice"),
    ("cup of rice", "rice"),
)


@dataclass(frozen=True)
class FoodCatalog:
    """Read-only mapping from lowercase lookup keys to food items."""

    foods: dict[str, FoodItem]
    synonyms: tuple[tuple[str, str], ...] = ()
    _keys_by_length: tuple[str, ...] = field(init=False, repr=False, compare=False)

    @classmethod
    def default(cls) -> "FoodCatalog":
        """Build the bundled catalog."""
        foods: dict[str, FoodItem] = {}
        for keys, item in _ENTRIES:
            for key in keys:
                foods[key] = item
        return cls(foods=foods, synonyms=_SYNONYMS)

    def __post_init__(self) -> None:
        # Longest keys first so "cheeseburger" wins over "cheese".
        ordered = sorted(self.foods, key=len, reverse=True)
        object.__setattr__(self, "_keys_by_length", tuple(ordered))

    def find(self, search: str) -> FoodItem | None:
        """Return the best catalog match for a free-text search."""
        normalized = search.lower().strip()
        if not normalized:
            return None

        exact = self.foods.get(normalized)
        if exact is not None:
            return exact

        for key in self._keys_by_length:
            if key in normalized:
                return self.foods[key]

        for key in self._keys_by_length:
            if normalized in key:
                return self.foods[key]

        for phrase, key in self.synonyms:
            if phrase in normalized and key in self.foods:
                return self.foods[key]

        return None

    def items(self) -> list[FoodItem]:
        """Return unique catalog items in catalog order."""
        seen: dict[str, FoodItem] = {}
        for item in self.foods.values():
            seen.setdefault(item.name, item)
        return list(seen.values())


DEFAULT_CATALOG = FoodCatalog.default()
