"""Static food catalog, meal presets and daily recommended values."""

from nutriknow.domain.catalog import Catalog, FoodItem

FOOD_ITEMS: tuple[FoodItem, ...] = (
    FoodItem(
        name="Hamburger",
        category="Burgers",
        calories=250,
        protein=12,
        carbs=31,
        fat=9,
        sodium=480,
        sugar=4,
        fiber=2,
    ),
    FoodItem(
        name="Cheeseburger",
        category="Burgers",
        calories=300,
        protein=15,
        carbs=33,
        fat=12,
        sodium=750,
        sugar=6,
        fiber=2,
    ),
    FoodItem(
        name="French Fries",
        category="Sides",
        calories=220,
        protein=3,
        carbs=29,
        fat=11,
        sodium=190,
        sugar=0,
        fiber=3,
    ),
    FoodItem(
        name="Chicken Nuggets (6pc)",
        category="Chicken",
        calories=280,
        protein=13,
        carbs=18,
        fat=17,
        sodium=540,
        sugar=0,
        fiber=1,
    ),
    FoodItem(
        name="Soda (16oz)",
        category="Beverages",
        calories=180,
        protein=0,
        carbs=45,
        fat=0,
        sodium=30,
        sugar=45,
        fiber=0,
    ),
    FoodItem(
        name="Garden Salad",
        category="Salads",
        calories=120,
        protein=8,
        carbs=10,
        fat=7,
        sodium=380,
        sugar=4,
        fiber=4,
    ),
    FoodItem(
        name="Grilled Chicken Sandwich",
        category="Chicken",
        calories=380,
        protein=28,
        carbs=39,
        fat=12,
        sodium=680,
        sugar=6,
        fiber=3,
    ),
    FoodItem(
        name="Apple Pie",
        category="Desserts",
        calories=250,
        protein=2,
        carbs=32,
        fat=13,
        sodium=170,
        sugar=15,
        fiber=1,
    ),
)

MEAL_PRESETS: dict[str, list[str]] = {
    "Classic Combo": ["Hamburger", "French Fries", "Soda (16oz)"],
    "Healthy Choice": ["Grilled Chicken Sandwich", "Garden Salad"],
    "Chicken Lover": ["Chicken Nuggets (6pc)", "French Fries", "Soda (16oz)"],
}

# Daily recommended values (sodium in mg, calories in kcal, the rest in g).
DAILY_VALUES: dict[str, float] = {
    "calories": 2000,
    "protein": 50,
    "carbs": 275,
    "fat": 78,
    "sodium": 2300,
    "sugar": 50,
    "fiber": 28,
}


def default_catalog() -> Catalog:
    """Return the built-in catalog."""
    return Catalog.build(FOOD_ITEMS, MEAL_PRESETS, DAILY_VALUES)
