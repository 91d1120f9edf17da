"""Catalog domain models."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

NUTRIENTS: tuple[str, ...] = (
    "calories",
    "protein",
    "carbs",
    "fat",
    "sodium",
    "sugar",
    "fiber",
)

NUTRIENT_UNITS: dict[str, str] = {
    "calories": "kcal",
    "protein": "g",
    "carbs": "g",
    "fat": "g",
    "sodium": "mg",
    "sugar": "g",
    "fiber": "g",
}

ALL_CATEGORIES = "All"


@dataclass(frozen=True)
class FoodItem:
    """A food item with nutrient facts per serving."""

    name: str
    category: str
    calories: float
    protein: float
    carbs: float
    fat: float
    sodium: float
    sugar: float
    fiber: float

    def nutrient(self, name: str) -> float:
        """Return the amount of a nutrient in one serving."""
        if name not in NUTRIENTS:
            raise KeyError(name)
        return getattr(self, name)


@dataclass(frozen=True)
class Catalog:
    """Static food items, meal presets and daily recommended values."""

    items: tuple[FoodItem, ...]
    presets: Mapping[str, tuple[str, ...]]
    daily_values: Mapping[str, float]
    _by_name: dict[str, FoodItem] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        by_name: dict[str, FoodItem] = {}
        for item in self.items:
            if item.name in by_name:
                raise ValueError(f"Duplicate catalog item: {item.name}")
            for nutrient in NUTRIENTS:
                if item.nutrient(nutrient) < 0:
                    raise ValueError(
                        f"Negative {nutrient} for catalog item: {item.name}"
                    )
            by_name[item.name] = item
        for nutrient in NUTRIENTS:
            target = self.daily_values.get(nutrient)
            if target is None or target <= 0:
                raise ValueError(f"Missing or non-positive daily value: {nutrient}")
        for preset_name, item_names in self.presets.items():
            unknown = [name for name in item_names if name not in by_name]
            if unknown:
                raise ValueError(
                    f"Preset {preset_name!r} references unknown items: "
                    + ", ".join(unknown)
                )
        object.__setattr__(self, "_by_name", by_name)

    @classmethod
    def build(
        cls,
        items: Sequence[FoodItem],
        presets: Mapping[str, Sequence[str]],
        daily_values: Mapping[str, float],
    ) -> "Catalog":
        """Create a validated catalog from plain sequences and mappings."""
        return cls(
            items=tuple(items),
            presets={name: tuple(names) for name, names in presets.items()},
            daily_values=dict(daily_values),
        )

    def get(self, name: str) -> FoodItem | None:
        """Return an item by name, if present."""
        return self._by_name.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def names(self) -> list[str]:
        """Return item names in catalog order."""
        return [item.name for item in self.items]

    def preset(self, name: str) -> tuple[str, ...]:
        """Return the item names for a preset, raising KeyError if unknown."""
        return self.presets[name]
