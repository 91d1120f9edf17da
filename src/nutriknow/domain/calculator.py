"""Calculator domain models."""

from dataclasses import dataclass, field

from nutriknow.domain.catalog import NUTRIENTS, Catalog

DEFAULT_RECENT_LIMIT = 5


@dataclass(frozen=True)
class NutrientTotals:
    """Aggregated nutrient amounts for a selection."""

    calories: float = 0
    protein: float = 0
    carbs: float = 0
    fat: float = 0
    sodium: float = 0
    sugar: float = 0
    fiber: float = 0

    @classmethod
    def from_selection(
        cls, catalog: Catalog, selection: dict[str, int]
    ) -> "NutrientTotals":
        """Fold the whole catalog weighted by the selected quantities."""
        values = dict.fromkeys(NUTRIENTS, 0)
        for item in catalog.items:
            quantity = selection.get(item.name, 0)
            for nutrient in NUTRIENTS:
                values[nutrient] += item.nutrient(nutrient) * quantity
        return cls(**values)

    def as_dict(self) -> dict[str, float]:
        """Return totals keyed by nutrient name in display order."""
        return {nutrient: getattr(self, nutrient) for nutrient in NUTRIENTS}


@dataclass(frozen=True)
class NutrientSummary:
    """A single row of the totals panel."""

    nutrient: str
    value: float
    unit: str
    daily_value_percent: str


@dataclass
class RecentSelections:
    """Most-recent-first list of selected item names without duplicates."""

    limit: int = DEFAULT_RECENT_LIMIT
    _names: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.limit < 1:
            raise ValueError(
                f"Recent selections limit must be at least 1: {self.limit}"
            )

    def push(self, name: str) -> None:
        """Move a name to the front, dropping the oldest past the limit."""
        if self._names and self._names[0] == name:
            return
        if name in self._names:
            self._names.remove(name)
        self._names.insert(0, name)
        del self._names[self.limit :]

    def as_list(self) -> list[str]:
        """Return a copy of the names, most recent first."""
        return list(self._names)

    def __len__(self) -> int:
        return len(self._names)
