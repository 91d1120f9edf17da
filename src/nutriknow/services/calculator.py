"""Selection and totals engine for the nutrition calculator."""

import logging
from dataclasses import dataclass, field

from nutriknow.domain.calculator import (
    DEFAULT_RECENT_LIMIT,
    NutrientTotals,
    RecentSelections,
)
from nutriknow.domain.catalog import Catalog

_logger = logging.getLogger(__name__)


@dataclass
class CalculatorService:
    """Holds a session's selected quantities and the totals derived from them."""

    catalog: Catalog
    recent_limit: int = DEFAULT_RECENT_LIMIT
    _quantities: dict[str, int] = field(default_factory=dict, init=False)
    _totals: NutrientTotals = field(default_factory=NutrientTotals, init=False)
    _recent: RecentSelections = field(default_factory=RecentSelections, init=False)

    def __post_init__(self) -> None:
        self._recent = RecentSelections(limit=self.recent_limit)

    @property
    def totals(self) -> NutrientTotals:
        """Current totals for the selection."""
        return self._totals

    def set_quantity(self, item_name: str, delta: int) -> int | None:
        """Adjust an item's quantity by delta, clamping at zero.

        Returns the new quantity, or None when the item is not in the catalog.
        Unknown items leave the selection, totals and recent list untouched.
        """
        if item_name not in self.catalog:
            _logger.warning("Ignoring quantity update for unknown item: %s", item_name)
            return None
        quantity = max(0, self._quantities.get(item_name, 0) + delta)
        self._quantities[item_name] = quantity
        if delta > 0:
            self._recent.push(item_name)
        self._recompute()
        return quantity

    def add_recent(self, item_name: str) -> int | None:
        """Add one more serving of a recently selected item."""
        return self.set_quantity(item_name, 1)

    def apply_preset(self, preset_name: str) -> dict[str, int]:
        """Replace the selection with one serving of each preset item."""
        item_names = self.catalog.preset(preset_name)
        for item in self.catalog.items:
            self._quantities[item.name] = 0
        for name in item_names:
            self._quantities[name] = 1
        self._recompute()
        _logger.info("Applied preset %s: %s", preset_name, ", ".join(item_names))
        return self.selection()

    def reset(self) -> None:
        """Clear every selected quantity."""
        self._quantities.clear()
        self._recompute()

    def quantity(self, item_name: str) -> int:
        """Return the selected quantity for an item (zero when unselected)."""
        return self._quantities.get(item_name, 0)

    def selection(self) -> dict[str, int]:
        """Return quantities for every catalog item in catalog order."""
        return {name: self.quantity(name) for name in self.catalog.names()}

    def recent_selections(self) -> list[str]:
        """Return recently incremented items, most recent first."""
        return self._recent.as_list()

    def _recompute(self) -> None:
        self._totals = NutrientTotals.from_selection(self.catalog, self._quantities)
