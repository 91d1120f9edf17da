"""Daily value percentages for nutrient totals."""

from collections.abc import Mapping

from nutriknow.domain.calculator import NutrientSummary, NutrientTotals
from nutriknow.domain.catalog import NUTRIENT_UNITS


def daily_value_percentage(
    nutrient: str, value: float, daily_values: Mapping[str, float]
) -> str:
    """Return value as a percent of the daily target, to one decimal place.

    The result is not clamped, so totals above the target read over 100.
    """
    return f"{value / daily_values[nutrient] * 100:.1f}"


def summarize_totals(
    totals: NutrientTotals, daily_values: Mapping[str, float]
) -> list[NutrientSummary]:
    """Build one summary row per nutrient for the totals panel."""
    return [
        NutrientSummary(
            nutrient=nutrient,
            value=value,
            unit=NUTRIENT_UNITS[nutrient],
            daily_value_percent=daily_value_percentage(nutrient, value, daily_values),
        )
        for nutrient, value in totals.as_dict().items()
    ]
