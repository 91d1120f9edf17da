"""Pydantic models for the calculator API."""

from pydantic import BaseModel, Field


class QuantityUpdate(BaseModel):
    """Request body for changing an item's quantity."""

    delta: int = Field(default=1)


class ItemView(BaseModel):
    """Catalog item with the session's quantity and favorite flag."""

    name: str
    category: str
    calories: float
    protein: float
    carbs: float
    fat: float
    sodium: float
    sugar: float
    fiber: float
    quantity: int
    favorite: bool


class NutrientView(BaseModel):
    """Totals panel row."""

    nutrient: str
    value: float
    unit: str
    daily_value_percent: str


class TotalsView(BaseModel):
    """Totals panel payload."""

    totals: list[NutrientView]


class QuantityView(BaseModel):
    """Result of a quantity change."""

    name: str
    quantity: int
    totals: list[NutrientView]


class SelectionView(BaseModel):
    """Full selection with totals."""

    selection: dict[str, int]
    totals: list[NutrientView]


class FavoriteView(BaseModel):
    """Result of a favorite toggle."""

    name: str
    favorite: bool
