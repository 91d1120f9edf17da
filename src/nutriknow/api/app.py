"""FastAPI application factory."""

import logging
from dataclasses import asdict

from fastapi import FastAPI, HTTPException, Request, status

from nutriknow.api.models import (
    FavoriteView,
    ItemView,
    NutrientView,
    QuantityUpdate,
    QuantityView,
    SelectionView,
    TotalsView,
)
from nutriknow.app_logging import configure_logging
from nutriknow.containers import AppContainer
from nutriknow.domain.catalog import ALL_CATEGORIES, FoodItem
from nutriknow.services.daily_values import summarize_totals
from nutriknow.services.search import categories, visible_items


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="NutriKnow")
    app.state.container = container

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/categories")
    async def list_categories(request: Request) -> dict[str, list[str]]:
        """Return category filter options."""
        state_container: AppContainer = request.app.state.container
        return {"categories": categories(state_container.catalog)}

    @app.get("/presets")
    async def list_presets(request: Request) -> dict[str, dict[str, list[str]]]:
        """Return meal presets in display order."""
        state_container: AppContainer = request.app.state.container
        return {
            "presets": {
                name: list(items)
                for name, items in state_container.catalog.presets.items()
            }
        }

    @app.get("/items")
    async def list_items(
        request: Request, search: str = "", category: str = ALL_CATEGORIES
    ) -> dict[str, list[ItemView]]:
        """Return visible items for a search term and category."""
        state_container: AppContainer = request.app.state.container
        items = visible_items(state_container.catalog, search, category)
        return {"items": [_item_view(state_container, item) for item in items]}

    @app.post("/items/{name}/quantity")
    async def update_quantity(
        name: str, update: QuantityUpdate, request: Request
    ) -> QuantityView:
        """Change an item's quantity by a delta."""
        state_container: AppContainer = request.app.state.container
        quantity = state_container.calculator_service.set_quantity(name, update.delta)
        if quantity is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown item: {name}"
            )
        return QuantityView(
            name=name, quantity=quantity, totals=_totals_rows(state_container)
        )

    @app.post("/presets/{name}/apply")
    async def apply_preset(name: str, request: Request) -> SelectionView:
        """Replace the selection with a preset."""
        state_container: AppContainer = request.app.state.container
        try:
            selection = state_container.calculator_service.apply_preset(name)
        except KeyError as exc:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Unknown preset: {name}",
            ) from exc
        return SelectionView(selection=selection, totals=_totals_rows(state_container))

    @app.post("/favorites/{name}/toggle")
    async def toggle_favorite(name: str, request: Request) -> FavoriteView:
        """Flip an item's favorite flag."""
        state_container: AppContainer = request.app.state.container
        if name not in state_container.catalog:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown item: {name}"
            )
        favorite = state_container.favorites_service.toggle_favorite(name)
        logger.info("Favorite %s set to %s", name, favorite)
        return FavoriteView(name=name, favorite=favorite)

    @app.get("/favorites")
    async def list_favorites(request: Request) -> dict[str, list[str]]:
        """Return favorite item names."""
        state_container: AppContainer = request.app.state.container
        return {"favorites": state_container.favorites_service.favorites()}

    @app.get("/recent")
    async def list_recent(request: Request) -> dict[str, list[str]]:
        """Return recently selected items, most recent first."""
        state_container: AppContainer = request.app.state.container
        return {"recent": state_container.calculator_service.recent_selections()}

    @app.post("/recent/{name}")
    async def add_recent(name: str, request: Request) -> QuantityView:
        """Add one serving of a recent item."""
        state_container: AppContainer = request.app.state.container
        quantity = state_container.calculator_service.add_recent(name)
        if quantity is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail=f"Unknown item: {name}"
            )
        return QuantityView(
            name=name, quantity=quantity, totals=_totals_rows(state_container)
        )

    @app.get("/totals")
    async def totals(request: Request) -> TotalsView:
        """Return the totals panel."""
        state_container: AppContainer = request.app.state.container
        return TotalsView(totals=_totals_rows(state_container))

    @app.get("/state")
    async def session_state(request: Request) -> dict[str, object]:
        """Return the whole session view."""
        state_container: AppContainer = request.app.state.container
        calculator = state_container.calculator_service
        return {
            "selection": calculator.selection(),
            "recent": calculator.recent_selections(),
            "favorites": state_container.favorites_service.favorites(),
            "totals": _totals_rows(state_container),
        }

    @app.post("/reset")
    async def reset(request: Request) -> SelectionView:
        """Clear the selection."""
        state_container: AppContainer = request.app.state.container
        state_container.calculator_service.reset()
        return SelectionView(
            selection=state_container.calculator_service.selection(),
            totals=_totals_rows(state_container),
        )

    return app


def _item_view(container: AppContainer, item: FoodItem) -> ItemView:
    return ItemView(
        **asdict(item),
        quantity=container.calculator_service.quantity(item.name),
        favorite=container.favorites_service.is_favorite(item.name),
    )


def _totals_rows(container: AppContainer) -> list[NutrientView]:
    rows = summarize_totals(
        container.calculator_service.totals, container.catalog.daily_values
    )
    return [NutrientView(**asdict(row)) for row in rows]
