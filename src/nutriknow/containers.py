"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from nutriknow.adapters.json_file_favorites_store import JsonFileFavoritesStore
from nutriknow.adapters.supabase_favorites_store import SupabaseFavoritesStore
from nutriknow.catalog_data import default_catalog
from nutriknow.config import Settings
from nutriknow.domain.catalog import Catalog
from nutriknow.services.calculator import CalculatorService
from nutriknow.services.favorites import (
    FavoritesService,
    FavoritesStore,
    InMemoryFavoritesStore,
)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog: Catalog
    calculator_service: CalculatorService
    favorites_service: FavoritesService


def build_favorites_store(settings: Settings) -> FavoritesStore:
    """Create the favorites store selected by settings."""
    if settings.favorites_backend == "supabase":
        if not settings.supabase_url or not settings.supabase_service_key:
            raise ValueError(
                "supabase_url and supabase_service_key are required "
                "for the supabase favorites backend"
            )
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return SupabaseFavoritesStore(
            client, key=settings.favorites_key, table=settings.supabase_table
        )
    if settings.favorites_backend == "file":
        return JsonFileFavoritesStore(
            settings.favorites_path, key=settings.favorites_key
        )
    return InMemoryFavoritesStore()


def build_container(
    settings: Settings | None = None,
    catalog: Catalog | None = None,
    favorites_store: FavoritesStore | None = None,
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    resolved_catalog = catalog or default_catalog()
    store = favorites_store or build_favorites_store(resolved_settings)
    return AppContainer(
        settings=resolved_settings,
        catalog=resolved_catalog,
        calculator_service=CalculatorService(
            resolved_catalog, recent_limit=resolved_settings.recent_limit
        ),
        favorites_service=FavoritesService(store=store, catalog=resolved_catalog),
    )
