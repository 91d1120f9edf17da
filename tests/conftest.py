"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from nutriknow.catalog_data import default_catalog
from nutriknow.config import Settings
from nutriknow.containers import AppContainer, build_container
from nutriknow.domain.catalog import Catalog
from nutriknow.services.calculator import CalculatorService
from nutriknow.services.favorites import InMemoryFavoritesStore


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    name: str
    response_queue: dict[str, list[list[dict[str, object]]]] = field(
        default_factory=lambda: {"select": [], "upsert": []}
    )
    last_payload: object | None = None
    last_filters: list[tuple[str, object]] = field(default_factory=list)
    last_on_conflict: str | None = None

    def queue(self, action: str, data: list[dict[str, object]]) -> None:
        self.response_queue[action].append(data)

    def select(self, *_args) -> "FakeTable":
        self._action = "select"
        return self

    def upsert(  # type: ignore[no-untyped-def]
        self, payload, on_conflict: str = ""
    ) -> "FakeTable":
        self._action = "upsert"
        self.last_payload = payload
        self.last_on_conflict = on_conflict
        return self

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def limit(self, _count: int) -> "FakeTable":
        return self

    def execute(self) -> FakeResponse:
        action = getattr(self, "_action", "select")
        queue = self.response_queue.get(action, [])
        data = queue.pop(0) if queue else []
        return FakeResponse(data=data)


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


@pytest.fixture
def settings() -> Settings:
    return Settings(favorites_backend="memory", log_level="DEBUG")


@pytest.fixture
def catalog() -> Catalog:
    return default_catalog()


@pytest.fixture
def calculator(catalog: Catalog) -> CalculatorService:
    return CalculatorService(catalog)


@pytest.fixture
def favorites_store() -> InMemoryFavoritesStore:
    return InMemoryFavoritesStore()


@pytest.fixture
def container(
    settings: Settings,
    catalog: Catalog,
    favorites_store: InMemoryFavoritesStore,
) -> AppContainer:
    return build_container(settings, catalog=catalog, favorites_store=favorites_store)
