"""Tests for the calculator HTTP API."""

from fastapi.testclient import TestClient

from nutriknow.api.app import create_app
from nutriknow.containers import AppContainer
from nutriknow.services.favorites import InMemoryFavoritesStore


def _totals_by_nutrient(payload: dict[str, object]) -> dict[str, dict[str, object]]:
    return {row["nutrient"]: row for row in payload["totals"]}


def test_health(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_categories_and_presets(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    categories = client.get("/categories").json()["categories"]
    presets = client.get("/presets").json()["presets"]

    assert categories[0] == "All"
    assert list(presets) == ["Classic Combo", "Healthy Choice", "Chicken Lover"]
    assert presets["Healthy Choice"] == ["Grilled Chicken Sandwich", "Garden Salad"]


def test_items_filtered(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get("/items", params={"search": "fries", "category": "Sides"})

    assert response.status_code == 200
    items = response.json()["items"]
    assert [item["name"] for item in items] == ["French Fries"]
    assert items[0]["quantity"] == 0
    assert items[0]["favorite"] is False


def test_update_quantity_returns_totals(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post("/items/Hamburger/quantity", json={"delta": 2})

    assert response.status_code == 200
    data = response.json()
    assert data["quantity"] == 2
    calories = _totals_by_nutrient(data)["calories"]
    assert calories["value"] == 500
    assert calories["daily_value_percent"] == "25.0"
    assert client.get("/recent").json() == {"recent": ["Hamburger"]}


def test_update_quantity_clamps(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    client.post("/items/Hamburger/quantity", json={"delta": 1})
    response = client.post("/items/Hamburger/quantity", json={"delta": -5})

    assert response.json()["quantity"] == 0


def test_update_unknown_item_is_not_found(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post("/items/Taco/quantity", json={"delta": 1})

    assert response.status_code == 404
    assert container.calculator_service.totals.calories == 0


def test_apply_preset(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post("/presets/Classic Combo/apply")

    assert response.status_code == 200
    data = response.json()
    assert data["selection"]["Soda (16oz)"] == 1
    assert data["selection"]["Apple Pie"] == 0
    assert _totals_by_nutrient(data)["calories"]["value"] == 650


def test_apply_unknown_preset(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post("/presets/Brunch/apply")

    assert response.status_code == 404


def test_toggle_favorite_persists(
    container: AppContainer, favorites_store: InMemoryFavoritesStore
) -> None:
    client = TestClient(create_app(container))

    response = client.post("/favorites/Apple Pie/toggle")

    assert response.json() == {"name": "Apple Pie", "favorite": True}
    assert favorites_store.load() == {"Apple Pie"}
    assert client.get("/favorites").json() == {"favorites": ["Apple Pie"]}
    items = client.get("/items", params={"search": "pie"}).json()["items"]
    assert items[0]["favorite"] is True


def test_toggle_unknown_favorite(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post("/favorites/Taco/toggle")

    assert response.status_code == 404


def test_recent_button_adds_serving(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    client.post("/items/Garden Salad/quantity", json={"delta": 1})

    response = client.post("/recent/Garden Salad")

    assert response.json()["quantity"] == 2


def test_state_and_reset(container: AppContainer) -> None:
    client = TestClient(create_app(container))
    client.post("/presets/Chicken Lover/apply")

    state = client.get("/state").json()
    assert state["selection"]["Chicken Nuggets (6pc)"] == 1
    assert state["recent"] == []

    reset = client.post("/reset").json()
    assert set(reset["selection"].values()) == {0}
    totals = client.get("/totals").json()
    assert _totals_by_nutrient(totals)["sodium"]["value"] == 0
