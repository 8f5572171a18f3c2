import os

os.environ["DATABASE_URL"] = "sqlite://:memory:"
os.environ["SESSION_COOKIE_SECURE"] = "false"
os.environ["ADMIN_USERNAME"] = "admin"
os.environ["ADMIN_PASSWORD"] = "admin123"
os.environ["MEAL_TYPES"] = "Breakfast,Lunch,Snacks"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.main import app  # noqa: E402

ADMIN_CREDENTIALS = {"username": "admin", "password": "admin123"}


@pytest.fixture
def client():
    # Each lifespan run opens a fresh in-memory database
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_client(client):
    resp = client.post("/api/admin/login", json=ADMIN_CREDENTIALS)
    assert resp.status_code == 200, resp.text
    return client


@pytest.fixture
def menu(admin_client):
    """Menu item ids by name: Rice 50.00, Dal 30.00, Tea 12.50."""
    meal_types = admin_client.get("/api/meal-types").json()
    lunch_id = next(m["id"] for m in meal_types if m["name"] == "Lunch")
    snacks_id = next(m["id"] for m in meal_types if m["name"] == "Snacks")

    items = {}
    for name, price, meal_type_id in (
        ("Rice", "50.00", lunch_id),
        ("Dal", "30.00", lunch_id),
        ("Tea", "12.50", snacks_id),
    ):
        resp = admin_client.post(
            "/api/admin/menu-items",
            json={"name": name, "price": price, "mealTypeId": meal_type_id, "isAvailable": True},
        )
        assert resp.status_code == 201, resp.text
        items[name] = resp.json()["id"]
    return items


@pytest.fixture
def place_order():
    """Post an order of (menu_item_id, quantity) lines."""

    def _place(client, customer_name, lines):
        return client.post(
            "/api/orders",
            json={
                "customerName": customer_name,
                "items": [{"menuItemId": item_id, "quantity": qty} for item_id, qty in lines],
            },
        )

    return _place
