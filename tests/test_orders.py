from decimal import Decimal


def test_place_order_returns_pending_receipt(client, menu, place_order):
    resp = place_order(client, "Asha", [(menu["Rice"], 2)])
    assert resp.status_code == 201, resp.text

    body = resp.json()
    assert body["message"] == "Order placed successfully"
    assert body["customer_name"] == "Asha"
    assert body["total_amount"] == "100.00"
    assert body["status"] == "Pending"
    assert body["items"] == [
        {"menu_item_id": menu["Rice"], "item_name": "Rice", "quantity": 2, "price_at_order": "50.00"}
    ]


def test_total_is_sum_of_item_lines(client, menu, place_order):
    resp = place_order(client, "Ravi", [(menu["Rice"], 1), (menu["Tea"], 3), (menu["Dal"], 2)])
    assert resp.status_code == 201, resp.text

    body = resp.json()
    expected = sum(Decimal(i["price_at_order"]) * i["quantity"] for i in body["items"])
    assert body["total_amount"] == f"{expected:.2f}" == "147.50"
    assert [i["item_name"] for i in body["items"]] == ["Rice", "Tea", "Dal"]


def test_unknown_menu_item_rolls_back_whole_order(admin_client, menu, place_order):
    before = admin_client.get("/api/admin/orders").json()

    resp = place_order(admin_client, "Asha", [(menu["Rice"], 1), (999, 1)])
    assert resp.status_code == 404
    assert "999" in resp.json()["error"]

    after = admin_client.get("/api/admin/orders").json()
    assert after == before
    assert admin_client.get("/api/admin/preparation-summary").json() == []


def test_empty_cart_is_rejected(client, menu):
    resp = client.post("/api/orders", json={"customerName": "Asha", "items": []})
    assert resp.status_code == 400
    assert resp.json() == {"error": "Please select at least one item"}


def test_blank_customer_name_is_rejected(client, menu, place_order):
    resp = place_order(client, "   ", [(menu["Rice"], 1)])
    assert resp.status_code == 400
    assert resp.json()["error"] == "Customer name is required"


def test_zero_quantity_fails_validation(client, menu, place_order):
    resp = place_order(client, "Asha", [(menu["Rice"], 0)])
    assert resp.status_code == 422


def test_get_order_is_repeatable(client, menu, place_order):
    order_id = place_order(client, "Asha", [(menu["Rice"], 2), (menu["Tea"], 1)]).json()["id"]

    first = client.get(f"/api/orders/{order_id}")
    second = client.get(f"/api/orders/{order_id}")
    assert first.status_code == 200
    assert first.json() == second.json()
    assert first.json()["total_amount"] == "112.50"


def test_get_missing_order(client):
    resp = client.get("/api/orders/12345")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Order not found"}


def test_update_replaces_all_items(client, menu, place_order):
    created = place_order(client, "Asha", [(menu["Rice"], 2)]).json()

    resp = client.put(
        f"/api/orders/{created['id']}",
        json={"customerName": "Asha K", "items": [{"menuItemId": menu["Dal"], "quantity": 1}]},
    )
    assert resp.status_code == 200, resp.text

    body = resp.json()
    assert body["message"] == "Order updated successfully"
    order = body["order"]
    assert order["id"] == created["id"]
    assert order["customer_name"] == "Asha K"
    assert order["total_amount"] == "30.00"
    assert order["status"] == "Pending"
    assert len(order["items"]) == 1
    assert menu["Rice"] not in [i["menu_item_id"] for i in order["items"]]

    fetched = client.get(f"/api/orders/{created['id']}").json()
    assert fetched["items"] == order["items"]


def test_update_keeps_status(admin_client, menu, place_order):
    order_id = place_order(admin_client, "Asha", [(menu["Rice"], 1)]).json()["id"]
    admin_client.put(f"/api/admin/orders/{order_id}/status", json={"status": "Ready"})

    resp = admin_client.put(
        f"/api/orders/{order_id}",
        json={"customerName": "Asha", "items": [{"menuItemId": menu["Tea"], "quantity": 2}]},
    )
    assert resp.status_code == 200
    assert resp.json()["order"]["status"] == "Ready"
    assert resp.json()["order"]["total_amount"] == "25.00"


def test_failed_update_leaves_order_untouched(client, menu, place_order):
    created = place_order(client, "Asha", [(menu["Rice"], 2)]).json()

    resp = client.put(
        f"/api/orders/{created['id']}",
        json={
            "customerName": "Someone else",
            "items": [{"menuItemId": menu["Dal"], "quantity": 1}, {"menuItemId": 999, "quantity": 1}],
        },
    )
    assert resp.status_code == 404
    assert "999" in resp.json()["error"]

    order = client.get(f"/api/orders/{created['id']}").json()
    assert order["customer_name"] == "Asha"
    assert order["total_amount"] == "100.00"
    assert order["order_date"] == created["order_date"]
    assert [(i["item_name"], i["quantity"]) for i in order["items"]] == [("Rice", 2)]


def test_update_missing_order(client, menu):
    resp = client.put(
        "/api/orders/4242",
        json={"customerName": "Asha", "items": [{"menuItemId": menu["Rice"], "quantity": 1}]},
    )
    assert resp.status_code == 404
    assert "4242" in resp.json()["error"]


def test_update_with_empty_cart_is_rejected(client, menu, place_order):
    order_id = place_order(client, "Asha", [(menu["Rice"], 1)]).json()["id"]

    resp = client.put(f"/api/orders/{order_id}", json={"customerName": "Asha", "items": []})
    assert resp.status_code == 400
    assert len(client.get(f"/api/orders/{order_id}").json()["items"]) == 1


def test_price_snapshot_survives_menu_price_change(admin_client, menu, place_order):
    order_id = place_order(admin_client, "Asha", [(menu["Rice"], 2)]).json()["id"]

    meal_type_id = next(
        m["meal_type_id"] for m in admin_client.get("/api/admin/all-menu-items").json()
        if m["id"] == menu["Rice"]
    )
    resp = admin_client.put(
        f"/api/admin/menu-items/{menu['Rice']}",
        json={"name": "Rice", "price": "80.00", "mealTypeId": meal_type_id, "isAvailable": True},
    )
    assert resp.status_code == 200
    assert resp.json()["price"] == "80.00"

    order = admin_client.get(f"/api/orders/{order_id}").json()
    assert order["total_amount"] == "100.00"
    assert order["items"][0]["price_at_order"] == "50.00"


def test_duplicate_lines_are_kept(client, menu, place_order):
    body = place_order(client, "Asha", [(menu["Tea"], 1), (menu["Tea"], 2)]).json()
    assert [i["quantity"] for i in body["items"]] == [1, 2]
    assert body["total_amount"] == "37.50"


def test_store_failure_is_reported_as_server_error(client, menu, place_order):
    from app.main import app
    from app.api.v1.dependencies.services import get_order_service
    from app.services.order_service import OrderService

    app.dependency_overrides[get_order_service] = lambda: OrderService("unconfigured")
    try:
        resp = place_order(client, "Asha", [(menu["Rice"], 1)])
    finally:
        app.dependency_overrides.clear()

    assert resp.status_code == 500
    body = resp.json()
    assert body["error"] == "Failed to place order"
    assert body["details"]


class _RefusedTransaction:
    async def __aenter__(self):
        raise ConnectionRefusedError(111, "Connect call failed")

    async def __aexit__(self, *exc_info):
        return False


def test_unreachable_database_is_reported_as_server_error(client, menu, place_order, monkeypatch):
    order_id = place_order(client, "Asha", [(menu["Rice"], 1)]).json()["id"]
    monkeypatch.setattr(
        "app.services.order_service.in_transaction",
        lambda connection_name=None: _RefusedTransaction()
    )

    resp = place_order(client, "Asha", [(menu["Rice"], 1)])
    assert resp.status_code == 500
    assert resp.json()["error"] == "Failed to place order"
    assert "Connect call failed" in resp.json()["details"]

    resp = client.put(
        f"/api/orders/{order_id}",
        json={"customerName": "Asha", "items": [{"menuItemId": menu["Dal"], "quantity": 1}]},
    )
    assert resp.status_code == 500
    assert resp.json()["error"] == "Failed to update order"
    assert resp.json()["details"]


def test_out_of_range_order_id_is_rejected(client, menu):
    huge = 2 ** 70
    assert client.get(f"/api/orders/{huge}").status_code == 422
    assert client.get("/api/orders/0").status_code == 422
    resp = client.put(
        f"/api/orders/{huge}",
        json={"customerName": "Asha", "items": [{"menuItemId": menu["Rice"], "quantity": 1}]},
    )
    assert resp.status_code == 422
