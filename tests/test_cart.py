# tests/test_cart.py

from datetime import timedelta

import pytest

from food_api.core.config import settings
from food_api.models.cart import CartItem


def add_to_cart(client, headers, menu_item_id, quantity=1, **params):
    return client.post("/api/cart", json={"menu_item_id": menu_item_id, "quantity": quantity}, headers=headers, params=params)


def test_cart_requires_token(client):
    response = client.get("/api/cart")
    assert response.status_code == 401


def test_empty_cart_has_no_delivery_fee(client, auth_headers, shop_settings):
    response = client.get("/api/cart", headers=auth_headers)

    assert response.status_code == 200
    data = response.json()
    assert data["items"] == []
    assert data["subtotal"] == 0
    assert data["delivery_fee"] == 30.0
    assert data["discount"] == 0
    assert data["coupon"] is None
    assert data["total"] == 0


def test_cart_totals(client, auth_headers, shop_settings, make_menu_item):
    pizza = make_menu_item(price="250.00", image_url="/uploads/pizza.jpg")
    cola = make_menu_item(name="Cola", price="49.50", category="Drinks", image_url="https://cdn.example.com/cola.png")

    add_to_cart(client, auth_headers, pizza.id, 2)
    response = add_to_cart(client, auth_headers, cola.id, 1)

    assert response.status_code == 200
    body = response.json()
    assert body["ok"] is True
    cart = body["cart"]
    assert [item["menu_item_id"] for item in cart["items"]] == [pizza.id, cola.id]
    assert cart["items"][0]["total_price"] == 500.0
    assert cart["items"][0]["image_url"] == f"{settings.MEDIA_BASE_URL.rstrip('/')}/uploads/pizza.jpg"
    assert cart["items"][1]["image_url"] == "https://cdn.example.com/cola.png"
    assert cart["subtotal"] == 549.5
    assert cart["total"] == 579.5


def test_cart_without_settings_row_uses_zero_fee(client, auth_headers, make_menu_item):
    pizza = make_menu_item(price="100.00")
    add_to_cart(client, auth_headers, pizza.id, 1)

    data = client.get("/api/cart", headers=auth_headers).json()
    assert data["delivery_fee"] == 0
    assert data["total"] == 100.0


def test_add_overwrites_quantity(client, auth_headers, db_session, test_user, make_menu_item):
    pizza = make_menu_item()

    add_to_cart(client, auth_headers, pizza.id, 2)
    add_to_cart(client, auth_headers, pizza.id, 5)

    rows = db_session.query(CartItem).filter_by(user_id=test_user.id).all()
    assert len(rows) == 1
    assert rows[0].quantity == 5


def test_add_unknown_or_unavailable_item(client, auth_headers, make_menu_item):
    hidden = make_menu_item(name="Seasonal", available=False)

    assert add_to_cart(client, auth_headers, 9999).status_code == 404
    assert add_to_cart(client, auth_headers, hidden.id).status_code == 404


def test_add_rejects_zero_quantity(client, auth_headers, make_menu_item):
    pizza = make_menu_item()
    assert add_to_cart(client, auth_headers, pizza.id, 0).status_code == 422


@pytest.mark.parametrize("method", ["patch", "put"])
def test_update_quantity(client, auth_headers, make_menu_item, method):
    pizza = make_menu_item(price="200.00")
    add_to_cart(client, auth_headers, pizza.id, 1)

    response = getattr(client, method)(f"/api/cart/{pizza.id}", json={"quantity": 3}, headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["cart"]["items"][0]["quantity"] == 3
    assert response.json()["cart"]["subtotal"] == 600.0


def test_update_to_zero_removes_line(client, auth_headers, make_menu_item):
    pizza = make_menu_item()
    add_to_cart(client, auth_headers, pizza.id, 2)

    response = client.patch(f"/api/cart/{pizza.id}", json={"quantity": 0}, headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["removed"] is True
    assert response.json()["cart"]["items"] == []


def test_delete_line(client, auth_headers, make_menu_item):
    pizza = make_menu_item()
    add_to_cart(client, auth_headers, pizza.id, 1)

    response = client.delete(f"/api/cart/{pizza.id}", headers=auth_headers)
    assert response.status_code == 200
    assert response.json()["cart"]["items"] == []

    assert client.delete(f"/api/cart/{pizza.id}", headers=auth_headers).status_code == 404


def test_clear_cart(client, auth_headers, make_menu_item):
    add_to_cart(client, auth_headers, make_menu_item().id, 1)
    add_to_cart(client, auth_headers, make_menu_item(name="Cola", category="Drinks").id, 2)

    response = client.delete("/api/cart", headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["cart"]["items"] == []


# --- Промокод в корзине ---

def test_cart_applies_percent_coupon(client, auth_headers, shop_settings, make_menu_item, make_coupon):
    make_coupon(code="SAVE10", type="PERCENT", discount="10")
    pizza = make_menu_item(price="250.00")
    add_to_cart(client, auth_headers, pizza.id, 2)

    response = client.get("/api/cart", params={"coupon": "  save10 "}, headers=auth_headers)

    data = response.json()
    assert data["subtotal"] == 500.0
    assert data["discount"] == 50.0
    assert data["coupon"]["code"] == "SAVE10"
    assert data["coupon"]["value"] == 10.0
    assert data["total"] == 480.0
    assert data["notifications"][0]["level"] == "success"


def test_cart_reports_rejected_coupon(client, auth_headers, shop_settings, make_menu_item, make_coupon, today):
    make_coupon(code="OLD", type="PERCENT", discount="10", end_date=today - timedelta(days=1))
    add_to_cart(client, auth_headers, make_menu_item(price="100.00").id, 1)

    data = client.get("/api/cart", params={"coupon": "old"}, headers=auth_headers).json()

    assert data["discount"] == 0
    assert data["coupon"] is None
    assert data["total"] == 130.0
    assert data["notifications"] == [{"level": "error", "message": "Coupon expired"}]


def test_cart_clamps_flat_discount(client, auth_headers, shop_settings, make_menu_item, make_coupon):
    make_coupon(code="WELCOME", type="FIRST_ORDER", discount="50")
    add_to_cart(client, auth_headers, make_menu_item(price="20.00").id, 1)

    data = client.get("/api/cart", params={"coupon": "WELCOME"}, headers=auth_headers).json()

    assert data["discount"] == 20.0
    assert data["total"] == 30.0


def test_cart_mutation_keeps_coupon(client, auth_headers, make_menu_item, make_coupon):
    make_coupon(code="PIZZA3", type="BUY_X", category="Pizza", min_qty=3, discount="40")
    pizza = make_menu_item(price="100.00")

    first = add_to_cart(client, auth_headers, pizza.id, 2, coupon="pizza3").json()["cart"]
    second = add_to_cart(client, auth_headers, pizza.id, 3, coupon="pizza3").json()["cart"]

    assert first["discount"] == 0
    assert second["discount"] == 40.0
    assert second["total"] == 260.0
