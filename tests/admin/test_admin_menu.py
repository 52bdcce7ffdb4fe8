# tests/admin/test_admin_menu.py

from food_api.models.cart import CartItem
from food_api.models.catalog import MenuItem

ADMIN_MENU_URL = "/api/admin/menu"


def test_menu_admin_requires_admin(client, auth_headers):
    assert client.post(ADMIN_MENU_URL, json={"name": "Soup", "price": 90}, headers=auth_headers).status_code == 403


def test_create_menu_item(client, admin_auth_headers, db_session):
    payload = {"name": " Pepperoni ", "price": 310.5, "category": "Pizza", "description": "  ", "image_url": ""}

    response = client.post(ADMIN_MENU_URL, json=payload, headers=admin_auth_headers)

    assert response.status_code == 201
    data = response.json()
    assert data["name"] == "Pepperoni"
    assert data["price"] == 310.5
    assert data["description"] is None
    assert data["image_url"] is None
    assert data["available"] is True

    menu = client.get("/api/menu").json()
    assert [item["id"] for item in menu] == [data["id"]]


def test_create_rejects_negative_price(client, admin_auth_headers):
    response = client.post(ADMIN_MENU_URL, json={"name": "Soup", "price": -1}, headers=admin_auth_headers)
    assert response.status_code == 422


def test_blank_category_is_stored_as_none(client, admin_auth_headers, db_session):
    response = client.post(ADMIN_MENU_URL, json={"name": "Bread", "price": 20, "category": " "}, headers=admin_auth_headers)

    stored = db_session.get(MenuItem, response.json()["id"])
    assert stored.category is None


def test_price_update_reaches_cart(client, admin_auth_headers, auth_headers, shop_settings, make_menu_item):
    pizza = make_menu_item(price="200.00")
    client.post("/api/cart", json={"menu_item_id": pizza.id, "quantity": 2}, headers=auth_headers)

    payload = {"name": "Margherita", "price": 180, "category": "Pizza"}
    updated = client.put(f"{ADMIN_MENU_URL}/{pizza.id}", json=payload, headers=admin_auth_headers)
    assert updated.status_code == 200

    cart = client.get("/api/cart", headers=auth_headers).json()
    assert cart["subtotal"] == 360.0


def test_hidden_item_stays_in_admin_listing(client, admin_auth_headers, make_menu_item):
    pizza = make_menu_item()
    payload = {"name": pizza.name, "price": 250, "category": "Pizza", "available": False}

    client.put(f"{ADMIN_MENU_URL}/{pizza.id}", json=payload, headers=admin_auth_headers)

    assert client.get("/api/menu").json() == []
    listing = client.get(ADMIN_MENU_URL, headers=admin_auth_headers).json()
    assert [(item["id"], item["available"]) for item in listing] == [(pizza.id, False)]


def test_delete_menu_item_drops_cart_lines(client, admin_auth_headers, auth_headers, make_menu_item, db_session):
    pizza = make_menu_item()
    client.post("/api/cart", json={"menu_item_id": pizza.id, "quantity": 1}, headers=auth_headers)

    deleted = client.delete(f"{ADMIN_MENU_URL}/{pizza.id}", headers=admin_auth_headers)

    assert deleted.status_code == 200
    assert deleted.json() == {"message": "Menu item deleted"}
    assert db_session.query(CartItem).count() == 0
    assert client.get("/api/cart", headers=auth_headers).json()["items"] == []


def test_missing_menu_item_is_404(client, admin_auth_headers):
    payload = {"name": "Ghost", "price": 1}

    assert client.put(f"{ADMIN_MENU_URL}/999", json=payload, headers=admin_auth_headers).status_code == 404
    assert client.delete(f"{ADMIN_MENU_URL}/999", headers=admin_auth_headers).status_code == 404
