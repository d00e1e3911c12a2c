"""Tests for cart item routes."""

from Bootstrap_module.default_data import DEFAULT_CART, DEFAULT_PRODUCTS

IN_CART = DEFAULT_CART[0]["product_id"]
NOT_IN_CART = DEFAULT_PRODUCTS[3]["id"]


def test_list_cart_items(client, seeded):
    items = client.get("/api/cart-items").json()

    assert [(i["productId"], i["quantity"], i["deliveryOptionId"]) for i in items] == [
        (c["product_id"], c["quantity"], c["delivery_option_id"]) for c in DEFAULT_CART
    ]
    assert all("product" not in i for i in items)


def test_list_cart_items_with_product(client, seeded):
    items = client.get("/api/cart-items", params={"expand": "product"}).json()

    assert items[0]["product"]["id"] == IN_CART
    assert items[0]["product"]["priceCents"] == DEFAULT_PRODUCTS[0]["price_cents"]


def test_add_new_product_to_cart(client, seeded):
    response = client.post("/api/cart-items", json={"productId": NOT_IN_CART, "quantity": 3})

    assert response.status_code == 201
    body = response.json()
    assert body["productId"] == NOT_IN_CART
    assert body["quantity"] == 3
    assert body["deliveryOptionId"] == "1"
    assert len(client.get("/api/cart-items").json()) == len(DEFAULT_CART) + 1


def test_add_defaults_to_quantity_one(client, seeded):
    response = client.post("/api/cart-items", json={"productId": NOT_IN_CART})

    assert response.json()["quantity"] == 1


def test_adding_existing_product_increments_quantity(client, seeded):
    response = client.post("/api/cart-items", json={"productId": IN_CART, "quantity": 2})

    assert response.status_code == 200
    assert response.json()["quantity"] == DEFAULT_CART[0]["quantity"] + 2
    assert len(client.get("/api/cart-items").json()) == len(DEFAULT_CART)


def test_add_unknown_product(client, seeded):
    response = client.post("/api/cart-items", json={"productId": "nope", "quantity": 1})

    assert response.status_code == 400
    assert response.json() == {"error": "Product not found"}


def test_add_quantity_out_of_range(client, seeded):
    for quantity in (0, 11, -1):
        response = client.post("/api/cart-items", json={"productId": NOT_IN_CART, "quantity": quantity})
        assert response.status_code == 400
        assert response.json() == {"error": "Quantity must be a number between 1 and 10"}


def test_update_cart_item(client, seeded):
    response = client.put(
        f"/api/cart-items/{IN_CART}",
        json={"quantity": 5, "deliveryOptionId": "3"},
    )

    assert response.status_code == 200
    assert response.json()["quantity"] == 5
    assert response.json()["deliveryOptionId"] == "3"


def test_update_with_invalid_delivery_option(client, seeded):
    response = client.put(f"/api/cart-items/{IN_CART}", json={"deliveryOptionId": "99"})

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid delivery option"}


def test_update_missing_cart_item(client, seeded):
    response = client.put(f"/api/cart-items/{NOT_IN_CART}", json={"quantity": 2})

    assert response.status_code == 404
    assert response.json() == {"error": "Cart item not found"}


def test_delete_cart_item(client, seeded):
    response = client.delete(f"/api/cart-items/{IN_CART}")

    assert response.status_code == 204
    remaining = [i["productId"] for i in client.get("/api/cart-items").json()]
    assert IN_CART not in remaining


def test_delete_missing_cart_item(client, seeded):
    response = client.delete(f"/api/cart-items/{NOT_IN_CART}")

    assert response.status_code == 404
