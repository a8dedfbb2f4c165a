"""
Catalog CRUD over HTTP: public reads, admin-only writes, cart and wishlist.
"""

import pytest

pytestmark = pytest.mark.unit

NEW_PRODUCT = {
    "name": "Gel Top Coat",
    "description": "High-gloss top coat",
    "price": 18.5,
    "category": "Gels",
    "brand": "Selva Pro",
    "stockQuantity": 40,
}


def test_seeded_catalog_is_listed(client):
    response = client.get("/api/products")

    assert response.status_code == 200
    body = response.json()
    assert len(body["items"]) == 6
    assert "Gels" in body["facets"]["categories"]


def test_product_filter_and_search_query_params(client):
    gels = client.get("/api/products", params={"category": "Gels"}).json()["items"]
    lamps = client.get("/api/products", params={"search": "lamp"}).json()["items"]
    limited = client.get("/api/products", params={"limit": 2}).json()["items"]

    assert {p["category"] for p in gels} == {"Gels"}
    assert [p["name"] for p in lamps] == ["UV LED Nail Lamp 48W"]
    assert len(limited) == 2


def test_invalid_limit_is_400(client):
    assert client.get("/api/products", params={"limit": 0}).status_code == 400


def test_admin_product_lifecycle(client, admin_headers):
    created = client.post("/api/products", json=NEW_PRODUCT, headers=admin_headers)
    assert created.status_code == 201
    product_id = created.json()["id"]

    fetched = client.get(f"/api/products/{product_id}")
    assert fetched.json()["name"] == "Gel Top Coat"

    updated = client.put(f"/api/products/{product_id}", json={"price": 20}, headers=admin_headers)
    assert updated.status_code == 200
    assert updated.json()["price"] == 20
    assert updated.json()["brand"] == "Selva Pro"

    deleted = client.delete(f"/api/products/{product_id}", headers=admin_headers)
    assert deleted.json() == {"message": "Product deleted successfully"}

    missing = client.get(f"/api/products/{product_id}")
    assert missing.status_code == 404
    assert missing.json() == {"message": "Product not found"}


def test_writes_need_a_token(client):
    response = client.post("/api/products", json=NEW_PRODUCT)

    assert response.status_code == 401
    assert response.json() == {"message": "Not authenticated"}


def test_writes_need_admin_role(client, customer_headers):
    some_id = client.get("/api/products").json()["items"][0]["id"]

    assert client.post("/api/products", json=NEW_PRODUCT, headers=customer_headers).status_code == 403
    assert client.put(f"/api/products/{some_id}", json={"price": 1}, headers=customer_headers).status_code == 403
    assert client.delete(f"/api/products/{some_id}", headers=customer_headers).status_code == 403
    assert client.get(f"/api/products/{some_id}").json()["price"] != 1


def test_create_missing_fields_is_400(client, admin_headers):
    response = client.post("/api/products", json={"name": "Incomplete"}, headers=admin_headers)

    assert response.status_code == 400
    assert response.json()["message"] == "Validation failed"


def test_cart_flow(client, customer_headers):
    product_id = client.get("/api/products").json()["items"][0]["id"]

    first = client.post("/api/products/cart", json={"productId": product_id, "quantity": 2}, headers=customer_headers)
    second = client.post("/api/products/cart", json={"productId": product_id, "quantity": 3}, headers=customer_headers)

    assert first.status_code == 201
    assert second.status_code == 200
    assert second.json()["cartItem"]["quantity"] == 5

    cart = client.get("/api/products/cart", headers=customer_headers).json()["cart"]
    assert len(cart) == 1
    assert cart[0]["product"]["id"] == product_id
    assert cart[0]["quantity"] == 5

    removed = client.delete(f"/api/products/cart/{product_id}", headers=customer_headers)
    assert removed.json() == {"message": "Item removed from cart successfully"}
    assert client.get("/api/products/cart", headers=customer_headers).json()["cart"] == []

    again = client.delete(f"/api/products/cart/{product_id}", headers=customer_headers)
    assert again.status_code == 404


def test_cart_rejects_bad_input(client, customer_headers):
    product_id = client.get("/api/products").json()["items"][0]["id"]

    zero = client.post("/api/products/cart", json={"productId": product_id, "quantity": 0}, headers=customer_headers)
    unknown = client.post("/api/products/cart", json={"productId": "missing"}, headers=customer_headers)
    anonymous = client.post("/api/products/cart", json={"productId": product_id})

    assert zero.status_code == 400
    assert unknown.status_code == 404
    assert unknown.json() == {"message": "Product not found"}
    assert anonymous.status_code == 401


def test_wishlist_toggle(client, customer_headers):
    product_id = client.get("/api/products").json()["items"][0]["id"]

    added = client.post("/api/products/wishlist", json={"productId": product_id}, headers=customer_headers)
    assert added.json()["isInWishlist"] is True
    listed = client.get("/api/products/wishlist", headers=customer_headers).json()["wishlist"]
    assert [p["id"] for p in listed] == [product_id]

    removed = client.post("/api/products/wishlist", json={"productId": product_id}, headers=customer_headers)
    assert removed.json()["isInWishlist"] is False


def test_service_detail_counts_views(client):
    service_id = client.get("/api/services").json()["items"][0]["id"]

    client.get(f"/api/services/{service_id}")
    second = client.get(f"/api/services/{service_id}")

    assert second.json()["views"] == 2


def test_services_filter_by_category(client):
    body = client.get("/api/services", params={"category": "Pedicure"}).json()

    assert body["items"]
    assert {s["category"] for s in body["items"]} == {"Pedicure"}
    assert body["facets"]["categories"][0] == "Manicure"
