"""
Component tests for cart mutations

Covers add-to-cart upsert semantics, quantity updates, removal and the
authentication requirement.
"""
from decimal import Decimal

from fastapi.testclient import TestClient

from storefront.api.deps import get_current_user
from storefront.main import app
from tests.helpers import OTHER_USER, TEST_USER, cart_rows


def add(client: TestClient, product_id: int):
    return client.post("/cart/items", json={"product_id": product_id})


class TestAddToCart:

    def test_first_add_creates_line_with_quantity_one(self, client: TestClient, products):
        response = add(client, products["product_a"])

        assert response.status_code == 200
        data = response.json()
        assert data["user_id"] == TEST_USER.id
        assert len(data["items"]) == 1
        assert data["items"][0]["product_id"] == products["product_a"]
        assert data["items"][0]["quantity"] == 1
        assert data["items"][0]["product"]["name"] == "Product A"
        assert Decimal(data["total"]) == Decimal("10.00")

    def test_repeat_add_overwrites_quantity_to_one(self, client: TestClient, products):
        """
        Upsert on (user, product) resets the quantity instead of incrementing
        """
        item_id = add(client, products["product_a"]).json()["items"][0]["id"]
        client.patch(f"/cart/items/{item_id}", json={"quantity": 4})
        assert cart_rows()[0].quantity == 4

        response = add(client, products["product_a"])

        assert response.status_code == 200
        rows = cart_rows()
        assert len(rows) == 1
        assert rows[0].id == item_id
        assert rows[0].quantity == 1

    def test_add_twice_without_changes_keeps_single_line(self, client: TestClient, products):
        add(client, products["product_b"])
        add(client, products["product_b"])

        rows = cart_rows()
        assert [(r.product_id, r.quantity) for r in rows] == [(products["product_b"], 1)]

    def test_anonymous_add_requires_authentication(self, anon_client: TestClient, products):
        response = add(anon_client, products["product_a"])

        assert response.status_code == 401
        assert "sign in" in response.json()["detail"].lower()
        assert cart_rows() == []

    def test_unknown_product_returns_404(self, client: TestClient, products):
        response = add(client, 9999)

        assert response.status_code == 404
        assert cart_rows() == []

    def test_sold_out_product_returns_409(self, client: TestClient, products):
        response = add(client, products["sold_out"])

        assert response.status_code == 409
        assert "out of stock" in response.json()["detail"].lower()
        assert cart_rows() == []

    def test_invalid_product_id_rejected_by_schema(self, client: TestClient, products):
        response = client.post("/cart/items", json={"product_id": 0})

        assert response.status_code == 422

    def test_product_id_beyond_integer_column_rejected(self, client: TestClient, products):
        response = client.post("/cart/items", json={"product_id": 2**70})

        assert response.status_code == 422
        assert cart_rows() == []


class TestUpdateQuantity:

    def test_sets_quantity_directly(self, client: TestClient, products):
        item_id = add(client, products["product_a"]).json()["items"][0]["id"]

        response = client.patch(f"/cart/items/{item_id}", json={"quantity": 3})

        assert response.status_code == 200
        data = response.json()
        assert data["items"][0]["quantity"] == 3
        assert Decimal(data["total"]) == Decimal("30.00")
        assert data["count"] == 3

    def test_zero_quantity_is_noop(self, client: TestClient, products):
        item_id = add(client, products["product_a"]).json()["items"][0]["id"]
        client.patch(f"/cart/items/{item_id}", json={"quantity": 2})

        response = client.patch(f"/cart/items/{item_id}", json={"quantity": 0})

        assert response.status_code == 200
        rows = cart_rows()
        assert len(rows) == 1
        assert rows[0].quantity == 2

    def test_negative_quantity_is_noop(self, client: TestClient, products):
        item_id = add(client, products["product_a"]).json()["items"][0]["id"]

        client.patch(f"/cart/items/{item_id}", json={"quantity": -5})

        assert cart_rows()[0].quantity == 1

    def test_quantity_beyond_integer_column_rejected(self, client: TestClient, products):
        item_id = add(client, products["product_a"]).json()["items"][0]["id"]

        response = client.patch(f"/cart/items/{item_id}", json={"quantity": 2**70})

        assert response.status_code == 422
        assert cart_rows()[0].quantity == 1

    def test_item_id_beyond_integer_column_rejected(self, client: TestClient, products):
        response = client.patch(f"/cart/items/{2**70}", json={"quantity": 2})

        assert response.status_code == 422

    def test_no_upper_bound_against_stock(self, client: TestClient, products):
        item_id = add(client, products["product_a"]).json()["items"][0]["id"]

        response = client.patch(f"/cart/items/{item_id}", json={"quantity": 50})

        assert response.status_code == 200
        assert cart_rows()[0].quantity == 50

    def test_cannot_touch_other_users_item(self, client: TestClient, products):
        item_id = add(client, products["product_a"]).json()["items"][0]["id"]
        app.dependency_overrides[get_current_user] = lambda: OTHER_USER

        response = client.patch(f"/cart/items/{item_id}", json={"quantity": 7})

        assert response.status_code == 200
        assert response.json()["items"] == []
        assert cart_rows()[0].quantity == 1


class TestRemoveItem:

    def test_removes_line(self, client: TestClient, products):
        item_a = add(client, products["product_a"]).json()["items"][0]["id"]
        add(client, products["product_b"])

        response = client.delete(f"/cart/items/{item_a}")

        assert response.status_code == 200
        data = response.json()
        assert [i["product_id"] for i in data["items"]] == [products["product_b"]]
        assert Decimal(data["total"]) == Decimal("5.00")

    def test_removing_missing_item_is_silent(self, client: TestClient, products):
        response = client.delete("/cart/items/12345")

        assert response.status_code == 200
        assert response.json()["items"] == []

    def test_anonymous_remove_requires_authentication(self, anon_client: TestClient):
        response = anon_client.delete("/cart/items/1")

        assert response.status_code == 401


class TestCartReads:

    def test_empty_cart(self, client: TestClient, products):
        response = client.get("/cart/")

        assert response.status_code == 200
        data = response.json()
        assert data["items"] == []
        assert Decimal(data["total"]) == Decimal("0")
        assert data["count"] == 0

    def test_count_sums_quantities(self, client: TestClient, products):
        item_a = add(client, products["product_a"]).json()["items"][0]["id"]
        add(client, products["product_b"])
        client.patch(f"/cart/items/{item_a}", json={"quantity": 3})

        response = client.get("/cart/count")

        assert response.status_code == 200
        assert response.json() == {"count": 4}

    def test_anonymous_count_is_zero(self, anon_client: TestClient):
        response = anon_client.get("/cart/count")

        assert response.status_code == 200
        assert response.json() == {"count": 0}

    def test_anonymous_cart_requires_authentication(self, anon_client: TestClient):
        response = anon_client.get("/cart/")

        assert response.status_code == 401
