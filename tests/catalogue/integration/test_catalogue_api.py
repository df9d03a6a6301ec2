"""Integration tests for the catalogue endpoints via TestClient."""

import pytest


@pytest.fixture()
def women(make_category):
    return make_category(name="Women", description="Women's fashion collection")


class TestCategoryAPI:
    def test_list_categories(self, client, make_category):
        make_category(name="Men")
        make_category(name="Kids")
        response = client.get("/categories")
        assert response.status_code == 200
        assert [c["name"] for c in response.json()] == ["Kids", "Men"]

    def test_category_detail(self, client, women):
        response = client.get(f"/categories/{women}")
        assert response.status_code == 200
        assert response.json()["description"] == "Women's fashion collection"

    def test_unknown_category_returns_404(self, client):
        response = client.get("/categories/missing")
        assert response.status_code == 404


class TestProductAPI:
    def test_product_detail(self, client, make_product):
        product_id = make_product(name="Summer Floral Dress", price=49.99, discount_price=39.99, stock=50)
        response = client.get(f"/products/{product_id}")
        assert response.status_code == 200
        body = response.json()
        assert body["id"] == product_id
        assert body["price"] == 49.99
        assert body["discount_price"] == 39.99
        assert body["stock"] == 50
        assert body["ratings"] == 0.0
        assert body["num_reviews"] == 0

    def test_unknown_product_returns_404_with_message(self, client):
        response = client.get("/products/missing")
        assert response.status_code == 404
        assert response.json() == {"message": "Product with ID missing not found"}

    def test_list_all(self, client, make_product):
        make_product(name="Summer Floral Dress")
        make_product(name="Leather Jacket")
        response = client.get("/products")
        assert response.status_code == 200
        assert {p["name"] for p in response.json()} == {"Summer Floral Dress", "Leather Jacket"}

    def test_filter_by_category(self, client, make_category, make_product, women):
        men = make_category(name="Men")
        make_product(name="Summer Floral Dress", category_id=women)
        make_product(name="Leather Jacket", category_id=men)
        response = client.get("/products", params={"category": men})
        assert [p["name"] for p in response.json()] == ["Leather Jacket"]

    def test_search(self, client, make_product):
        make_product(name="Summer Floral Dress")
        make_product(name="Slim Fit Jeans", brand="DenimLife")
        response = client.get("/products", params={"search": "denim"})
        assert [p["name"] for p in response.json()] == ["Slim Fit Jeans"]

    def test_featured(self, client, make_product):
        make_product(name="Summer Floral Dress", is_featured=True)
        make_product(name="Casual Blouse")
        response = client.get("/products", params={"featured": "true"})
        assert [p["name"] for p in response.json()] == ["Summer Floral Dress"]


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"
