"""Integration tests for the product review endpoints via TestClient."""


class TestSubmitReviewAPI:
    def test_submit_returns_201(self, client, shopper, make_product):
        product_id = make_product()
        response = client.post(f"/products/{product_id}/reviews", json={"rating": 5, "comment": "Fits perfectly"})
        assert response.status_code == 201
        body = response.json()
        assert body["rating"] == 5
        assert body["user_name"] == shopper["name"]

    def test_rating_updates_product(self, client, shopper, make_product):
        product_id = make_product()
        client.post(f"/products/{product_id}/reviews", json={"rating": 5})
        client.post(f"/products/{product_id}/reviews", json={"rating": 4})
        client.post(f"/products/{product_id}/reviews", json={"rating": 3})

        product = client.get(f"/products/{product_id}").json()
        assert product["ratings"] == 4.0
        assert product["num_reviews"] == 3

    def test_rating_out_of_range_returns_400(self, client, shopper, make_product):
        response = client.post(f"/products/{make_product()}/reviews", json={"rating": 6})
        assert response.status_code == 400

    def test_unknown_product_returns_404(self, client, shopper):
        response = client.post("/products/missing/reviews", json={"rating": 4})
        assert response.status_code == 404

    def test_requires_login(self, client, make_product):
        response = client.post(f"/products/{make_product()}/reviews", json={"rating": 4})
        assert response.status_code == 401


class TestListReviewsAPI:
    def test_list_is_public(self, client, shopper, make_product, new_client):
        product_id = make_product()
        client.post(f"/products/{product_id}/reviews", json={"rating": 4, "comment": "Nice"})

        response = new_client().get(f"/products/{product_id}/reviews")
        assert response.status_code == 200
        [review] = response.json()
        assert review["comment"] == "Nice"
        assert review["user_name"] == shopper["name"]

    def test_unknown_product_returns_404(self, client):
        assert client.get("/products/missing/reviews").status_code == 404


class TestDeleteReviewAPI:
    def test_author_deletes(self, client, shopper, make_product):
        product_id = make_product()
        review_id = client.post(f"/products/{product_id}/reviews", json={"rating": 2}).json()["id"]

        response = client.delete(f"/products/{product_id}/reviews/{review_id}")
        assert response.status_code == 200
        assert client.get(f"/products/{product_id}/reviews").json() == []
        assert client.get(f"/products/{product_id}").json()["num_reviews"] == 0

    def test_other_user_gets_403(self, client, shopper, make_product, new_client, register):
        product_id = make_product()
        review_id = client.post(f"/products/{product_id}/reviews", json={"rating": 2}).json()["id"]

        other = new_client()
        register(other, username="ravi")
        response = other.delete(f"/products/{product_id}/reviews/{review_id}")
        assert response.status_code == 403
        assert response.json() == {"message": "You can only delete your own reviews"}
