import pytest
from bson import ObjectId

from src.errors import CommonErrorMessages, ProductErrorMessages

PRODUCT = {
    "image": "/static/2026-10-18/course.png",
    "title": "Python course",
    "price": 100,
    "oldPrice": 120,
    "credit": 10,
    "description": "Learn Python from scratch",
    "advantages": "Lots of practice",
    "disAdvantages": "Long",
    "categories": ["courses", "programming"],
    "tags": ["python"],
    "characteristics": [{"name": "duration", "value": "3 months"}],
}


@pytest.fixture()
def product(client, auth_headers):
    response = client.post("/product/create", json=PRODUCT, headers=auth_headers)
    assert response.status_code == 201
    return response.json()


def review_for(product_id, rating, author="name author"):
    return {
        "authorName": author,
        "title": "title review",
        "description": "description review",
        "rating": rating,
        "productId": product_id,
    }


class TestCreateProduct:
    def test_create(self, product):
        assert len(product["_id"]) == 24
        assert product["oldPrice"] == 120
        assert product["characteristics"] == [{"name": "duration", "value": "3 months"}]

    def test_requires_token(self, client):
        response = client.post("/product/create", json=PRODUCT)

        assert response.status_code == 401

    def test_negative_price(self, client, auth_headers):
        response = client.post("/product/create", json={**PRODUCT, "price": -1}, headers=auth_headers)

        assert response.status_code == 400


class TestGetProduct:
    def test_get_without_reviews(self, client, product):
        response = client.get(f"/product/{product['_id']}")

        assert response.status_code == 200
        body = response.json()
        assert body["title"] == PRODUCT["title"]
        assert body["reviewCount"] == 0
        assert body["reviewAvg"] is None

    def test_rating_is_computed_from_reviews(self, client, product):
        client.post("/review/create", json=review_for(product["_id"], 5))
        client.post("/review/create", json=review_for(product["_id"], 2))

        body = client.get(f"/product/{product['_id']}").json()

        assert body["reviewCount"] == 2
        assert body["reviewAvg"] == pytest.approx(3.5)

    def test_rating_follows_deletes(self, client, product, auth_headers):
        client.post("/review/create", json=review_for(product["_id"], 5))
        client.delete(f"/review/byProduct/{product['_id']}", headers=auth_headers)

        body = client.get(f"/product/{product['_id']}").json()

        assert body["reviewCount"] == 0
        assert body["reviewAvg"] is None

    def test_not_found(self, client):
        response = client.get(f"/product/{ObjectId()}")

        assert response.status_code == 404
        assert response.json() == {"statusCode": 404, "message": ProductErrorMessages.PRODUCT_NOT_FOUND.value}

    def test_invalid_id(self, client):
        response = client.get("/product/1")

        assert response.status_code == 400
        assert response.json()["message"] == CommonErrorMessages.ID_VALIDATION_ERROR.value


class TestUpdateProduct:
    def test_patch(self, client, product, auth_headers):
        response = client.patch(f"/product/{product['_id']}", json={"price": 80}, headers=auth_headers)

        assert response.status_code == 200
        body = response.json()
        assert body["price"] == 80
        assert body["title"] == PRODUCT["title"]

    def test_patch_unknown(self, client, auth_headers):
        response = client.patch(f"/product/{ObjectId()}", json={"price": 80}, headers=auth_headers)

        assert response.status_code == 404

    @pytest.mark.parametrize("field", ["title", "price", "categories"])
    def test_patch_null_required_field(self, client, product, auth_headers, field):
        response = client.patch(f"/product/{product['_id']}", json={field: None}, headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["statusCode"] == 400

        stored = client.get(f"/product/{product['_id']}").json()
        assert stored["title"] == PRODUCT["title"]
        assert stored["price"] == PRODUCT["price"]
        assert stored["categories"] == PRODUCT["categories"]

    def test_patch_clears_old_price(self, client, product, auth_headers):
        response = client.patch(f"/product/{product['_id']}", json={"oldPrice": None}, headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["oldPrice"] is None


class TestDeleteProduct:
    def test_delete(self, client, product, auth_headers):
        response = client.delete(f"/product/{product['_id']}", headers=auth_headers)

        assert response.status_code == 200
        assert client.get(f"/product/{product['_id']}").status_code == 404

    def test_delete_unknown(self, client, auth_headers):
        response = client.delete(f"/product/{ObjectId()}", headers=auth_headers)

        assert response.status_code == 404


class TestFindProducts:
    def test_find_by_category(self, client, auth_headers):
        ids = []
        for title, categories in [("A", ["courses"]), ("B", ["books"]), ("C", ["courses"])]:
            response = client.post(
                "/product/create",
                json={**PRODUCT, "title": title, "categories": categories},
                headers=auth_headers,
            )
            ids.append(response.json()["_id"])

        client.post("/review/create", json=review_for(ids[0], 4, author="first"))
        client.post("/review/create", json=review_for(ids[0], 2, author="second"))

        response = client.post("/product/find", json={"category": "courses", "limit": 10})

        assert response.status_code == 200
        body = response.json()
        assert [p["title"] for p in body] == ["A", "C"]
        assert body[0]["reviewCount"] == 2
        assert body[0]["reviewAvg"] == pytest.approx(3.0)
        assert [r["authorName"] for r in body[0]["reviews"]] == ["second", "first"]
        assert body[1]["reviews"] == []
        assert body[1]["reviewAvg"] is None

    def test_find_respects_limit(self, client, product, auth_headers):
        client.post("/product/create", json=PRODUCT, headers=auth_headers)

        response = client.post("/product/find", json={"category": "courses", "limit": 1})

        assert [p["_id"] for p in response.json()] == [product["_id"]]

    def test_find_invalid_limit(self, client):
        response = client.post("/product/find", json={"category": "courses", "limit": 0})

        assert response.status_code == 400
