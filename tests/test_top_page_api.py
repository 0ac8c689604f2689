import pytest
from bson import ObjectId

from src.errors import TopPageErrorMessages

PAGE = {
    "firstCategory": 0,
    "secondCategory": "Development",
    "alias": "python",
    "title": "Python courses",
    "metaTitle": "Python courses",
    "metaDescription": "The best Python courses",
    "category": "python",
    "hh": {"count": 1000, "juniorSalary": 100, "middleSalary": 200, "seniorSalary": 300},
    "advantages": [{"title": "Fast", "description": "Quick start"}],
    "seoText": "Learn Python with us",
    "tagsTitle": "Learning",
    "tags": ["python", "programming"],
}


@pytest.fixture()
def page(client, auth_headers):
    response = client.post("/top-page/create", json=PAGE, headers=auth_headers)
    assert response.status_code == 201
    return response.json()


class TestCreatePage:
    def test_create(self, page):
        assert len(page["_id"]) == 24
        assert page["firstCategory"] == 0
        assert page["hh"]["juniorSalary"] == 100
        assert page["advantages"] == [{"title": "Fast", "description": "Quick start"}]

    def test_duplicate_alias(self, client, page, auth_headers):
        response = client.post("/top-page/create", json=PAGE, headers=auth_headers)

        assert response.status_code == 400
        assert response.json()["message"] == TopPageErrorMessages.TOP_PAGE_ALIAS_EXISTS.value

    def test_unknown_category(self, client, auth_headers):
        response = client.post("/top-page/create", json={**PAGE, "firstCategory": 7}, headers=auth_headers)

        assert response.status_code == 400

    def test_requires_token(self, client):
        assert client.post("/top-page/create", json=PAGE).status_code == 401


class TestReadPage:
    def test_get_by_id(self, client, page, auth_headers):
        response = client.get(f"/top-page/{page['_id']}", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["alias"] == "python"

    def test_get_by_id_requires_token(self, client, page):
        assert client.get(f"/top-page/{page['_id']}").status_code == 401

    def test_get_unknown(self, client, auth_headers):
        response = client.get(f"/top-page/{ObjectId()}", headers=auth_headers)

        assert response.status_code == 404
        assert response.json() == {"statusCode": 404, "message": TopPageErrorMessages.TOP_PAGE_NOT_FOUND.value}

    def test_get_by_alias(self, client, page):
        response = client.get("/top-page/byAlias/python")

        assert response.status_code == 200
        assert response.json()["_id"] == page["_id"]

    def test_get_by_unknown_alias(self, client):
        assert client.get("/top-page/byAlias/missing").status_code == 404

    def test_text_search(self, client, page, auth_headers):
        client.post(
            "/top-page/create",
            json={**PAGE, "alias": "java", "title": "Java courses", "seoText": "Learn Java"},
            headers=auth_headers,
        )

        response = client.get("/top-page/textSearch/python")

        assert response.status_code == 200
        assert [p["alias"] for p in response.json()] == ["python"]

    def test_find_groups_by_second_category(self, client, page, auth_headers):
        client.post(
            "/top-page/create",
            json={**PAGE, "alias": "design", "secondCategory": "Design", "category": "design"},
            headers=auth_headers,
        )
        client.post(
            "/top-page/create",
            json={**PAGE, "alias": "books", "firstCategory": 2},
            headers=auth_headers,
        )

        response = client.post("/top-page/find", json={"firstCategory": 0})

        assert response.status_code == 200
        groups = response.json()
        assert [group["_id"]["secondCategory"] for group in groups] == ["Design", "Development"]
        assert groups[1]["pages"] == [
            {"_id": page["_id"], "alias": "python", "title": "Python courses", "category": "python"}
        ]


class TestUpdatePage:
    def test_patch(self, client, page, auth_headers):
        response = client.patch(f"/top-page/{page['_id']}", json={"title": "New title"}, headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["title"] == "New title"
        assert response.json()["alias"] == "python"

    def test_patch_to_taken_alias(self, client, page, auth_headers):
        client.post("/top-page/create", json={**PAGE, "alias": "java"}, headers=auth_headers)

        response = client.patch(f"/top-page/{page['_id']}", json={"alias": "java"}, headers=auth_headers)

        assert response.status_code == 400

    @pytest.mark.parametrize("field", ["title", "alias", "tags"])
    def test_patch_null_required_field(self, client, page, auth_headers, field):
        response = client.patch(f"/top-page/{page['_id']}", json={field: None}, headers=auth_headers)

        assert response.status_code == 400

        stored = client.get("/top-page/byAlias/python").json()
        assert stored["title"] == PAGE["title"]
        assert stored["tags"] == PAGE["tags"]

    def test_patch_clears_seo_text(self, client, page, auth_headers):
        response = client.patch(f"/top-page/{page['_id']}", json={"seoText": None}, headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["seoText"] is None


class TestDeletePage:
    def test_delete(self, client, page, auth_headers):
        assert client.delete(f"/top-page/{page['_id']}", headers=auth_headers).status_code == 200
        assert client.get("/top-page/byAlias/python").status_code == 404

    def test_delete_invalid_id(self, client, auth_headers):
        response = client.delete("/top-page/1", headers=auth_headers)

        assert response.status_code == 400
