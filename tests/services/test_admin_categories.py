"""Admin category routes - CRUD, auth guard, not-found and membership cleanup."""

import pytest
from sqlalchemy import select

from inkwell.models.category import Category
from inkwell.models.post_category import PostCategory


async def test_missing_header_rejected_before_handler(client, auth_provider):
    response = await client.get("/api/admin/categories")
    assert response.status_code == 400
    assert response.json()["status"] == "Authorization header is missing"
    assert auth_provider.user_calls == [""]


async def test_invalid_token_rejected(client):
    response = await client.post(
        "/api/admin/categories",
        json={"name": "Nope"},
        headers={"Authorization": "Bearer forged"},
    )
    assert response.status_code == 400
    assert "invalid JWT" in response.json()["status"]


async def test_rejected_write_persists_nothing(client, test_db):
    await client.post(
        "/api/admin/categories", json={"name": "Nope"},
        headers={"Authorization": "wrong"},
    )
    assert await test_db.get(Category, 1) is None


async def test_bare_token_accepted(client):
    response = await client.get(
        "/api/admin/categories", headers={"Authorization": "valid-token"},
    )
    assert response.status_code == 200


async def test_create_then_list(client, auth_headers):
    created = await client.post(
        "/api/admin/categories", json={"name": "Python"}, headers=auth_headers,
    )
    assert created.status_code == 201
    body = created.json()
    assert body["status"] == "OK"
    assert isinstance(body["id"], int)

    listed = await client.get("/api/admin/categories", headers=auth_headers)
    assert listed.status_code == 200
    data = listed.json()
    assert data["status"] == "OK"
    assert [c["name"] for c in data["categories"]] == ["Python"]
    assert {"id", "name", "createdAt", "updatedAt"} <= set(data["categories"][0])


async def test_list_empty(client, auth_headers):
    response = await client.get("/api/admin/categories", headers=auth_headers)
    assert response.json() == {"status": "OK", "categories": []}


async def test_get_one(client, auth_headers, categories):
    response = await client.get(
        f"/api/admin/categories/{categories[0].id}", headers=auth_headers,
    )
    assert response.status_code == 200
    assert response.json()["category"]["name"] == "Python"


async def test_get_missing_is_404(client, auth_headers):
    response = await client.get("/api/admin/categories/999", headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["error"]["code"] == "RESOURCE_NOT_FOUND"


async def test_update(client, auth_headers, categories):
    response = await client.put(
        f"/api/admin/categories/{categories[1].id}",
        json={"name": "Travel Notes"}, headers=auth_headers,
    )
    assert response.status_code == 200
    assert response.json()["category"]["name"] == "Travel Notes"


async def test_update_missing_is_404(client, auth_headers):
    response = await client.put(
        "/api/admin/categories/42", json={"name": "X"}, headers=auth_headers,
    )
    assert response.status_code == 404


@pytest.mark.parametrize("name", ["", "   ", "x" * 51])
async def test_invalid_name_is_400(client, auth_headers, name):
    response = await client.post(
        "/api/admin/categories", json={"name": name}, headers=auth_headers,
    )
    assert response.status_code == 400
    assert response.json()["status"] == "Invalid request data"


async def test_delete_removes_memberships_but_keeps_posts(
    client, auth_headers, categories,
):
    python, travel = categories
    created = await client.post(
        "/api/admin/posts",
        json={
            "title": "Trip", "content": "Body",
            "categories": [{"id": python.id}, {"id": travel.id}],
        },
        headers=auth_headers,
    )
    post_id = created.json()["id"]

    response = await client.delete(
        f"/api/admin/categories/{python.id}", headers=auth_headers,
    )
    assert response.status_code == 200
    assert response.json() == {"status": "OK"}

    post = (await client.get(f"/api/admin/posts/{post_id}", headers=auth_headers)).json()
    assert [pc["categoryId"] for pc in post["post"]["postCategories"]] == [travel.id]

    missing = await client.get(
        f"/api/admin/categories/{python.id}", headers=auth_headers,
    )
    assert missing.status_code == 404


async def test_delete_missing_is_404(client, auth_headers):
    response = await client.delete("/api/admin/categories/7", headers=auth_headers)
    assert response.status_code == 404


async def test_delete_leaves_no_orphan_rows(client, auth_headers, categories, test_session_factory):
    await client.post(
        "/api/admin/posts",
        json={"title": "A", "content": "B", "categories": [{"id": categories[0].id}]},
        headers=auth_headers,
    )
    await client.delete(f"/api/admin/categories/{categories[0].id}", headers=auth_headers)

    async with test_session_factory() as session:
        rows = (await session.execute(select(PostCategory))).scalars().all()
    assert rows == []
