"""Admin post routes - CRUD with category memberships.

Tests:
    - Auth guard answers 400 {"status": ...} and nothing is written
    - Create returns {"status": "OK", "id": n}; read embeds each Category
    - Update replaces memberships wholesale
    - Unknown category ids -> 400, missing post -> 404
    - Thumbnail key round-trips; URLs are refused
"""

import pytest
from sqlalchemy import func, select

from inkwell.models.post import Post
from inkwell.models.post_category import PostCategory


def _body(category_ids, **overrides):
    body = {
        "title": "First post",
        "content": "Hello world",
        "thumbnailImageKey": "private/abc",
        "categories": [{"id": cid} for cid in category_ids],
    }
    body.update(overrides)
    return body


async def _count(session_factory, model) -> int:
    async with session_factory() as session:
        return (await session.execute(select(func.count()).select_from(model))).scalar_one()


async def test_create_without_token_writes_nothing(client, categories, test_session_factory):
    response = await client.post("/api/admin/posts", json=_body([categories[0].id]))
    assert response.status_code == 400
    assert response.json()["status"] == "Authorization header is missing"
    assert await _count(test_session_factory, Post) == 0


async def test_create_and_read(client, auth_headers, categories):
    python, travel = categories
    created = await client.post(
        "/api/admin/posts", json=_body([python.id, travel.id]), headers=auth_headers,
    )
    assert created.status_code == 201
    post_id = created.json()["id"]
    assert created.json() == {"status": "OK", "id": post_id}

    response = await client.get(f"/api/admin/posts/{post_id}", headers=auth_headers)
    assert response.status_code == 200
    post = response.json()["post"]
    assert post["title"] == "First post"
    assert post["thumbnailImageKey"] == "private/abc"
    assert [pc["category"]["name"] for pc in post["postCategories"]] == ["Python", "Travel"]
    assert all(pc["postId"] == post_id for pc in post["postCategories"])


async def test_duplicate_category_ids_collapse(client, auth_headers, categories):
    cid = categories[0].id
    created = await client.post(
        "/api/admin/posts", json=_body([cid, cid]), headers=auth_headers,
    )
    post = (await client.get(
        f"/api/admin/posts/{created.json()['id']}", headers=auth_headers,
    )).json()["post"]
    assert len(post["postCategories"]) == 1


async def test_create_with_no_categories_allowed(client, auth_headers):
    created = await client.post("/api/admin/posts", json=_body([]), headers=auth_headers)
    assert created.status_code == 201


async def test_create_with_unknown_category_is_400(
    client, auth_headers, categories, test_session_factory,
):
    response = await client.post(
        "/api/admin/posts", json=_body([categories[0].id, 999]), headers=auth_headers,
    )
    assert response.status_code == 400
    body = response.json()
    assert body["error"]["code"] == "UNKNOWN_CATEGORY"
    assert "999" in body["status"]
    assert await _count(test_session_factory, Post) == 0


@pytest.mark.parametrize("overrides", [
    {"title": ""},
    {"title": "t" * 51},
    {"content": "   "},
    {"content": "c" * 1001},
    {"thumbnailImageKey": "https://cdn.test/a.png"},
])
async def test_invalid_body_is_400(client, auth_headers, overrides):
    response = await client.post(
        "/api/admin/posts", json=_body([], **overrides), headers=auth_headers,
    )
    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_list_newest_first(client, auth_headers):
    for title in ("one", "two", "three"):
        await client.post("/api/admin/posts", json=_body([], title=title), headers=auth_headers)

    response = await client.get("/api/admin/posts", headers=auth_headers)
    assert response.status_code == 200
    assert [p["title"] for p in response.json()["posts"]] == ["three", "two", "one"]


async def test_update_replaces_memberships(
    client, auth_headers, categories, test_session_factory,
):
    python, travel = categories
    post_id = (await client.post(
        "/api/admin/posts", json=_body([python.id]), headers=auth_headers,
    )).json()["id"]

    response = await client.put(
        f"/api/admin/posts/{post_id}",
        json=_body([travel.id], title="Edited", thumbnailImageKey=""),
        headers=auth_headers,
    )
    assert response.status_code == 200
    post = response.json()["post"]
    assert post["title"] == "Edited"
    assert post["thumbnailImageKey"] is None
    assert [pc["categoryId"] for pc in post["postCategories"]] == [travel.id]
    assert await _count(test_session_factory, PostCategory) == 1


async def test_update_missing_is_404(client, auth_headers):
    response = await client.put("/api/admin/posts/404", json=_body([]), headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["status"] == "Post '404' not found"


async def test_delete_removes_post_and_memberships(
    client, auth_headers, categories, test_session_factory,
):
    post_id = (await client.post(
        "/api/admin/posts", json=_body([c.id for c in categories]), headers=auth_headers,
    )).json()["id"]

    response = await client.delete(f"/api/admin/posts/{post_id}", headers=auth_headers)
    assert response.json() == {"status": "OK"}
    assert await _count(test_session_factory, Post) == 0
    assert await _count(test_session_factory, PostCategory) == 0

    again = await client.get(f"/api/admin/posts/{post_id}", headers=auth_headers)
    assert again.status_code == 404


async def test_delete_missing_is_404(client, auth_headers):
    response = await client.delete("/api/admin/posts/5", headers=auth_headers)
    assert response.status_code == 404
