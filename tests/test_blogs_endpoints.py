"""Blog endpoints — status codes and JSON bodies for the /blogs routes.

Invariants:
    - POST requires title, content and author; otherwise 400 {error}
    - Unknown or non-numeric ids yield 404 {"error": "Blog not found"}
    - Records serialise as {id, title, content, author, createdAt}
"""

from datetime import datetime

import pytest


def _parse_ts(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def test_root_returns_greeting(client):
    res = client.get("/")
    assert res.status_code == 200
    assert res.text == "Hello World!"


class TestListBlogs:
    def test_empty_initially(self, client):
        res = client.get("/blogs")
        assert res.status_code == 200
        assert res.json() == []

    def test_returns_all_blogs(self, client, blog_service):
        blog_service.create("Blog 1", "Content 1", "Author 1")
        blog_service.create("Blog 2", "Content 2", "Author 2")

        res = client.get("/blogs")

        assert res.status_code == 200
        body = res.json()
        assert len(body) == 2
        assert [b["id"] for b in body] == [1, 2]


class TestCreateBlog:
    def test_creates_blog(self, client, blog_service):
        res = client.post(
            "/blogs",
            json={"title": "New Blog", "content": "Blog Content", "author": "John Doe"},
        )

        assert res.status_code == 201
        body = res.json()
        assert body["id"] == 1
        assert body["title"] == "New Blog"
        assert body["content"] == "Blog Content"
        assert body["author"] == "John Doe"
        assert _parse_ts(body["createdAt"]) == blog_service.get_by_id(1).created_at
        assert set(body) == {"id", "title", "content", "author", "createdAt"}

    @pytest.mark.parametrize("missing", ["title", "content", "author"])
    def test_missing_field_returns_400(self, client, blog_service, missing):
        payload = {"title": "Blog Title", "content": "Blog Content", "author": "John Doe"}
        del payload[missing]

        res = client.post("/blogs", json=payload)

        assert res.status_code == 400
        assert res.json() == {"error": "Title, content, and author are required"}
        assert blog_service.list_all() == []

    def test_empty_field_returns_400(self, client):
        res = client.post("/blogs", json={"title": "", "content": "Content", "author": "Author"})
        assert res.status_code == 400
        assert "error" in res.json()

    def test_missing_body_returns_400(self, client):
        res = client.post("/blogs")
        assert res.status_code == 400
        assert "error" in res.json()

    def test_numeric_fields_are_stored_as_text(self, client, blog_service):
        res = client.post("/blogs", json={"title": 123, "content": "C", "author": "A"})

        assert res.status_code == 201
        assert res.json()["title"] == "123"
        assert blog_service.get_by_id(1).title == "123"

    def test_malformed_body_returns_400(self, client):
        res = client.post(
            "/blogs", content="not json", headers={"Content-Type": "application/json"},
        )
        assert res.status_code == 400
        assert res.json() == {"error": "Invalid request body"}


class TestGetBlog:
    def test_returns_blog(self, client, blog_service):
        blog = blog_service.create("Test Blog", "Content", "Author")

        res = client.get(f"/blogs/{blog.id}")

        assert res.status_code == 200
        assert res.json()["title"] == "Test Blog"
        assert res.json()["id"] == blog.id

    def test_unknown_id_returns_404(self, client):
        res = client.get("/blogs/999")
        assert res.status_code == 404
        assert res.json() == {"error": "Blog not found"}

    def test_non_numeric_id_returns_404(self, client, blog_service):
        blog_service.create("Test Blog", "Content", "Author")

        res = client.get("/blogs/abc")

        assert res.status_code == 404
        assert res.json() == {"error": "Blog not found"}

    @pytest.mark.parametrize("raw_id", ["1_0", "1.0", "1e0", "+1", "-1"])
    def test_only_plain_integer_ids_match(self, client, blog_service, raw_id):
        for i in range(10):
            blog_service.create(f"Blog {i}", "Content", "Author")

        res = client.get(f"/blogs/{raw_id}")

        assert res.status_code == 404
        assert res.json() == {"error": "Blog not found"}


class TestUpdateBlog:
    def test_updates_supplied_fields_only(self, client, blog_service):
        blog = blog_service.create("Original Title", "Original Content", "Original Author")
        created_at = blog.created_at

        res = client.put(f"/blogs/{blog.id}", json={"title": "Updated Title"})

        assert res.status_code == 200
        body = res.json()
        assert body["title"] == "Updated Title"
        assert body["content"] == "Original Content"
        assert body["author"] == "Original Author"
        assert body["id"] == blog.id
        assert _parse_ts(body["createdAt"]) == created_at

    def test_empty_values_are_ignored(self, client, blog_service):
        blog = blog_service.create("Title", "Content", "Author")

        res = client.put(f"/blogs/{blog.id}", json={"title": "", "author": "New Author"})

        assert res.status_code == 200
        assert res.json()["title"] == "Title"
        assert res.json()["author"] == "New Author"

    def test_id_and_created_at_in_body_are_ignored(self, client, blog_service):
        blog = blog_service.create("Title", "Content", "Author")
        created_at = blog.created_at

        res = client.put(
            f"/blogs/{blog.id}",
            json={"id": 42, "createdAt": "2000-01-01T00:00:00Z", "content": "New"},
        )

        assert res.status_code == 200
        assert res.json()["id"] == blog.id
        assert blog.created_at == created_at
        assert blog.content == "New"

    def test_missing_body_leaves_blog_unchanged(self, client, blog_service):
        blog = blog_service.create("Title", "Content", "Author")

        res = client.put(f"/blogs/{blog.id}")

        assert res.status_code == 200
        assert res.json()["title"] == "Title"

    def test_numeric_field_is_stored_as_text(self, client, blog_service):
        blog = blog_service.create("Title", "Content", "Author")

        res = client.put(f"/blogs/{blog.id}", json={"title": 5})

        assert res.status_code == 200
        assert res.json()["title"] == "5"
        assert blog.title == "5"

    def test_unknown_id_returns_404(self, client):
        res = client.put("/blogs/999", json={"title": "Updated Title"})
        assert res.status_code == 404
        assert res.json() == {"error": "Blog not found"}

    def test_non_numeric_id_returns_404(self, client):
        res = client.put("/blogs/abc", json={"title": "Updated Title"})
        assert res.status_code == 404


class TestDeleteBlog:
    def test_deletes_blog(self, client, blog_service):
        blog = blog_service.create("Test Blog", "Content", "Author")

        res = client.delete(f"/blogs/{blog.id}")

        assert res.status_code == 200
        assert res.json() == {"message": "Blog deleted successfully"}
        assert client.get(f"/blogs/{blog.id}").status_code == 404

    def test_unknown_id_returns_404(self, client):
        res = client.delete("/blogs/999")
        assert res.status_code == 404
        assert res.json() == {"error": "Blog not found"}

    def test_non_numeric_id_returns_404(self, client):
        assert client.delete("/blogs/abc").status_code == 404


def test_create_list_delete_scenario(client):
    first = client.post("/blogs", json={"title": "Blog 1", "content": "Content 1", "author": "Author 1"})
    second = client.post("/blogs", json={"title": "Blog 2", "content": "Content 2", "author": "Author 2"})
    assert (first.json()["id"], second.json()["id"]) == (1, 2)
    assert len(client.get("/blogs").json()) == 2

    assert client.delete("/blogs/1").status_code == 200

    remaining = client.get("/blogs").json()
    assert len(remaining) == 1
    assert remaining[0]["id"] == 2

    res = client.post("/blogs", json={"title": "Blog 3", "content": "Content 3"})
    assert res.status_code == 400
    assert res.json()["error"]


def test_separate_apps_have_separate_stores():
    from fastapi.testclient import TestClient

    from blog_api.app.main import create_app

    with TestClient(create_app()) as one, TestClient(create_app()) as two:
        one.post("/blogs", json={"title": "T", "content": "C", "author": "A"})
        assert len(one.get("/blogs").json()) == 1
        assert two.get("/blogs").json() == []
