"""
JSON API endpoint tests using FastAPI TestClient.

Coverage:
- GET    /api/posts
- POST   /api/posts
- GET    /api/posts/{id}
- PUT    /api/posts/{id}
- DELETE /api/posts/{id}
"""

from fastapi.testclient import TestClient


def _create(client: TestClient, **fields) -> dict:
    response = client.post("/api/posts", json=fields)
    assert response.status_code == 201
    return response.json()


class TestLifecycle:
    def test_create_get_delete(self, client, sample_fields):
        """A post can be created, read back, deleted, and is then gone."""
        response = client.post("/api/posts", json=sample_fields)

        assert response.status_code == 201
        created = response.json()
        assert created["id"]
        assert created["title"] == "Hi"
        assert created["author"] == "A"
        assert created["body"] == "B"
        assert created["tags"] == ["x", "y"]

        response = client.get(f"/api/posts/{created['id']}")
        assert response.status_code == 200
        assert response.json() == created

        response = client.delete(f"/api/posts/{created['id']}")
        assert response.status_code == 204
        assert response.content == b""

        response = client.get(f"/api/posts/{created['id']}")
        assert response.status_code == 404
        assert response.json() == {"error": "Post not found"}


class TestListPosts:
    def test_empty(self, client):
        response = client.get("/api/posts")

        assert response.status_code == 200
        assert response.json() == []

    def test_newest_first(self, client):
        first = _create(client, title="first")
        second = _create(client, title="second")

        ids = [p["id"] for p in client.get("/api/posts").json()]
        assert ids == [second["id"], first["id"]]

    def test_tag_query_is_ignored(self, client):
        _create(client, title="tagged", tags=["x"])
        _create(client, title="untagged")

        response = client.get("/api/posts", params={"tag": "x"})
        assert len(response.json()) == 2

    def test_post_shape(self, client):
        _create(client, title="t")
        post = client.get("/api/posts").json()[0]
        assert set(post) == {"id", "title", "author", "body", "tags"}

    def test_seeded_app_lists_welcome_post(self):
        from mini_quora.api.app import create_app
        from mini_quora.config import Settings

        app = create_app(settings=Settings(_env_file=None, seed_demo_post=True))
        posts = TestClient(app).get("/api/posts").json()

        assert [p["title"] for p in posts] == ["Welcome to Mini Quora"]
        assert posts[0]["tags"] == ["intro", "demo"]


class TestCreatePost:
    def test_defaults(self, client):
        created = _create(client, title="", author="   ")

        assert created["title"] == "Untitled"
        assert created["author"] == "Anonymous"
        assert created["body"] == ""
        assert created["tags"] == []

    def test_no_body(self, client):
        response = client.post("/api/posts")

        assert response.status_code == 201
        assert response.json()["title"] == "Untitled"

    def test_tags_as_string(self, client):
        created = _create(client, tags="a, b ,,c")
        assert created["tags"] == ["a", "b", "c"]

    def test_tags_as_list_are_trimmed(self, client):
        created = _create(client, tags=[" a ", "", "b"])
        assert created["tags"] == ["a", "b"]

    def test_null_title_gets_default(self, client):
        created = _create(client, title=None)
        assert created["title"] == "Untitled"

    def test_non_string_values_coerced(self, client):
        created = _create(client, title=42, tags=[1, 2])

        assert created["title"] == "42"
        assert created["tags"] == ["1", "2"]

    def test_unknown_keys_ignored(self, client):
        created = _create(client, title="t", id="chosen-by-client", votes=3)

        assert created["id"] != "chosen-by-client"
        assert "votes" not in created

    def test_non_object_body_rejected(self, client):
        response = client.post("/api/posts", json=["not", "an", "object"])
        assert response.status_code == 422


class TestGetPost:
    def test_not_found(self, client):
        response = client.get("/api/posts/nope")

        assert response.status_code == 404
        assert response.json() == {"error": "Post not found"}


class TestUpdatePost:
    def test_partial_update(self, client, sample_fields):
        created = _create(client, **sample_fields)

        response = client.put(f"/api/posts/{created['id']}", json={"body": "  new body "})

        assert response.status_code == 200
        updated = response.json()
        assert updated["body"] == "new body"
        assert updated["title"] == "Hi"
        assert updated["tags"] == ["x", "y"]

    def test_empty_update_changes_nothing(self, client, sample_fields):
        created = _create(client, **sample_fields)

        response = client.put(f"/api/posts/{created['id']}", json={})

        assert response.status_code == 200
        assert response.json() == created

    def test_blank_title_is_stored(self, client, sample_fields):
        created = _create(client, **sample_fields)

        updated = client.put(f"/api/posts/{created['id']}", json={"title": ""}).json()

        assert updated["title"] == ""
        assert client.get(f"/api/posts/{created['id']}").json()["title"] == ""

    def test_null_and_scalar_values_coerced(self, client, sample_fields):
        created = _create(client, **sample_fields)

        updated = client.put(
            f"/api/posts/{created['id']}",
            json={"title": None, "tags": [True, 3]},
        ).json()

        assert updated["title"] == ""
        assert updated["tags"] == ["True", "3"]

    def test_tags_string_replaces(self, client, sample_fields):
        created = _create(client, **sample_fields)

        updated = client.put(f"/api/posts/{created['id']}", json={"tags": "p, q"}).json()
        assert updated["tags"] == ["p", "q"]

    def test_id_is_immutable(self, client, sample_fields):
        created = _create(client, **sample_fields)

        updated = client.put(f"/api/posts/{created['id']}", json={"id": "other"}).json()
        assert updated["id"] == created["id"]

    def test_not_found(self, client):
        response = client.put("/api/posts/nope", json={"title": "x"})

        assert response.status_code == 404
        assert response.json() == {"error": "Post not found"}


class TestDeletePost:
    def test_not_found(self, client):
        response = client.delete("/api/posts/nope")

        assert response.status_code == 404
        assert response.json() == {"error": "Post not found"}

    def test_second_delete_is_not_found(self, client):
        created = _create(client, title="t")

        assert client.delete(f"/api/posts/{created['id']}").status_code == 204
        assert client.delete(f"/api/posts/{created['id']}").status_code == 404
