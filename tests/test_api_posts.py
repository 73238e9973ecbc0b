"""
Tests for the posts API endpoints.

Tests FastAPI routes with a mocked PostRepository.
Validates status codes, response bodies, and error mapping.
"""

import logging

from fastapi.testclient import TestClient

from app.domain.posts.entities import Post
from app.interfaces.posts.dependencies import get_post_repository
from app.main import app


def _payload(post: Post) -> dict:
    return {
        "id": post.id,
        "userId": post.user_id,
        "title": post.title,
        "body": post.body,
        "version": None,
    }


class TestListPosts:
    """Tests for GET /api/posts."""

    def test_returns_all_posts_in_order(self, client, post_repo, posts) -> None:
        post_repo.find_all.return_value = posts

        response = client.get("/api/posts")

        assert response.status_code == 200
        assert response.json() == [
            {"id": 1, "userId": 1, "title": "Hello", "body": "Welcome", "version": None},
            {"id": 2, "userId": 2, "title": "Welcome", "body": "Hello", "version": None},
        ]

    def test_empty_store(self, client, post_repo) -> None:
        post_repo.find_all.return_value = []

        response = client.get("/api/posts")

        assert response.status_code == 200
        assert response.json() == []


class TestGetPost:
    """Tests for GET /api/posts/{id}."""

    def test_found(self, client, post_repo, posts) -> None:
        post_repo.find_by_id.return_value = posts[0]

        response = client.get("/api/posts/1")

        assert response.status_code == 200
        assert response.json() == _payload(posts[0])
        post_repo.find_by_id.assert_called_once_with(1)

    def test_not_found(self, client, post_repo) -> None:
        post_repo.find_by_id.return_value = None

        response = client.get("/api/posts/999")

        assert response.status_code == 404
        assert response.json() == {"error": "Post not found"}

    def test_non_integer_id_rejected(self, client, post_repo) -> None:
        response = client.get("/api/posts/abc")

        assert response.status_code == 400
        post_repo.find_by_id.assert_not_called()


class TestCreatePost:
    """Tests for POST /api/posts."""

    def test_created(self, client, post_repo) -> None:
        post = Post(id=3, user_id=3, title="Ali", body="Ali")
        post_repo.save.return_value = post

        response = client.post("/api/posts", json=_payload(post))

        assert response.status_code == 201
        assert response.json() == _payload(post)
        post_repo.save.assert_called_once_with(post)

    def test_id_may_be_omitted(self, client, post_repo) -> None:
        post_repo.save.return_value = Post(id=10, user_id=3, title="Ali", body="Ali")

        response = client.post(
            "/api/posts", json={"userId": 3, "title": "Ali", "body": "Ali"}
        )

        assert response.status_code == 201
        assert response.json()["id"] == 10
        post_repo.save.assert_called_once_with(Post(None, 3, "Ali", "Ali", None))

    def test_empty_title_and_body_rejected(self, client, post_repo) -> None:
        response = client.post(
            "/api/posts", json=_payload(Post(id=4, user_id=4, title="", body=""))
        )

        assert response.status_code == 400
        assert response.json() == {"error": "Invalid post"}
        post_repo.save.assert_not_called()

    def test_missing_user_id_rejected(self, client, post_repo) -> None:
        response = client.post("/api/posts", json={"id": 5, "title": "t", "body": "b"})

        assert response.status_code == 400
        post_repo.save.assert_not_called()

    def test_malformed_json_rejected(self, client, post_repo) -> None:
        response = client.post(
            "/api/posts",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        post_repo.save.assert_not_called()


class TestUpdatePost:
    """Tests for PUT /api/posts/{id}."""

    def test_accepted(self, client, post_repo) -> None:
        post = Post(id=1, user_id=1, title="New Title", body="New Body", version=1)
        post_repo.find_by_id.return_value = post
        post_repo.save.return_value = post

        response = client.put(
            "/api/posts/1",
            json={**_payload(post), "version": 1},
        )

        assert response.status_code == 202
        assert response.json()["title"] == "New Title"
        post_repo.save.assert_called_once_with(post)

    def test_not_found_regardless_of_payload(self, client, post_repo) -> None:
        post_repo.find_by_id.return_value = None

        response = client.put(
            "/api/posts/999",
            json=_payload(Post(id=999, user_id=1, title="", body="")),
        )

        assert response.status_code == 404
        post_repo.save.assert_not_called()

    def test_invalid_payload_rejected(self, client, post_repo, posts) -> None:
        post_repo.find_by_id.return_value = posts[0]

        response = client.put(
            "/api/posts/1",
            json=_payload(Post(id=1, user_id=1, title="New Title", body="")),
        )

        assert response.status_code == 400
        post_repo.save.assert_not_called()

    def test_not_found_wins_over_unreadable_body(self, client, post_repo) -> None:
        post_repo.find_by_id.return_value = None

        response = client.put("/api/posts/999", json={"title": "", "body": ""})

        assert response.status_code == 404
        assert response.json() == {"error": "Post not found"}
        post_repo.find_by_id.assert_called_once_with(999)
        post_repo.save.assert_not_called()

    def test_unreadable_body_rejected_for_existing_post(
        self, client, post_repo, posts
    ) -> None:
        post_repo.find_by_id.return_value = posts[0]

        response = client.put("/api/posts/1", json={"title": "t", "body": "b"})

        assert response.status_code == 400
        post_repo.save.assert_not_called()


class TestLoggedContent:
    """Post titles and bodies never reach the logs."""

    def test_titles_and_bodies_are_not_logged(self, client, post_repo, posts, caplog) -> None:
        secret = Post(id=1, user_id=1, title="Secret title xyz", body="Secret body xyz")
        post_repo.find_by_id.return_value = posts[0]
        post_repo.save.return_value = secret

        with caplog.at_level(logging.DEBUG):
            client.post("/api/posts", json=_payload(secret))
            client.put("/api/posts/1", json=_payload(secret))
            client.put("/api/posts/1", json={**_payload(secret), "body": ""})
            client.post("/api/posts", json={"title": "Secret title xyz"})

        assert caplog.records
        assert "Secret" not in caplog.text


class TestDeletePost:
    """Tests for DELETE /api/posts/{id}."""

    def test_no_content(self, client, post_repo) -> None:
        response = client.delete("/api/posts/1")

        assert response.status_code == 204
        assert response.content == b""
        post_repo.delete_by_id.assert_called_once_with(1)

    def test_unknown_id_still_no_content(self, client, post_repo) -> None:
        response = client.delete("/api/posts/999")

        assert response.status_code == 204
        post_repo.delete_by_id.assert_called_once_with(999)
        post_repo.find_by_id.assert_not_called()


class TestUnexpectedErrors:
    """Unclassified repository failures surface as a generic 500."""

    def test_repository_failure_returns_500(self, post_repo) -> None:
        post_repo.find_all.side_effect = RuntimeError("connection refused")
        app.dependency_overrides[get_post_repository] = lambda: post_repo
        try:
            client = TestClient(app, raise_server_exceptions=False)
            response = client.get("/api/posts")
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 500
        assert "connection refused" not in response.text


class TestHealth:
    """Tests for GET /api/health."""

    def test_health(self, client) -> None:
        response = client.get("/api/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"


class TestSecurityHeaders:
    """Tests for security headers on responses."""

    def test_security_headers_present(self, client, post_repo) -> None:
        post_repo.find_all.return_value = []

        response = client.get("/api/posts")

        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"
        assert response.headers["Cache-Control"] == "no-store"
