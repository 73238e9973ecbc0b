"""
Tests for the posts domain layer.

Tests the Post entity, the validator and error classes in isolation.
No external dependencies or IO required.
"""

import dataclasses

import pytest

from app.domain.posts.entities import Post
from app.domain.posts.errors import InvalidPostError, PostDomainError, PostNotFoundError
from app.domain.posts.validation import ValidationResult, validate_post


class TestPostEntity:
    """Tests for the Post entity."""

    def test_version_defaults_to_none(self) -> None:
        post = Post(id=1, user_id=1, title="Hello", body="Welcome")
        assert post.version is None

    def test_post_is_immutable(self) -> None:
        post = Post(id=1, user_id=1, title="Hello", body="Welcome")
        with pytest.raises(dataclasses.FrozenInstanceError):
            post.title = "Changed"  # type: ignore[misc]

    def test_posts_with_same_fields_are_equal(self) -> None:
        assert Post(3, 3, "Ali", "Ali") == Post(3, 3, "Ali", "Ali")


class TestValidatePost:
    """Tests for validate_post."""

    def test_valid_post(self) -> None:
        result = validate_post(Post(id=1, user_id=1, title="Hello", body="Welcome"))
        assert result.is_valid
        assert result.errors == ()

    def test_empty_title_and_body(self) -> None:
        result = validate_post(Post(id=4, user_id=4, title="", body=""))
        assert not result.is_valid
        assert result.errors == ("title must not be empty", "body must not be empty")

    def test_empty_title_only(self) -> None:
        result = validate_post(Post(id=1, user_id=1, title="", body="Welcome"))
        assert result.errors == ("title must not be empty",)

    def test_empty_body_only(self) -> None:
        result = validate_post(Post(id=1, user_id=1, title="Hello", body=""))
        assert result.errors == ("body must not be empty",)

    def test_whitespace_counts_as_empty(self) -> None:
        result = validate_post(Post(id=1, user_id=1, title="  ", body="\n\t"))
        assert not result.is_valid

    def test_id_user_and_version_are_not_checked(self) -> None:
        result = validate_post(Post(id=None, user_id=-5, title="t", body="b", version=-1))
        assert result.is_valid

    def test_default_result_is_valid(self) -> None:
        assert ValidationResult().is_valid


class TestDomainErrors:
    """Tests for domain error classes."""

    def test_post_not_found_error_message(self) -> None:
        err = PostNotFoundError(999)
        assert err.post_id == 999
        assert "999" in err.message
        assert isinstance(err, PostDomainError)

    def test_invalid_post_error_carries_errors(self) -> None:
        err = InvalidPostError(("title must not be empty",))
        assert err.errors == ("title must not be empty",)
        assert "title must not be empty" in str(err)
        assert isinstance(err, PostDomainError)
