"""
Data Transfer Objects for the posts application layer.

DTOs carry data between the interface and application layers.
"""

from dataclasses import dataclass
from typing import Optional

from app.domain.posts.entities import Post


@dataclass(frozen=True)
class GetPostQuery:
    """Input DTO for retrieving a single post.

    Attributes:
        post_id: Identifier taken from the request path.
    """

    post_id: int


@dataclass(frozen=True)
class CreatePostCommand:
    """Input DTO for creating a post.

    Attributes:
        id: Caller-supplied identifier, or None to let the store assign one.
        user_id: Identifier of the owning user.
        title: Post title.
        body: Post body.
        version: Opaque optimistic-concurrency marker.
    """

    id: Optional[int]
    user_id: int
    title: str
    body: str
    version: Optional[int] = None


@dataclass(frozen=True)
class UpdatePostCommand:
    """Input DTO for replacing an existing post.

    Attributes:
        post_id: Identifier taken from the request path; must exist.
        id: Identifier carried by the payload. Saved as given.
        user_id: Identifier of the owning user.
        title: Post title.
        body: Post body.
        version: Opaque optimistic-concurrency marker.
    """

    post_id: int
    id: Optional[int]
    user_id: int
    title: str
    body: str
    version: Optional[int] = None


@dataclass(frozen=True)
class DeletePostCommand:
    """Input DTO for deleting a post."""

    post_id: int


@dataclass(frozen=True)
class LoadPostsCommand:
    """Input DTO for seeding the store from raw wire-format records.

    Attributes:
        records: Decoded JSON objects using the API field names.
    """

    records: list[dict]


@dataclass(frozen=True)
class PostResult:
    """Output DTO for a stored post."""

    id: Optional[int]
    user_id: int
    title: str
    body: str
    version: Optional[int]


def to_post_result(post: Post) -> PostResult:
    """Map a Post entity to its output DTO."""
    return PostResult(
        id=post.id,
        user_id=post.user_id,
        title=post.title,
        body=post.body,
        version=post.version,
    )
