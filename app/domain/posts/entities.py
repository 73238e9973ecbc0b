"""
Domain entities for the posts bounded context.

Entities contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Post:
    """A single post authored by an external user.

    Attributes:
        id: Unique identifier. None until the store assigns one.
        user_id: Identifier of the owning user. Not checked against any store.
        title: Post title. Must be non-empty to be persisted.
        body: Post body. Must be non-empty to be persisted.
        version: Opaque optimistic-concurrency marker, passed through unchanged.
    """

    id: Optional[int]
    user_id: int
    title: str
    body: str
    version: Optional[int] = None
