"""
Port interfaces (ABCs) for the posts bounded context.

Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.posts.entities import Post


class PostRepository(ABC):
    """Port for persisting and retrieving posts."""

    @abstractmethod
    def find_all(self) -> list[Post]:
        """Return every stored post in the store's own order."""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, post_id: int) -> Optional[Post]:
        """Return a post by its id, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def save(self, post: Post) -> Post:
        """Create or fully replace a post.

        Returns:
            The stored post, with its id assigned if it had none.
        """
        raise NotImplementedError

    @abstractmethod
    def delete_by_id(self, post_id: int) -> None:
        """Delete a post by its id. No-op if the post does not exist."""
        raise NotImplementedError

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored posts."""
        raise NotImplementedError
