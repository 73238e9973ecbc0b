"""
Use case: List every stored post.

Input: None
Output: list[PostResult], in the store's order
Side effects: None (read-only query).
Failure cases: None.
"""

import logging

from app.application.posts.dtos import PostResult, to_post_result
from app.domain.posts.ports import PostRepository

logger = logging.getLogger(__name__)


class ListPostsUseCase:
    """Returns all posts exactly as the repository orders them."""

    def __init__(self, post_repo: PostRepository) -> None:
        self._post_repo = post_repo

    def execute(self) -> list[PostResult]:
        """Run the list posts use case.

        Returns:
            Every stored post.
        """
        posts = self._post_repo.find_all()
        logger.info("Listing %d posts", len(posts))
        return [to_post_result(post) for post in posts]
