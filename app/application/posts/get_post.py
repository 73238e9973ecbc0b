"""
Use case: Retrieve a single post by id.

Input: GetPostQuery (post_id)
Output: PostResult
Side effects: None (read-only query).
Failure cases: PostNotFoundError.
"""

import logging

from app.application.posts.dtos import GetPostQuery, PostResult, to_post_result
from app.domain.posts.errors import PostNotFoundError
from app.domain.posts.ports import PostRepository

logger = logging.getLogger(__name__)


class GetPostUseCase:
    """Orchestrates looking up one post by its identifier."""

    def __init__(self, post_repo: PostRepository) -> None:
        self._post_repo = post_repo

    def execute(self, query: GetPostQuery) -> PostResult:
        """Run the get post use case.

        Args:
            query: The lookup request with the post id.

        Returns:
            The stored post.

        Raises:
            PostNotFoundError: If no post has the requested id.
        """
        logger.info("Retrieving post id=%d", query.post_id)

        post = self._post_repo.find_by_id(query.post_id)
        if post is None:
            raise PostNotFoundError(query.post_id)

        return to_post_result(post)
