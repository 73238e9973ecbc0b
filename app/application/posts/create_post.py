"""
Use case: Create a new post.

Input: CreatePostCommand
Output: PostResult (the saved entity)
Side effects: Persists the post.
Failure cases: InvalidPostError.
"""

import logging

from app.application.posts.dtos import CreatePostCommand, PostResult, to_post_result
from app.domain.posts.entities import Post
from app.domain.posts.errors import InvalidPostError
from app.domain.posts.ports import PostRepository
from app.domain.posts.validation import validate_post

logger = logging.getLogger(__name__)


class CreatePostUseCase:
    """Validates a new post and hands it to the repository.

    The repository is never called when validation fails.
    """

    def __init__(self, post_repo: PostRepository) -> None:
        self._post_repo = post_repo

    def execute(self, command: CreatePostCommand) -> PostResult:
        """Run the create post use case.

        Args:
            command: The post to create.

        Returns:
            The post as stored by the repository.

        Raises:
            InvalidPostError: If the title or body is empty.
        """
        post = Post(
            id=command.id,
            user_id=command.user_id,
            title=command.title,
            body=command.body,
            version=command.version,
        )

        result = validate_post(post)
        if not result.is_valid:
            logger.warning("Rejected new post: %s", ", ".join(result.errors))
            raise InvalidPostError(result.errors)

        saved = self._post_repo.save(post)
        logger.info("Created post id=%s", saved.id)
        return to_post_result(saved)
