"""
Use case: Replace an existing post.

Input: UpdatePostCommand (path id + full payload)
Output: PostResult (the saved entity)
Side effects: Persists the replacement.
Failure cases: PostNotFoundError, InvalidPostError.
"""

import logging

from app.application.posts.dtos import PostResult, UpdatePostCommand, to_post_result
from app.domain.posts.entities import Post
from app.domain.posts.errors import InvalidPostError, PostNotFoundError
from app.domain.posts.ports import PostRepository
from app.domain.posts.validation import validate_post

logger = logging.getLogger(__name__)


class UpdatePostUseCase:
    """Orchestrates a full replacement of a stored post.

    Existence is checked before validation, so an unknown id is
    reported as not found whatever the payload contains. The payload
    is saved as submitted, including its own id; a payload without an
    id is inserted as a new post.
    """

    def __init__(self, post_repo: PostRepository) -> None:
        self._post_repo = post_repo

    def execute(self, command: UpdatePostCommand) -> PostResult:
        """Run the update post use case.

        Args:
            command: The path id and the replacement payload.

        Returns:
            The post as stored by the repository.

        Raises:
            PostNotFoundError: If no post has the path id.
            InvalidPostError: If the title or body is empty.
        """
        existing = self._post_repo.find_by_id(command.post_id)
        if existing is None:
            raise PostNotFoundError(command.post_id)

        post = Post(
            id=command.id,
            user_id=command.user_id,
            title=command.title,
            body=command.body,
            version=command.version,
        )

        result = validate_post(post)
        if not result.is_valid:
            logger.warning(
                "Rejected update of post id=%d: %s",
                command.post_id,
                ", ".join(result.errors),
            )
            raise InvalidPostError(result.errors)

        if post.id is None:
            logger.warning(
                "Payload for path id=%d has no id; saving it creates a new post "
                "and leaves post id=%d unchanged",
                command.post_id,
                command.post_id,
            )
        elif post.id != command.post_id:
            logger.warning(
                "Payload id=%d differs from path id=%d; saving payload as given",
                post.id,
                command.post_id,
            )

        saved = self._post_repo.save(post)
        logger.info("Updated post id=%s", saved.id)
        return to_post_result(saved)
