"""
Use case: Delete a post.

Input: DeletePostCommand (post_id)
Output: None
Side effects: Removes the post if present.
Failure cases: None. Deleting an unknown id is a no-op.
"""

import logging

from app.application.posts.dtos import DeletePostCommand
from app.domain.posts.ports import PostRepository

logger = logging.getLogger(__name__)


class DeletePostUseCase:
    """Deletes by id without checking existence first."""

    def __init__(self, post_repo: PostRepository) -> None:
        self._post_repo = post_repo

    def execute(self, command: DeletePostCommand) -> None:
        logger.info("Deleting post id=%d", command.post_id)
        self._post_repo.delete_by_id(command.post_id)
