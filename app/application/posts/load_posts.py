"""
Use case: Seed an empty store with posts.

Input: LoadPostsCommand (decoded wire-format records)
Output: Number of posts saved.
Side effects: Persists every valid record, but only into an empty store.
Failure cases: None. Malformed or invalid records are skipped and logged.
"""

import logging
from typing import Optional

from app.application.posts.dtos import LoadPostsCommand
from app.domain.posts.entities import Post
from app.domain.posts.ports import PostRepository
from app.domain.posts.validation import validate_post

logger = logging.getLogger(__name__)


def _optional_int(value: object) -> Optional[int]:
    return None if value is None else int(value)


class LoadPostsUseCase:
    """Loads initial posts so a fresh deployment has data to serve."""

    def __init__(self, post_repo: PostRepository) -> None:
        self._post_repo = post_repo

    def execute(self, command: LoadPostsCommand) -> int:
        """Run the load posts use case.

        Args:
            command: Records using the API field names
                (``id``, ``userId``, ``title``, ``body``, ``version``).

        Returns:
            The number of posts saved. Zero when the store already
            holds posts.
        """
        existing = self._post_repo.count()
        if existing:
            logger.info("Store already holds %d posts; skipping seed.", existing)
            return 0

        loaded = 0
        skipped = 0
        for index, record in enumerate(command.records):
            try:
                post = Post(
                    id=_optional_int(record.get("id")),
                    user_id=int(record["userId"]),
                    title=str(record.get("title") or ""),
                    body=str(record.get("body") or ""),
                    version=_optional_int(record.get("version")),
                )
            except (KeyError, TypeError, ValueError, AttributeError):
                logger.warning("Skipping malformed record at index %d", index)
                skipped += 1
                continue

            result = validate_post(post)
            if not result.is_valid:
                logger.warning(
                    "Skipping invalid record at index %d: %s",
                    index,
                    ", ".join(result.errors),
                )
                skipped += 1
                continue

            self._post_repo.save(post)
            loaded += 1

        logger.info("Seed complete: %d loaded, %d skipped.", loaded, skipped)
        return loaded
