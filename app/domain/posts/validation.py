"""
Structural validation of Post payloads.

Pure functions only: no store access, no side effects.
"""

from dataclasses import dataclass

from app.domain.posts.entities import Post


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating a candidate post."""

    errors: tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.errors


def _is_blank(value: str) -> bool:
    return not value or not value.strip()


def validate_post(candidate: Post) -> ValidationResult:
    """Check that a post can be created or used as a full replacement.

    Only ``title`` and ``body`` are checked; ``id``, ``user_id`` and
    ``version`` are accepted as given.

    Args:
        candidate: The post to check.

    Returns:
        A ValidationResult listing every rule the candidate breaks.
    """
    errors = []
    if _is_blank(candidate.title):
        errors.append("title must not be empty")
    if _is_blank(candidate.body):
        errors.append("body must not be empty")
    return ValidationResult(errors=tuple(errors))
