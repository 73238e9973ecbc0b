"""
Domain-specific errors for the posts bounded context.

These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class PostDomainError(Exception):
    """Base error for all posts domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class PostNotFoundError(PostDomainError):
    """Raised when no post exists for the requested id."""

    def __init__(self, post_id: int) -> None:
        super().__init__(f"Post not found: {post_id}")
        self.post_id = post_id


class InvalidPostError(PostDomainError):
    """Raised when a post payload fails structural validation."""

    def __init__(self, errors: tuple[str, ...]) -> None:
        super().__init__(f"Invalid post: {'; '.join(errors)}")
        self.errors = errors
