"""
Pydantic schemas for posts API request/response validation.

These schemas define the wire contract: field names follow the
public JSON format (``userId``), while Python code uses ``user_id``.
Only types are enforced here; content rules live in the domain validator.
"""

from pydantic import BaseModel, ConfigDict, Field


class PostRequest(BaseModel):
    """Request schema for creating or replacing a post.

    Attributes:
        id: Post identifier. Optional on create.
        user_id: Identifier of the owning user (``userId`` on the wire).
        title: Post title.
        body: Post body.
        version: Opaque optimistic-concurrency marker.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: int | None = Field(default=None, description="Post identifier")
    user_id: int = Field(..., alias="userId", description="Owning user identifier")
    title: str = Field(..., description="Post title, must not be empty")
    body: str = Field(..., description="Post body, must not be empty")
    version: int | None = Field(
        default=None, description="Optimistic concurrency version, passed through"
    )


class PostResponse(BaseModel):
    """Response schema for a single stored post."""

    model_config = ConfigDict(populate_by_name=True)

    id: int | None
    user_id: int = Field(..., alias="userId")
    title: str
    body: str
    version: int | None


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str


class ErrorResponse(BaseModel):
    """Standard error response returned by all error handlers."""

    error: str
    detail: str | None = None
