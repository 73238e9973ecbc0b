"""
FastAPI router for the posts bounded context.

All routes delegate to use cases. No business logic here.
Success status codes are part of the public contract:
200 list/get, 201 create, 202 update, 204 delete.
Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends, Response, status

from app.application.posts.create_post import CreatePostUseCase
from app.application.posts.delete_post import DeletePostUseCase
from app.application.posts.dtos import (
    CreatePostCommand,
    DeletePostCommand,
    GetPostQuery,
    PostResult,
    UpdatePostCommand,
)
from app.application.posts.get_post import GetPostUseCase
from app.application.posts.list_posts import ListPostsUseCase
from app.application.posts.update_post import UpdatePostUseCase
from app.interfaces.posts.dependencies import (
    get_create_post_use_case,
    get_delete_post_use_case,
    get_list_posts_use_case,
    get_post_use_case,
    get_update_post_use_case,
    require_existing_post,
)
from app.interfaces.posts.schemas import ErrorResponse, PostRequest, PostResponse

router = APIRouter(prefix="/posts", tags=["posts"])


def _to_response(result: PostResult) -> PostResponse:
    return PostResponse(
        id=result.id,
        user_id=result.user_id,
        title=result.title,
        body=result.body,
        version=result.version,
    )


@router.get(
    "",
    response_model=list[PostResponse],
    summary="List posts",
    description="Return every stored post in storage order.",
)
def list_posts(
    use_case: ListPostsUseCase = Depends(get_list_posts_use_case),
) -> list[PostResponse]:
    """List all posts."""
    return [_to_response(r) for r in use_case.execute()]


@router.get(
    "/{post_id}",
    response_model=PostResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Get a post",
    description="Return a single post by id.",
)
def get_post(
    post_id: int,
    use_case: GetPostUseCase = Depends(get_post_use_case),
) -> PostResponse:
    """Get one post by id."""
    result = use_case.execute(GetPostQuery(post_id=post_id))
    return _to_response(result)


@router.post(
    "",
    response_model=PostResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
    summary="Create a post",
    description="Validate and store a new post. Title and body must not be empty.",
)
def create_post(
    request: PostRequest,
    use_case: CreatePostUseCase = Depends(get_create_post_use_case),
) -> PostResponse:
    """Create a post and echo the saved entity."""
    command = CreatePostCommand(
        id=request.id,
        user_id=request.user_id,
        title=request.title,
        body=request.body,
        version=request.version,
    )
    return _to_response(use_case.execute(command))


@router.put(
    "/{post_id}",
    response_model=PostResponse,
    status_code=status.HTTP_202_ACCEPTED,
    dependencies=[Depends(require_existing_post)],
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Replace a post",
    description="Replace an existing post wholesale with the submitted payload.",
)
def update_post(
    post_id: int,
    request: PostRequest,
    use_case: UpdatePostUseCase = Depends(get_update_post_use_case),
) -> PostResponse:
    """Replace a post and echo the saved entity."""
    command = UpdatePostCommand(
        post_id=post_id,
        id=request.id,
        user_id=request.user_id,
        title=request.title,
        body=request.body,
        version=request.version,
    )
    return _to_response(use_case.execute(command))


@router.delete(
    "/{post_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a post",
    description="Delete a post by id. Deleting an unknown id also succeeds.",
)
def delete_post(
    post_id: int,
    use_case: DeletePostUseCase = Depends(get_delete_post_use_case),
) -> Response:
    """Delete a post."""
    use_case.execute(DeletePostCommand(post_id=post_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
