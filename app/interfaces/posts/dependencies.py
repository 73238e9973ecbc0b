"""
Dependency injection for the posts bounded context.

Provides FastAPI dependency functions that wire the repository
adapter into use cases via constructor injection.
Tests replace ``get_post_repository`` through ``app.dependency_overrides``.
"""

from functools import lru_cache

from fastapi import Depends
from sqlalchemy.engine import Engine

from app.application.posts.create_post import CreatePostUseCase
from app.application.posts.delete_post import DeletePostUseCase
from app.application.posts.dtos import GetPostQuery
from app.application.posts.get_post import GetPostUseCase
from app.application.posts.list_posts import ListPostsUseCase
from app.application.posts.update_post import UpdatePostUseCase
from app.core.config import settings
from app.domain.posts.ports import PostRepository
from app.infrastructure.database import create_db_engine
from app.infrastructure.posts.post_repository import PostRepositoryAdapter


@lru_cache(maxsize=1)
def get_db_engine() -> Engine:
    """Build the process-wide SQLAlchemy engine from application settings."""
    return create_db_engine(settings.get_database_url())


def get_post_repository() -> PostRepository:
    """Build the PostRepository adapter."""
    return PostRepositoryAdapter(engine=get_db_engine())


def get_list_posts_use_case(
    post_repo: PostRepository = Depends(get_post_repository),
) -> ListPostsUseCase:
    """Build ListPostsUseCase with its infrastructure dependencies."""
    return ListPostsUseCase(post_repo=post_repo)


def get_post_use_case(
    post_repo: PostRepository = Depends(get_post_repository),
) -> GetPostUseCase:
    """Build GetPostUseCase with its infrastructure dependencies."""
    return GetPostUseCase(post_repo=post_repo)


def get_create_post_use_case(
    post_repo: PostRepository = Depends(get_post_repository),
) -> CreatePostUseCase:
    """Build CreatePostUseCase with its infrastructure dependencies."""
    return CreatePostUseCase(post_repo=post_repo)


def get_update_post_use_case(
    post_repo: PostRepository = Depends(get_post_repository),
) -> UpdatePostUseCase:
    """Build UpdatePostUseCase with its infrastructure dependencies."""
    return UpdatePostUseCase(post_repo=post_repo)


def get_delete_post_use_case(
    post_repo: PostRepository = Depends(get_post_repository),
) -> DeletePostUseCase:
    """Build DeletePostUseCase with its infrastructure dependencies."""
    return DeletePostUseCase(post_repo=post_repo)


def require_existing_post(
    post_id: int,
    use_case: GetPostUseCase = Depends(get_post_use_case),
) -> None:
    """Raise PostNotFoundError unless a post exists for the path id.

    Route dependencies run before the request body is rejected, so an
    unknown id is reported as not found whatever the payload contains.
    """
    use_case.execute(GetPostQuery(post_id=post_id))
