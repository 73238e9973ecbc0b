"""
Shared fixtures for the posts test suite.

The API tests replace the repository with a MagicMock through
FastAPI's dependency overrides, so no database is needed.
"""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine

from app.domain.posts.entities import Post
from app.domain.posts.ports import PostRepository
from app.infrastructure.posts.post_repository import PostRepositoryAdapter
from app.interfaces.posts.dependencies import get_post_repository
from app.main import app
from app.shared.security.rate_limiting import limiter


@pytest.fixture
def posts() -> list[Post]:
    return [
        Post(id=1, user_id=1, title="Hello", body="Welcome", version=None),
        Post(id=2, user_id=2, title="Welcome", body="Hello", version=None),
    ]


@pytest.fixture
def post_repo() -> MagicMock:
    return MagicMock(spec=PostRepository)


@pytest.fixture
def client(post_repo: MagicMock):
    limiter.enabled = False
    app.dependency_overrides[get_post_repository] = lambda: post_repo
    yield TestClient(app)
    app.dependency_overrides.clear()
    limiter.enabled = True


@pytest.fixture
def sqlite_repo(tmp_path) -> PostRepositoryAdapter:
    engine = create_engine(f"sqlite:///{tmp_path / 'posts.db'}")
    repo = PostRepositoryAdapter(engine=engine)
    repo.ensure_schema()
    yield repo
    engine.dispose()
