"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (health and posts)
- Error handlers (centralized domain-to-HTTP mapping)
- Security middleware (headers, rate limiting)
- Logging configuration
- Startup schema creation and seed loading

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from app.application.posts.dtos import LoadPostsCommand
from app.application.posts.load_posts import LoadPostsUseCase
from app.core.config import settings
from app.infrastructure.posts.post_repository import PostRepositoryAdapter
from app.infrastructure.posts.seed_file import read_seed_file
from app.interfaces.health import router as health_router
from app.interfaces.posts.dependencies import get_db_engine
from app.interfaces.posts.router import router as posts_router
from app.shared.errors.handlers import register_error_handlers
from app.shared.logging import configure_logging
from app.shared.security.headers import SecurityHeadersMiddleware
from app.shared.security.rate_limiting import limiter, rate_limit_exceeded_handler

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: prepare the posts store before serving."""
    if settings.create_schema or settings.seed_file:
        repository = PostRepositoryAdapter(engine=get_db_engine())

        if settings.create_schema:
            repository.ensure_schema()

        if settings.seed_file:
            records = read_seed_file(Path(settings.seed_file))
            LoadPostsUseCase(post_repo=repository).execute(
                LoadPostsCommand(records=records)
            )

    yield

    get_db_engine().dispose()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    # --- Rate Limiting ---
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)
    app.add_middleware(SlowAPIMiddleware)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix="/api")
    app.include_router(posts_router, prefix="/api")

    logger.info("%s %s configured", settings.project_name, settings.version)
    return app


app = create_app()
