"""
CLI entry point for managing the posts store.

Usage:
    # Create the posts table
    python -m app.cli init-db

    # Load posts from a JSON array into an empty store
    python -m app.cli seed --file posts.json
"""

import argparse
import logging
import sys
from pathlib import Path

from app.application.posts.dtos import LoadPostsCommand
from app.application.posts.load_posts import LoadPostsUseCase
from app.core.config import settings
from app.infrastructure.database import create_db_engine
from app.infrastructure.posts.post_repository import PostRepositoryAdapter
from app.infrastructure.posts.seed_file import read_seed_file
from app.shared.logging import configure_logging

logger = logging.getLogger(__name__)


def _build_repository(args: argparse.Namespace) -> PostRepositoryAdapter:
    url = args.database_url or settings.get_database_url()
    return PostRepositoryAdapter(engine=create_db_engine(url))


def cmd_init_db(args: argparse.Namespace) -> None:
    """Create the posts schema."""
    _build_repository(args).ensure_schema()


def cmd_seed(args: argparse.Namespace) -> None:
    """Load posts from a seed file."""
    repository = _build_repository(args)
    repository.ensure_schema()
    records = read_seed_file(Path(args.file))
    loaded = LoadPostsUseCase(post_repo=repository).execute(
        LoadPostsCommand(records=records)
    )
    logger.info("Loaded %d posts.", loaded)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="posts-api",
        description="Manage the posts store.",
    )
    parser.add_argument(
        "--database-url",
        default=None,
        help="SQLAlchemy URL (defaults to the configured database)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_init = sub.add_parser("init-db", help="Create the posts table")
    p_init.set_defaults(func=cmd_init_db)

    p_seed = sub.add_parser("seed", help="Load posts into an empty store")
    p_seed.add_argument("--file", required=True, help="JSON array of posts")
    p_seed.set_defaults(func=cmd_seed)

    return parser


def main(argv: list[str] | None = None) -> int:
    configure_logging(level=settings.log_level)
    args = build_parser().parse_args(argv)
    args.func(args)
    return 0


if __name__ == "__main__":
    sys.exit(main())
