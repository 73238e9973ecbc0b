"""
SQLAlchemy engine construction.

One engine per process; adapters receive it through their constructor.
"""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine


def create_db_engine(url: str) -> Engine:
    """Build a SQLAlchemy engine for the given database URL.

    SQLite connections are shared across the server's worker threads,
    so the same-thread check is disabled for them.
    """
    connect_args = {}
    if url.startswith("sqlite"):
        connect_args["check_same_thread"] = False
    return create_engine(url, pool_pre_ping=True, connect_args=connect_args)
