"""
Adapter: Post repository.

Implements PostRepository port.
Persists posts in the ``posts`` table through a SQLAlchemy engine.
Works against PostgreSQL and SQLite.
"""

import logging
from typing import Optional

from sqlalchemy import Column, Integer, MetaData, Table, Text, text
from sqlalchemy.engine import Engine, Row

from app.domain.posts.entities import Post
from app.domain.posts.ports import PostRepository

logger = logging.getLogger(__name__)

metadata = MetaData()

posts_table = Table(
    "posts",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("user_id", Integer, nullable=False),
    Column("title", Text, nullable=False),
    Column("body", Text, nullable=False),
    Column("version", Integer, nullable=True),
)


# Explicit ids bypass the serial sequence; move it past the highest stored id.
_SYNC_ID_SEQUENCE = text(
    """
    SELECT setval(
        pg_get_serial_sequence('posts', 'id'),
        GREATEST((SELECT MAX(id) FROM posts), 1)
    )
    """
)


def _row_to_post(row: Row) -> Post:
    return Post(
        id=row[0],
        user_id=row[1],
        title=row[2],
        body=row[3],
        version=row[4],
    )


class PostRepositoryAdapter(PostRepository):
    """Stores posts in a relational database.

    Each call runs in its own connection; writes run in their own
    transaction.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def ensure_schema(self) -> None:
        """Create the posts table if it does not exist yet."""
        metadata.create_all(self._engine, tables=[posts_table])
        logger.info("Posts schema ready.")

    def find_all(self) -> list[Post]:
        """Return every post ordered by id ascending."""
        query = text(
            """
            SELECT id, user_id, title, body, version
            FROM posts
            ORDER BY id
            """
        )

        with self._engine.connect() as conn:
            rows = conn.execute(query).fetchall()

        return [_row_to_post(row) for row in rows]

    def find_by_id(self, post_id: int) -> Optional[Post]:
        """Return a post by its id, or None if not found.

        Args:
            post_id: Identifier of the post.
        """
        query = text(
            """
            SELECT id, user_id, title, body, version
            FROM posts
            WHERE id = :id
            """
        )

        with self._engine.connect() as conn:
            row = conn.execute(query, {"id": post_id}).first()

        if row is None:
            return None
        return _row_to_post(row)

    def save(self, post: Post) -> Post:
        """Create or fully replace a post.

        A post without an id is inserted and returned with the id the
        database generated. A post with an id replaces the stored row,
        or is inserted under that id when no row exists. On PostgreSQL the
        id sequence is then moved past it so generated ids do not collide.

        Args:
            post: The post to persist.

        Returns:
            The stored post.
        """
        values = {
            "user_id": post.user_id,
            "title": post.title,
            "body": post.body,
            "version": post.version,
        }

        with self._engine.begin() as conn:
            if post.id is None:
                result = conn.execute(posts_table.insert().values(**values))
                new_id = result.inserted_primary_key[0]
                logger.debug("Inserted post id=%d", new_id)
                return Post(id=new_id, **values)

            updated = conn.execute(
                text(
                    """
                    UPDATE posts
                    SET user_id = :user_id, title = :title,
                        body = :body, version = :version
                    WHERE id = :id
                    """
                ),
                {"id": post.id, **values},
            )
            if updated.rowcount == 0:
                conn.execute(
                    text(
                        """
                        INSERT INTO posts (id, user_id, title, body, version)
                        VALUES (:id, :user_id, :title, :body, :version)
                        """
                    ),
                    {"id": post.id, **values},
                )
                if conn.dialect.name == "postgresql":
                    conn.execute(_SYNC_ID_SEQUENCE)
                logger.debug("Inserted post id=%d", post.id)
            else:
                logger.debug("Replaced post id=%d", post.id)

        return post

    def delete_by_id(self, post_id: int) -> None:
        """Delete a post by its id. No-op if absent."""
        with self._engine.begin() as conn:
            result = conn.execute(
                text("DELETE FROM posts WHERE id = :id"), {"id": post_id}
            )
        logger.debug("Deleted %d row(s) for post id=%d", result.rowcount, post_id)

    def count(self) -> int:
        with self._engine.connect() as conn:
            return conn.execute(text("SELECT COUNT(*) FROM posts")).scalar_one()
