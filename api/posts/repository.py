"""
Post persistence (raw SQL).
"""

from __future__ import annotations

from core import db

_COLUMNS = "id, title, body, created_at, updated_at"


async def ensure_table() -> None:
    await db.execute(
        """
        CREATE TABLE IF NOT EXISTS posts (
            id BIGSERIAL PRIMARY KEY,
            title VARCHAR(255) NOT NULL,
            body TEXT NOT NULL,
            created_at TIMESTAMPTZ NOT NULL DEFAULT now(),
            updated_at TIMESTAMPTZ NOT NULL DEFAULT now()
        )
        """
    )


async def list_posts() -> list[dict]:
    return await db.fetch_all(
        f"""
        SELECT {_COLUMNS}
        FROM posts
        ORDER BY id ASC
        """
    )


async def create_post(*, title: str, body: str) -> dict:
    row = await db.fetch_one(
        f"""
        INSERT INTO posts (title, body)
        VALUES ($1, $2)
        RETURNING {_COLUMNS}
        """,
        title,
        body,
    )
    if row is None:
        raise RuntimeError("Failed to create post.")
    return row


async def get_post(post_id: int) -> dict | None:
    return await db.fetch_one(
        f"""
        SELECT {_COLUMNS}
        FROM posts
        WHERE id = $1
        """,
        post_id,
    )


async def update_post(post_id: int, *, title: str, body: str) -> dict | None:
    """
    Overwrite title/body. Returns None when no row has `post_id`.
    """
    return await db.fetch_one(
        f"""
        UPDATE posts
        SET title = $2,
            body = $3,
            updated_at = now()
        WHERE id = $1
        RETURNING {_COLUMNS}
        """,
        post_id,
        title,
        body,
    )


async def delete_post(post_id: int) -> bool:
    row = await db.fetch_one(
        """
        DELETE FROM posts
        WHERE id = $1
        RETURNING id
        """,
        post_id,
    )
    return row is not None
