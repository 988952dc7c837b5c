"""
Post business logic.

Lookups come back from the repository as `None` on a miss; this layer turns
that into a 404 so routers stay thin.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from . import repository, schemas

logger = logging.getLogger(__name__)

# posts.id is BIGSERIAL; anything outside this range cannot exist.
MAX_POST_ID = 2**63 - 1

NOT_FOUND_DETAIL = "Post not found."
CREATED_MESSAGE = "Post created successfully"
UPDATED_MESSAGE = "Post updated successfully"
DELETED_MESSAGE = "Post deleted successfully"


def _to_post_response(row: dict) -> schemas.PostResponse:
    return schemas.PostResponse(
        id=int(row["id"]),
        title=str(row["title"]),
        body=str(row["body"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def _not_found(post_id: object) -> HTTPException:
    logger.info("post_not_found id=%r", post_id)
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND_DETAIL)


def parse_post_id(raw: str | int) -> int | None:
    """
    Turn a path segment into a storable id, or None when no post could have it.
    """
    if isinstance(raw, int):
        post_id = raw
    else:
        text = raw.strip()
        if not (text.isascii() and text.isdigit()):
            return None
        post_id = int(text)
    return post_id if 1 <= post_id <= MAX_POST_ID else None


async def list_posts() -> list[schemas.PostResponse]:
    rows = await repository.list_posts()
    return [_to_post_response(row) for row in rows]


async def create_post(payload: schemas.PostWriteRequest) -> schemas.PostResponse:
    row = await repository.create_post(title=payload.title, body=payload.body)
    post = _to_post_response(row)
    logger.info("post_created id=%s", post.id)
    return post


async def get_post(raw_id: str | int) -> schemas.PostResponse:
    post_id = parse_post_id(raw_id)
    if post_id is None:
        raise _not_found(raw_id)
    row = await repository.get_post(post_id)
    if row is None:
        raise _not_found(post_id)
    return _to_post_response(row)


async def update_post(raw_id: str | int, payload: schemas.PostWriteRequest) -> schemas.PostResponse:
    # Only title/body are written; the id never changes.
    post_id = parse_post_id(raw_id)
    if post_id is None:
        raise _not_found(raw_id)
    row = await repository.update_post(post_id, title=payload.title, body=payload.body)
    if row is None:
        raise _not_found(post_id)
    logger.info("post_updated id=%s", post_id)
    return _to_post_response(row)


async def delete_post(raw_id: str | int) -> None:
    post_id = parse_post_id(raw_id)
    if post_id is None:
        raise _not_found(raw_id)
    deleted = await repository.delete_post(post_id)
    if not deleted:
        raise _not_found(post_id)
    logger.info("post_deleted id=%s", post_id)
