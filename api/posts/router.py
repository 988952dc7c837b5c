"""
Post CRUD API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, status

from . import schemas, service

router = APIRouter()


@router.get("/posts")
async def list_posts() -> dict:
    posts = await service.list_posts()
    return {"data": posts}


@router.post("/posts", status_code=status.HTTP_201_CREATED)
async def create_post(request: schemas.PostWriteRequest) -> dict:
    post = await service.create_post(request)
    return {"message": service.CREATED_MESSAGE, "data": post}


@router.get("/posts/{post_id}")
async def get_post(post_id: str) -> dict:
    post = await service.get_post(post_id)
    return {"data": post}


@router.put("/posts/{post_id}")
async def update_post(post_id: str, request: schemas.PostWriteRequest) -> dict:
    post = await service.update_post(post_id, request)
    return {"message": service.UPDATED_MESSAGE, "data": post}


@router.delete("/posts/{post_id}")
async def delete_post(post_id: str) -> dict:
    await service.delete_post(post_id)
    return {"message": service.DELETED_MESSAGE}
