"""
Post CRUD endpoints.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, BackgroundTasks, Body, Depends, status
from pymongo.asynchronous.database import AsyncDatabase

from core import db
from sitemap import service as sitemap_service

from . import schemas, service

router = APIRouter(prefix="/api/posts")


@router.get("")
async def list_posts(
    database: AsyncDatabase = Depends(db.get_database),
) -> list[schemas.PostResponse]:
    return await service.list_posts(database)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_post(
    payload: schemas.PostCreateRequest,
    background_tasks: BackgroundTasks,
    database: AsyncDatabase = Depends(db.get_database),
) -> schemas.MessageResponse:
    """
    Create a post. The response does not include the new post's id.
    """
    await service.create_post(database, payload)
    background_tasks.add_task(sitemap_service.refresh_sitemap_background, database)
    return schemas.MessageResponse(message="Post created successfully.")


@router.put("/{post_id}")
async def update_post(
    post_id: str,
    background_tasks: BackgroundTasks,
    body: dict[str, Any] = Body(...),
    database: AsyncDatabase = Depends(db.get_database),
) -> schemas.PostResponse:
    post = await service.update_post(database, post_id, body)
    background_tasks.add_task(sitemap_service.refresh_sitemap_background, database)
    return post


@router.delete("/{post_id}")
async def delete_post(
    post_id: str,
    background_tasks: BackgroundTasks,
    database: AsyncDatabase = Depends(db.get_database),
) -> schemas.MessageResponse:
    await service.delete_post(database, post_id)
    background_tasks.add_task(sitemap_service.refresh_sitemap_background, database)
    return schemas.MessageResponse(message="Post deleted successfully.")
