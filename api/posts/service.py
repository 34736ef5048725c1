"""
Post business logic.

Scope:
- author identity resolution (username -> user id, else raw name)
- create / list / update / delete
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any

from bson import ObjectId
from pydantic import ValidationError as PydanticValidationError
from pymongo.asynchronous.database import AsyncDatabase

from auth import repository as users_repository
from core import db, errors

from . import repository, schemas

logger = logging.getLogger(__name__)

# Keys an update body may not overwrite.
IMMUTABLE_FIELDS = frozenset({"_id", "id"})
DATE_FIELDS = ("createdAt", "updatedAt")


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def to_post_response(document: dict) -> schemas.PostResponse:
    data = {key: value for key, value in document.items() if key not in IMMUTABLE_FIELDS}
    data["author"] = schemas.author_from_stored(document.get("author"))
    data["images"] = document.get("images") or []
    return schemas.PostResponse(id=db.id_str(document), **data)


async def resolve_author(database: AsyncDatabase, author: str) -> ObjectId | str:
    """
    Return the id of the user whose username is exactly `author`, or `author` itself.
    """
    user_doc = await users_repository.get_user_by_username(database, author)
    if user_doc is None:
        return author
    return user_doc["_id"]


async def create_post(database: AsyncDatabase, payload: schemas.PostCreateRequest) -> ObjectId:
    if not payload.title or not payload.content or not payload.author or not payload.category:
        raise errors.ValidationError("Missing required fields.")

    now = _utc_now()
    document = {
        "title": payload.title,
        "content": payload.content,
        "author": await resolve_author(database, payload.author),
        "category": payload.category,
        "createdAt": _as_utc(payload.createdAt) if payload.createdAt else now,
        "updatedAt": now,
        "thumbnail": payload.thumbnail,
        "images": payload.images or [],
        "keywords": payload.keywords,
        "subtitle": payload.subtitle,
        "authorGmail": payload.authorGmail,
    }
    post_id = await repository.insert_post(database, document)
    logger.info("post_created post_id=%s author_is_user=%s", post_id, isinstance(document["author"], ObjectId))
    return post_id


async def list_posts(database: AsyncDatabase) -> list[schemas.PostResponse]:
    rows = await repository.list_posts(database)
    return [to_post_response(row) for row in rows]


def _overlay_fields(body: dict[str, Any]) -> dict[str, Any]:
    fields = {key: value for key, value in body.items() if key not in IMMUTABLE_FIELDS}

    # Schema keys are cast so a stored post always renders; other keys pass through.
    known = {key: value for key, value in fields.items() if key in schemas.PostUpdateFields.model_fields}
    try:
        cast = schemas.PostUpdateFields.model_validate(known)
    except PydanticValidationError as exc:
        loc = exc.errors()[0].get("loc") or ("field",)
        raise errors.ValidationError(f"Invalid {loc[0]}.") from exc

    for key in known:
        value = getattr(cast, key)
        if key in DATE_FIELDS and value is not None:
            value = _as_utc(value)
        fields[key] = value
    return fields


async def update_post(database: AsyncDatabase, raw_post_id: str, body: dict[str, Any]) -> schemas.PostResponse:
    """
    Overlay the body's fields onto the stored post.

    Schema fields are cast (123 -> "123", "a.png" -> ["a.png"]) and anything
    else is stored as sent. `author` is not resolved again, and `updatedAt`
    only changes when the caller sends it.
    """
    post_id = db.parse_object_id(raw_post_id, what="post id")
    document = await repository.update_post(database, post_id, _overlay_fields(body))
    if document is None:
        raise errors.NotFoundError("Post not found.")

    logger.info("post_updated post_id=%s fields=%s", post_id, sorted(body))
    return to_post_response(document)


async def delete_post(database: AsyncDatabase, raw_post_id: str) -> None:
    post_id = db.parse_object_id(raw_post_id, what="post id")
    if not await repository.delete_post(database, post_id):
        raise errors.NotFoundError("Post not found.")
    logger.info("post_deleted post_id=%s", post_id)
