"""
Posts collection persistence helpers.
"""

from __future__ import annotations

from typing import Any

from bson import ObjectId
from pymongo import DESCENDING, ReturnDocument
from pymongo.asynchronous.database import AsyncDatabase

from core import db


async def insert_post(database: AsyncDatabase, document: dict[str, Any]) -> ObjectId:
    result = await database[db.POSTS].insert_one(document)
    return result.inserted_id


async def list_posts(database: AsyncDatabase, *, projection: dict[str, int] | None = None) -> list[dict]:
    """
    Return every post, most recently updated first.
    """
    cursor = database[db.POSTS].find({}, projection, sort=[("updatedAt", DESCENDING)])
    return await cursor.to_list(length=None)


async def get_post(database: AsyncDatabase, post_id: ObjectId) -> dict | None:
    return await database[db.POSTS].find_one({"_id": post_id})


async def update_post(database: AsyncDatabase, post_id: ObjectId, fields: dict[str, Any]) -> dict | None:
    if not fields:
        return await get_post(database, post_id)
    return await database[db.POSTS].find_one_and_update(
        {"_id": post_id},
        {"$set": fields},
        return_document=ReturnDocument.AFTER,
    )


async def delete_post(database: AsyncDatabase, post_id: ObjectId) -> bool:
    result = await database[db.POSTS].delete_one({"_id": post_id})
    return result.deleted_count > 0
