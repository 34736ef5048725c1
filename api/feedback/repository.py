"""
Feedback collection persistence helpers.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pymongo.asynchronous.database import AsyncDatabase

from core import db


async def insert_feedback(database: AsyncDatabase, *, name: str, email: str, message: str) -> dict:
    document = {
        "name": name,
        "email": email,
        "message": message,
        "date": datetime.now(timezone.utc),
    }
    result = await database[db.FEEDBACK].insert_one(document)
    document["_id"] = result.inserted_id
    return document


async def list_feedback(database: AsyncDatabase) -> list[dict]:
    return await database[db.FEEDBACK].find({}).to_list(length=None)
