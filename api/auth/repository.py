"""
Users collection persistence helpers.
"""

from __future__ import annotations

from datetime import datetime, timezone

from pymongo import DESCENDING
from pymongo.asynchronous.database import AsyncDatabase

from core import db

# Projection that keeps the password hash inside the store.
PUBLIC_USER_PROJECTION = {"passwordHash": 0}


def normalize_email(email: str) -> str:
    return (email or "").strip()


async def create_user(
    database: AsyncDatabase,
    *,
    username: str,
    email: str,
    password_hash: str,
    is_admin: bool = False,
) -> dict:
    now = datetime.now(timezone.utc)
    document = {
        "username": username,
        "email": normalize_email(email),
        "passwordHash": password_hash,
        "isAdmin": is_admin,
        "createdAt": now,
        "updatedAt": now,
    }
    result = await database[db.USERS].insert_one(document)
    document["_id"] = result.inserted_id
    return document


async def get_user_by_email(database: AsyncDatabase, email: str) -> dict | None:
    return await database[db.USERS].find_one({"email": normalize_email(email)})


async def get_user_by_username(database: AsyncDatabase, username: str) -> dict | None:
    return await database[db.USERS].find_one({"username": username})


async def count_users_with_username(database: AsyncDatabase, username: str) -> int:
    return await database[db.USERS].count_documents({"username": username})


async def list_users(database: AsyncDatabase) -> list[dict]:
    cursor = database[db.USERS].find({}, PUBLIC_USER_PROJECTION, sort=[("createdAt", DESCENDING)])
    return await cursor.to_list(length=None)
