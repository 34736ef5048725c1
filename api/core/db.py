"""
Async MongoDB access helpers using pymongo's asyncio client.

The client is created and closed by the app lifespan (see `api/main.py`),
which stores the database handle on `app.state.database`. Routers receive the
handle through the `get_database` dependency and pass it explicitly to
services and repositories.

Collections:
- users     (unique email, unique username)
- posts
- feedback
"""

from __future__ import annotations

import logging

from bson import ObjectId
from bson.errors import InvalidId
from fastapi import Request
from pymongo import ASCENDING, AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from . import settings
from .errors import ValidationError

USERS = "users"
POSTS = "posts"
FEEDBACK = "feedback"

logger = logging.getLogger(__name__)


def create_client() -> AsyncMongoClient:
    return AsyncMongoClient(settings.database_url(), tz_aware=True)


async def open_database(client: AsyncMongoClient) -> AsyncDatabase:
    """
    Ping the server and return the configured database handle.
    """
    await client.admin.command("ping")
    database = client[settings.database_name()]
    logger.info("store_connected database=%s", database.name)
    return database


async def ensure_indexes(database: AsyncDatabase) -> None:
    """
    Create the unique indexes backing the email/username pre-checks.

    Existing duplicates make index creation fail; the service still starts and
    keeps relying on the read-then-write checks.
    """
    try:
        await database[USERS].create_index([("email", ASCENDING)], unique=True, sparse=True)
        await database[USERS].create_index([("username", ASCENDING)], unique=True, sparse=True)
    except PyMongoError as exc:
        logger.warning("index_creation_failed collection=%s error=%s", USERS, exc)


def get_database(request: Request) -> AsyncDatabase:
    database = getattr(request.app.state, "database", None)
    if database is None:
        raise RuntimeError("Store is not initialized. Open it in the app lifespan.")
    return database


def parse_object_id(raw: str, *, what: str = "id") -> ObjectId:
    try:
        return ObjectId(raw)
    except (InvalidId, TypeError) as exc:
        raise ValidationError(f"Invalid {what}.") from exc


def id_str(document: dict) -> str:
    return str(document["_id"])
