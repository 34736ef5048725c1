"""
User lookup business logic.
"""

from __future__ import annotations

from pymongo.asynchronous.database import AsyncDatabase

from auth import repository
from core import errors

from . import schemas


async def user_info(database: AsyncDatabase, email: str | None) -> schemas.UserInfoResponse:
    email = (email or "").strip()
    if not email:
        raise errors.ValidationError("Email required.")

    user_doc = await repository.get_user_by_email(database, email)
    if user_doc is None:
        raise errors.NotFoundError("User not found.")

    return schemas.UserInfoResponse(
        # Older documents only carry `name`.
        username=user_doc.get("username") or user_doc.get("name"),
        email=str(user_doc["email"]),
    )


async def list_users(database: AsyncDatabase) -> list[schemas.UserListItem]:
    rows = await repository.list_users(database)
    return [
        schemas.UserListItem(
            id=str(row["_id"]),
            username=row.get("username") or row.get("name"),
            email=str(row.get("email") or ""),
            isAdmin=bool(row.get("isAdmin", False)),
            createdAt=row.get("createdAt"),
        )
        for row in rows
    ]
