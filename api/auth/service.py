"""
Auth business logic.
"""

from __future__ import annotations

import logging

from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import DuplicateKeyError

from core import errors

from . import repository, schemas, security

logger = logging.getLogger(__name__)

EMAIL_TAKEN = "Email already registered."
USERNAME_TAKEN = "Username already taken."


def to_user_summary(user_doc: dict) -> schemas.UserSummary:
    return schemas.UserSummary(
        id=str(user_doc["_id"]),
        username=user_doc.get("username") or user_doc.get("name"),
        email=str(user_doc["email"]),
        isAdmin=bool(user_doc.get("isAdmin", False)),
    )


async def _conflict_from_duplicate_key(
    database: AsyncDatabase,
    exc: DuplicateKeyError,
    *,
    username: str,
) -> errors.ConflictError:
    key_pattern = (exc.details or {}).get("keyPattern") or {}
    if not key_pattern:
        # Some servers omit the index in the error details; ask the store instead.
        username_taken = await repository.count_users_with_username(database, username) > 0
        key_pattern = {"username": 1} if username_taken else {"email": 1}
    if "username" in key_pattern:
        return errors.ConflictError(USERNAME_TAKEN)
    return errors.ConflictError(EMAIL_TAKEN)


async def register(database: AsyncDatabase, payload: schemas.RegisterRequest) -> schemas.AuthResponse:
    email = repository.normalize_email(payload.email or "")
    if not payload.name or not email or not payload.password:
        raise errors.ValidationError("All fields are required.")

    # Read-then-write; the unique indexes catch what slips through concurrently.
    if await repository.get_user_by_email(database, email) is not None:
        raise errors.ConflictError(EMAIL_TAKEN)
    if await repository.get_user_by_username(database, payload.name) is not None:
        raise errors.ConflictError(USERNAME_TAKEN)

    password_hash = security.hash_password(payload.password)
    try:
        user_doc = await repository.create_user(
            database,
            username=payload.name,
            email=email,
            password_hash=password_hash,
            is_admin=bool(payload.isAdmin),
        )
    except DuplicateKeyError as exc:
        raise await _conflict_from_duplicate_key(database, exc, username=payload.name) from exc

    logger.info("user_registered user_id=%s is_admin=%s", user_doc["_id"], user_doc["isAdmin"])
    return schemas.AuthResponse(
        message="User registered successfully.",
        user=to_user_summary(user_doc),
    )


async def login(database: AsyncDatabase, payload: schemas.LoginRequest) -> schemas.AuthResponse:
    email = repository.normalize_email(payload.email or "")
    if not email or not payload.password:
        raise errors.ValidationError("All fields are required.")

    user_doc = await repository.get_user_by_email(database, email)
    if user_doc is None:
        raise errors.AuthError()

    is_valid = security.verify_password(payload.password, str(user_doc.get("passwordHash") or ""))
    if not is_valid:
        raise errors.AuthError()

    return schemas.AuthResponse(
        message="Login successful.",
        user=to_user_summary(user_doc),
    )
