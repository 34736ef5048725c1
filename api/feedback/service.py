"""
Feedback business logic.
"""

from __future__ import annotations

import logging

from pymongo.asynchronous.database import AsyncDatabase

from core import errors

from . import repository, schemas

logger = logging.getLogger(__name__)


async def submit_feedback(database: AsyncDatabase, payload: schemas.FeedbackRequest) -> schemas.FeedbackCreatedResponse:
    if not payload.name or not payload.email or not payload.message:
        raise errors.ValidationError("All fields are required.")

    document = await repository.insert_feedback(
        database,
        name=payload.name,
        email=payload.email,
        message=payload.message,
    )
    logger.info("feedback_submitted feedback_id=%s", document["_id"])
    return schemas.FeedbackCreatedResponse(message="Feedback submitted successfully.")


async def list_feedback(database: AsyncDatabase) -> list[schemas.FeedbackResponse]:
    rows = await repository.list_feedback(database)
    return [
        schemas.FeedbackResponse(
            id=str(row["_id"]),
            name=str(row.get("name") or ""),
            email=str(row.get("email") or ""),
            message=str(row.get("message") or ""),
            date=row.get("date"),
        )
        for row in rows
    ]
