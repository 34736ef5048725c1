"""
Feedback endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from pymongo.asynchronous.database import AsyncDatabase

from core import db

from . import schemas, service

router = APIRouter(prefix="/api/feedback")


@router.post("", status_code=status.HTTP_201_CREATED)
async def submit_feedback(
    payload: schemas.FeedbackRequest,
    database: AsyncDatabase = Depends(db.get_database),
) -> schemas.FeedbackCreatedResponse:
    return await service.submit_feedback(database, payload)


@router.get("")
async def list_feedback(
    database: AsyncDatabase = Depends(db.get_database),
) -> list[schemas.FeedbackResponse]:
    return await service.list_feedback(database)
