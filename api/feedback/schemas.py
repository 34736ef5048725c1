"""
Feedback API schemas.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class FeedbackRequest(BaseModel):
    name: str | None = None
    email: str | None = None
    message: str | None = None


class FeedbackCreatedResponse(BaseModel):
    success: bool = True
    message: str


class FeedbackResponse(BaseModel):
    id: str
    name: str
    email: str
    message: str
    date: datetime | None = None
