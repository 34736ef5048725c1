"""
Pydantic schemas for user lookup endpoints.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class UserInfoResponse(BaseModel):
    username: str | None = None
    email: str


class UserListItem(BaseModel):
    id: str
    username: str | None = None
    email: str
    isAdmin: bool = False
    createdAt: datetime | None = None
