"""
Auth API schemas (request/response models).
"""

from __future__ import annotations

from pydantic import BaseModel


class RegisterRequest(BaseModel):
    # Presence is checked by the service so missing fields map to a 400.
    name: str | None = None
    email: str | None = None
    password: str | None = None
    isAdmin: bool | None = None


class LoginRequest(BaseModel):
    email: str | None = None
    password: str | None = None


class UserSummary(BaseModel):
    id: str
    username: str | None = None
    email: str
    isAdmin: bool = False


class AuthResponse(BaseModel):
    message: str
    user: UserSummary
