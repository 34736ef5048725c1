"""
Registration and login endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from pymongo.asynchronous.database import AsyncDatabase

from core import db

from . import schemas, service

router = APIRouter(prefix="/api")


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(
    payload: schemas.RegisterRequest,
    database: AsyncDatabase = Depends(db.get_database),
) -> schemas.AuthResponse:
    return await service.register(database, payload)


@router.post("/login")
async def login(
    payload: schemas.LoginRequest,
    database: AsyncDatabase = Depends(db.get_database),
) -> schemas.AuthResponse:
    return await service.login(database, payload)
