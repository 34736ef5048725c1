"""
User lookup API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from pymongo.asynchronous.database import AsyncDatabase

from auth import dependencies as auth_dependencies
from core import db

from . import schemas, service

router = APIRouter(prefix="/api")


@router.get("/userinfo")
async def get_user_info(
    email: str | None = Query(default=None),
    database: AsyncDatabase = Depends(db.get_database),
) -> schemas.UserInfoResponse:
    return await service.user_info(database, email)


@router.get("/register", dependencies=[Depends(auth_dependencies.require_admin_flag)])
async def list_registered_users(
    database: AsyncDatabase = Depends(db.get_database),
) -> list[schemas.UserListItem]:
    """
    List every registered user for the admin dashboard, newest first.
    """
    return await service.list_users(database)
