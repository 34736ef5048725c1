"""
Sitemap endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import Response
from pymongo.asynchronous.database import AsyncDatabase

from core import db

from . import service

router = APIRouter()


@router.get("/sitemap.xml")
async def get_sitemap(database: AsyncDatabase = Depends(db.get_database)) -> Response:
    xml = await service.generate_sitemap(database)
    return Response(content=xml, media_type="application/xml")
