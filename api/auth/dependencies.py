"""
Auth dependencies for admin-only FastAPI routes.

The admin flag is a client-supplied claim. It is not verified against the
stored user and is not an access-control boundary.
"""

from __future__ import annotations

from fastapi import Header, Query

from core import errors


def _is_true(raw: str | None) -> bool:
    return (raw or "").strip().lower() == "true"


async def require_admin_flag(
    is_admin: str | None = Query(default=None, alias="isAdmin"),
    x_admin: str | None = Header(default=None),
) -> None:
    if not (_is_true(is_admin) or _is_true(x_admin)):
        raise errors.ForbiddenError("Access denied. Admins only.")
