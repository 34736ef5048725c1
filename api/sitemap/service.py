"""
XML sitemap generation.

The sitemap lists a fixed set of frontend routes plus one `/blog/<slug>` page
per post. When SITEMAP_PATH is set, post mutations rewrite that file in the
background.
"""

from __future__ import annotations

import logging
import re
from datetime import datetime
from pathlib import Path
from typing import Iterable
from xml.etree import ElementTree

from pymongo.asynchronous.database import AsyncDatabase

from core import settings
from posts import repository as posts_repository

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"
XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'

STATIC_ROUTES = ("/", "/about", "/blog", "/contact", "/feedback", "/login", "/register")
POST_ROUTE_PREFIX = "/blog/"

_NON_ALNUM_RUN = re.compile(r"[^a-z0-9]+")

logger = logging.getLogger(__name__)


def slugify(title: str) -> str:
    return _NON_ALNUM_RUN.sub("-", (title or "").lower()).strip("-")


def _lastmod(post: dict) -> str | None:
    value = post.get("updatedAt") or post.get("createdAt")
    if isinstance(value, datetime):
        return value.date().isoformat()
    return None


def _add_url(urlset: ElementTree.Element, loc: str, *, lastmod: str | None = None, priority: str | None = None) -> None:
    url = ElementTree.SubElement(urlset, "url")
    ElementTree.SubElement(url, "loc").text = loc
    if lastmod:
        ElementTree.SubElement(url, "lastmod").text = lastmod
    if priority:
        ElementTree.SubElement(url, "priority").text = priority


def build_sitemap_xml(site_url: str, posts: Iterable[dict]) -> str:
    """
    Render the sitemap document for `site_url` (no trailing slash).
    """
    urlset = ElementTree.Element("urlset", xmlns=SITEMAP_NAMESPACE)

    for route in STATIC_ROUTES:
        _add_url(urlset, f"{site_url}{route}", priority="1.0" if route == "/" else "0.8")

    for post in posts:
        slug = slugify(str(post.get("title") or ""))
        if not slug:
            continue
        _add_url(urlset, f"{site_url}{POST_ROUTE_PREFIX}{slug}", lastmod=_lastmod(post), priority="0.6")

    return XML_DECLARATION + ElementTree.tostring(urlset, encoding="unicode")


async def generate_sitemap(database: AsyncDatabase) -> str:
    posts = await posts_repository.list_posts(
        database,
        projection={"title": 1, "createdAt": 1, "updatedAt": 1},
    )
    return build_sitemap_xml(settings.site_url(), posts)


async def refresh_sitemap_file(database: AsyncDatabase) -> Path | None:
    target = settings.sitemap_path()
    if target is None:
        return None

    xml = await generate_sitemap(database)
    path = Path(target)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(xml, encoding="utf-8")
    return path


async def refresh_sitemap_background(database: AsyncDatabase) -> None:
    """
    BackgroundTasks entrypoint.

    This should never raise to the request path; the post mutation that
    triggered it has already been stored.
    """
    try:
        path = await refresh_sitemap_file(database)
        if path is not None:
            logger.info("sitemap_refreshed path=%s", path)
    except Exception:
        logger.exception("sitemap_refresh_failed path=%s", settings.sitemap_path())
