"""
Environment-backed settings.

Values are read at call time so tests can patch the environment.
"""

from __future__ import annotations

import os

DEFAULT_DATABASE_NAME = "blog"
DEFAULT_PORT = 5000
DEFAULT_CORS_ORIGINS = ("https://absbloger.netlify.app", "http://localhost:5173")
DEFAULT_SITE_URL = "https://absbloger.netlify.app"


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def database_url() -> str:
    url = os.environ.get("MONGO_URI", "").strip() or os.environ.get("DATABASE_URL", "").strip()
    if not url:
        raise RuntimeError("MONGO_URI is not set.")
    return url


def database_name() -> str:
    return os.environ.get("DATABASE_NAME", DEFAULT_DATABASE_NAME).strip() or DEFAULT_DATABASE_NAME


def port() -> int:
    return _env_int("PORT", DEFAULT_PORT)


def cors_origins() -> list[str]:
    raw = os.environ.get("CORS_ORIGINS", "").strip()
    if not raw:
        return list(DEFAULT_CORS_ORIGINS)
    # Browsers send origins without a trailing slash.
    return [origin.strip().rstrip("/") for origin in raw.split(",") if origin.strip()]


def site_url() -> str:
    return (os.environ.get("SITE_URL", DEFAULT_SITE_URL).strip() or DEFAULT_SITE_URL).rstrip("/")


def sitemap_path() -> str | None:
    return os.environ.get("SITEMAP_PATH", "").strip() or None


def log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"
