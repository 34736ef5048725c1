import logging

import pytest
from bson import ObjectId

from core import db, errors, log, settings


class TestSettings:

    def test_database_url_prefers_mongo_uri(self, monkeypatch):
        monkeypatch.setenv("MONGO_URI", "mongodb://primary:27017")
        monkeypatch.setenv("DATABASE_URL", "mongodb://fallback:27017")

        assert settings.database_url() == "mongodb://primary:27017"

    def test_database_url_fallback_and_missing(self, monkeypatch):
        monkeypatch.delenv("MONGO_URI", raising=False)
        monkeypatch.setenv("DATABASE_URL", "mongodb://fallback:27017")
        assert settings.database_url() == "mongodb://fallback:27017"

        monkeypatch.delenv("DATABASE_URL")
        with pytest.raises(RuntimeError):
            settings.database_url()

    def test_port_falls_back_on_garbage(self, monkeypatch):
        monkeypatch.setenv("PORT", "not-a-port")
        assert settings.port() == settings.DEFAULT_PORT

        monkeypatch.setenv("PORT", "8080")
        assert settings.port() == 8080

    def test_cors_origins(self, monkeypatch):
        monkeypatch.delenv("CORS_ORIGINS", raising=False)
        assert settings.cors_origins() == list(settings.DEFAULT_CORS_ORIGINS)

        monkeypatch.setenv("CORS_ORIGINS", "https://a.example/, http://localhost:3000 ,")
        assert settings.cors_origins() == ["https://a.example", "http://localhost:3000"]

    def test_site_url_strips_trailing_slash(self, monkeypatch):
        monkeypatch.setenv("SITE_URL", "https://blog.example.com/")

        assert settings.site_url() == "https://blog.example.com"


class TestObjectIds:

    def test_parse_valid(self):
        oid = ObjectId()

        assert db.parse_object_id(str(oid)) == oid

    @pytest.mark.parametrize("raw", ["", "xyz", "123", "zzzzzzzzzzzzzzzzzzzzzzzz"])
    def test_parse_invalid(self, raw):
        with pytest.raises(errors.ValidationError) as exc_info:
            db.parse_object_id(raw, what="post id")

        assert exc_info.value.message == "Invalid post id."
        assert exc_info.value.status_code == 400


class TestErrorTaxonomy:

    @pytest.mark.parametrize(
        "error_cls, status_code",
        [
            (errors.ValidationError, 400),
            (errors.ConflictError, 400),
            (errors.AuthError, 401),
            (errors.ForbiddenError, 403),
            (errors.NotFoundError, 404),
            (errors.ServerError, 500),
        ],
    )
    def test_status_codes(self, error_cls, status_code):
        error = error_cls()

        assert isinstance(error, errors.ApiError)
        assert error.status_code == status_code
        assert error.message == error_cls.default_message

    def test_custom_message(self):
        assert str(errors.NotFoundError("Post not found.")) == "Post not found."


class TestLogging:

    def test_configure_logging_sets_level(self):
        root = logging.getLogger()
        saved_handlers, saved_level = list(root.handlers), root.level
        try:
            configured = log.configure_logging("debug")
            assert configured is root
            assert root.level == logging.DEBUG
            assert len(root.handlers) == 1

            log.configure_logging("nonsense")
            assert root.level == logging.INFO
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)


class TestAppRoutes:

    @pytest.mark.asyncio
    async def test_root_is_plain_text(self, client):
        response = await client.get("/")

        assert response.status_code == 200
        assert response.text == "Backend is running!"
        assert response.headers["content-type"].startswith("text/plain")

    @pytest.mark.asyncio
    async def test_health(self, client):
        response = await client.get("/health")

        assert response.json() == {"status": "ok"}

    @pytest.mark.asyncio
    async def test_allowed_origin_gets_cors_headers(self, client):
        response = await client.get("/api/posts", headers={"Origin": "http://localhost:5173"})

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "http://localhost:5173"

    @pytest.mark.asyncio
    async def test_unlisted_origin_gets_no_cors_headers(self, client):
        response = await client.get("/api/posts", headers={"Origin": "https://evil.example"})

        assert "access-control-allow-origin" not in response.headers

    @pytest.mark.asyncio
    async def test_no_origin_passes(self, client):
        response = await client.get("/api/feedback")

        assert response.status_code == 200
