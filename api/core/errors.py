"""
API error taxonomy and the exception handlers that render it.

Every error response body has the shape {"error": "<short message>"}.
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """
    Base error for failures that map to an HTTP response.
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Server error."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ApiError):
    """
    Raised when required input is missing or malformed
    """

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "All fields are required."


class ConflictError(ApiError):
    """
    Raised when a unique field (email, username) is already taken
    """

    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Already exists."


class AuthError(ApiError):
    """
    Raised on bad credentials
    """

    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid email or password."


class ForbiddenError(ApiError):
    """
    Raised when an admin-only action is attempted without the admin flag
    """

    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Access denied. Admins only."


class NotFoundError(ApiError):
    """
    Raised when an id or email does not match a stored document
    """

    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found."


class ServerError(ApiError):
    """
    Raised for anything else, including store failures
    """


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def _api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("request_failed method=%s path=%s error=%s", request.method, request.url.path, exc.message)
    return error_response(exc.status_code, exc.message)


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("invalid_request method=%s path=%s errors=%s", request.method, request.url.path, len(exc.errors()))
    return error_response(status.HTTP_400_BAD_REQUEST, "Invalid request body.")


async def _store_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("store_error method=%s path=%s", request.method, request.url.path, exc_info=exc)
    return error_response(ServerError.status_code, ServerError.default_message)


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_error method=%s path=%s", request.method, request.url.path, exc_info=exc)
    return error_response(ServerError.status_code, ServerError.default_message)


def install_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, _api_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(PyMongoError, _store_error_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)
