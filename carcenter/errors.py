"""Error taxonomy shared by services and the HTTP layer.

Services raise these; :func:`install_exception_handlers` renders every
subclass as ``{"detail": ..., "code": ...}`` with the class's status code.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

import structlog
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = structlog.get_logger()


class CarCenterError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "internal_error"
    message: str = "Internal server error"

    def __init__(self, message: str | None = None, *, context: Mapping[str, Any] | None = None) -> None:
        self.message = message or self.message
        self.context = dict(context) if context else {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        return {"detail": self.message, "code": self.code}


class ValidationError(CarCenterError):
    """Malformed or missing request fields."""

    status_code = status.HTTP_400_BAD_REQUEST
    code = "validation_error"
    message = "Invalid request"

    def __init__(self, message: str | None = None, *, errors: Sequence[Any] = ()) -> None:
        super().__init__(message)
        self.errors = list(errors)

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload["errors"] = jsonable_encoder(self.errors)
        return payload


class Unauthorized(CarCenterError):
    """Bad credentials or a missing bearer token.

    The message never says whether the username exists.
    """

    status_code = status.HTTP_401_UNAUTHORIZED
    code = "unauthorized"
    message = "Invalid username or password"


class InvalidToken(CarCenterError):
    """A token that is unparseable, tampered with, expired or of the wrong type."""

    status_code = status.HTTP_401_UNAUTHORIZED
    code = "invalid_token"
    message = "Invalid or expired token"


class UserNotFound(CarCenterError):
    """An authenticated subject has no user record.

    Raised after credentials or a token were already accepted, so it points
    at a consistency gap in the store rather than at the caller.
    """

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    code = "user_not_found"
    message = "Internal server error"

    def __init__(self, username: str) -> None:
        super().__init__(context={"username": username})
        self.username = username


class ResourceNotFound(CarCenterError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "not_found"
    message = "Resource not found"


class DuplicateUser(CarCenterError):
    status_code = status.HTTP_409_CONFLICT
    code = "duplicate_user"
    message = "Username or email already exists"


async def _handle_carcenter_error(request: Request, exc: CarCenterError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(
            "request_failed",
            code=exc.code,
            path=request.url.path,
            **exc.context,
        )
    else:
        logger.info("request_rejected", code=exc.code, path=request.url.path)

    headers = None
    if exc.status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict(), headers=headers)


async def _handle_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    return await _handle_carcenter_error(request, ValidationError(errors=exc.errors()))


def install_exception_handlers(app: FastAPI) -> None:
    """Register renderers for :class:`CarCenterError` and request validation failures."""
    app.add_exception_handler(CarCenterError, _handle_carcenter_error)
    app.add_exception_handler(RequestValidationError, _handle_request_validation)
