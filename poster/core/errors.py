"""
Error taxonomy shared by services and routers.

Every error carries the HTTP status it is rendered with; the handlers in
`poster.app` turn them into `{"error": message}` bodies.
"""
import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

logger = logging.getLogger("errors")


class PosterError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class AuthError(PosterError):
    status_code = 401
    default_message = "Unauthorized"


class OwnershipError(PosterError):
    status_code = 403
    default_message = "Forbidden"


class ValidationError(PosterError):
    status_code = 400
    default_message = "Invalid request"


class NotFoundError(PosterError):
    status_code = 404
    default_message = "Not found"


class UpstreamError(PosterError):
    """Any failed call to an external provider (AI, storage)."""

    status_code = 500
    default_message = "Upstream service error"


class GenerationTimeoutError(UpstreamError):
    default_message = "Image generation timeout - please try again"


async def poster_error_handler(request: Request, exc: PosterError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    message = "Invalid request"
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path"))
        msg = str(first.get("msg", "")).removeprefix("Value error, ")
        message = f"{location}: {msg}" if location else msg
    return JSONResponse(status_code=400, content={"error": message})


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})
