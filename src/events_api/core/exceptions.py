"""Domain errors and the handlers that turn them into JSON responses.

Services raise these; nothing below the API layer knows about HTTP beyond
the status code each error kind carries.
"""

from asgi_correlation_id import correlation_id
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.events_api.core.logging import get_logger

logger = get_logger(__name__)


class AppError(Exception):
    """Base class for errors that carry a client-safe message."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(AppError):
    """Referenced user, event or participant does not exist."""

    status_code = status.HTTP_404_NOT_FOUND


class AlreadyExistsError(AppError):
    """Uniqueness violation caught before writing."""

    status_code = status.HTTP_409_CONFLICT


class UnauthorizedError(AppError):
    """Authentication failed. Unknown user and bad password look the same."""

    status_code = status.HTTP_401_UNAUTHORIZED


class BadRequestError(AppError):
    """Input that parsed fine but means nothing, e.g. an unknown role."""

    status_code = status.HTTP_400_BAD_REQUEST


class ConflictError(AppError):
    """Write rejected because of existing state."""

    status_code = status.HTTP_409_CONFLICT


def setup_exception_handlers(app: FastAPI) -> None:
    """Configure exception handlers that include request_id in responses."""

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        logger.info(
            "Request failed",
            error=type(exc).__name__,
            status_code=exc.status_code,
            path=request.url.path,
        )
        headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, UnauthorizedError) else None
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "detail": exc.message,
                "request_id": correlation_id.get(),
            },
            headers=headers,
        )

    @app.exception_handler(StarletteHTTPException)
    async def starlette_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "detail": exc.detail,
                "request_id": correlation_id.get(),
            },
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "detail": exc.detail,
                "request_id": correlation_id.get(),
            },
            headers=exc.headers,
        )

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        request_id = correlation_id.get()
        logger.exception(
            "Unhandled exception",
            exc_info=exc,
            request_id=request_id,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=500,
            content={
                "detail": "Internal server error",
                "request_id": request_id,
            },
        )
