import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Error rendered to the client as ``{"message": ...}``."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "internal error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class Unauthenticated(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "unauthorized access"


class Forbidden(ApiError):
    status_code = status.HTTP_403_FORBIDDEN
    message = "forbidden access"


class BadRequest(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "bad request"


class NotFound(ApiError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "not found"


class Conflict(ApiError):
    status_code = status.HTTP_409_CONFLICT
    message = "conflict"


class AlreadyApplied(Exception):
    """A request for this volunteer and post already exists."""

    message = "You have already placed a request on this post"


async def api_error_handler(request: Request, exc: ApiError):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def already_applied_handler(request: Request, exc: AlreadyApplied):
    # not an error status, the client only gets the notice
    return PlainTextResponse(exc.message, status_code=status.HTTP_200_OK)


async def database_error_handler(request: Request, exc: PyMongoError):
    logger.exception("Database failure on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "database error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)
    app.add_exception_handler(AlreadyApplied, already_applied_handler)
    app.add_exception_handler(PyMongoError, database_error_handler)
