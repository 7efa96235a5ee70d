from fastapi import Request
from fastapi.exceptions import RequestValidationError
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

from currency_converter.models.conversion import ErrorPayload, JSONUTF8Response

logger = logging.getLogger("currency_converter.errors")


def error_response(message: str, code: int) -> JSONUTF8Response:
    payload = ErrorPayload(message=message, code=code)
    return JSONUTF8Response(status_code=code, content=payload.model_dump())


def http_error_handler(request: Request, exc: StarletteHTTPException):  # type: ignore
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return error_response(
            f"No route for {request.method} {request.url.path}", exc.status_code
        )
    return error_response(str(exc.detail), exc.status_code)


def validation_error_handler(request: Request, exc: RequestValidationError):  # type: ignore
    return error_response(
        f"Invalid request: {exc.errors()}",
        status.HTTP_422_UNPROCESSABLE_ENTITY,
    )


def server_error_handler(request: Request, exc: Exception):  # type: ignore
    logger.exception("unhandled exception")
    return error_response(
        "An unexpected error occurred.", status.HTTP_500_INTERNAL_SERVER_ERROR
    )
