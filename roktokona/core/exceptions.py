"""Error types and the handlers that render them as ``{success: false, message}``."""
import logging
from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

INVALID_REQUEST_MESSAGE = "অনুরোধের তথ্য সঠিক নয়"
INTERNAL_ERROR_MESSAGE = "সার্ভারে একটি অপ্রত্যাশিত ত্রুটি হয়েছে"


class ApiError(Exception):
    """Base error carrying a user-facing message and an HTTP status."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DonorValidationError(ApiError):
    """A registration payload broke one of the field rules."""

    status_code = status.HTTP_400_BAD_REQUEST


class StoreError(ApiError):
    """A read or write against the relational store failed."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message},
    )


async def api_error_handler(request: Request, exc: ApiError):
    return error_response(exc.status_code, exc.message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    message = exc.detail if isinstance(exc.detail, str) else INVALID_REQUEST_MESSAGE
    return error_response(exc.status_code, message)


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # Malformed JSON and wrongly typed fields are client errors, same as rule failures
    return error_response(status.HTTP_400_BAD_REQUEST, INVALID_REQUEST_MESSAGE)


async def general_exception_handler(request: Request, exc: Exception):
    logger.exception(
        f"Unhandled error on {request.method} {request.url.path}: {exc}",
        extra={"request_id": getattr(request.state, "request_id", "N/A")},
    )
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)
