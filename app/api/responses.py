"""
Response envelope builder.

Every response leaves the API in one of two shapes:

- success: {"message": "operation from handler: <op> successful", "data": ...}
- error:   {"message": "<human readable>", "status": <http status code>}

Routes build success bodies with send_success() and signal failures by
raising HTTPException; the handlers registered here render the error shape,
including for framework-level errors (bad bodies, unknown routes, crashes).
"""

import logging
from typing import Any, Dict
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "internal server error"
MALFORMED_BODY_MESSAGE = "request body is empty or malformed"


def success_message(operation: str) -> str:
    return f"operation from handler: {operation} successful"


def send_success(operation: str, data: Any) -> Dict[str, Any]:
    """
    Build the success envelope for an operation.

    Args:
        operation: Handler name, e.g. "create-opening"
        data: Record or list of records

    Returns:
        dict with message and data keys
    """
    return {
        "message": success_message(operation),
        "data": data,
    }


def send_error(status_code: int, message: str) -> JSONResponse:
    """Build the error envelope as a ready-to-send response."""
    return JSONResponse(
        status_code=status_code,
        content={
            "message": message,
            "status": status_code,
        },
    )


def describe_validation_error(exc: RequestValidationError) -> str:
    """
    Turn pydantic's error list into one sentence naming the first bad field.
    """
    errors = exc.errors()
    if not errors:
        return MALFORMED_BODY_MESSAGE

    first = errors[0]
    loc = tuple(first.get("loc", ()))
    # Undecodable JSON, or a body that is not an object at all
    if first.get("type") == "json_invalid" or loc == ("body",):
        return MALFORMED_BODY_MESSAGE

    field = ".".join(str(part) for part in loc[1:]) or str(loc[0] if loc else "body")
    return f"param: {field} is invalid: {first.get('msg', 'invalid value')}"


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else str(exc.detail)
    return send_error(exc.status_code, message)


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = describe_validation_error(exc)
    logger.warning(f"Rejected request to {request.url.path}: {message}")
    return send_error(status.HTTP_400_BAD_REQUEST, message)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}", exc_info=True)
    return send_error(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error envelope for every failure path."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
