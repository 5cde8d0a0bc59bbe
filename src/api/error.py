"""API errors and their JSON representation

Every error response body has the shape {"message": "<human readable>"}.
"""

import logging
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from libs.result import Error
from src.domain.invoice import InvalidStatus

logger = logging.getLogger(__name__)

DECODE_ERROR_MESSAGE = "Failed to decode invoice request"
INVALID_REQUEST_MESSAGE = "Invalid request parameters"


class ClientError(Exception):
    """Raised by routes to return an Error with an HTTP status"""

    def __init__(self, error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(error.message)
        self.error = error
        self.status_code = status_code


def message_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message})


def validation_message(exc: RequestValidationError) -> str:
    """
    Pick the message reported for a request validation failure.

    Malformed input (bad JSON, wrong types, missing body) is reported as a
    decode failure. Otherwise the first validator message wins, in field
    declaration order.
    """
    errors = exc.errors()
    in_body = any(err.get("loc", ())[:1] == ("body",) for err in errors)
    if not errors or any(err.get("type") != "value_error" for err in errors):
        return DECODE_ERROR_MESSAGE if in_body else INVALID_REQUEST_MESSAGE

    first = errors[0]
    cause = first.get("ctx", {}).get("error")
    if cause is not None:
        return str(cause)
    return str(first.get("msg", "")).removeprefix("Value error, ")


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ClientError)
    async def client_error_handler(request: Request, exc: ClientError):
        return message_response(exc.status_code, exc.error.message)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")
        return message_response(status.HTTP_400_BAD_REQUEST, validation_message(exc))

    @app.exception_handler(InvalidStatus)
    async def invalid_status_handler(request: Request, exc: InvalidStatus):
        return message_response(status.HTTP_400_BAD_REQUEST, str(exc))

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception on {request.url.path}: {type(exc).__name__}: {exc}",
            exc_info=True,
        )
        return message_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")
