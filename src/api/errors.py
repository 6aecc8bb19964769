"""
Error-to-response mapping shared by every exception handler.

All failures leave the API as an ErrorResponse body; ErrorKind decides the
status code and how much of the failure is shown to the caller.
"""
from enum import Enum
from http import HTTPStatus
from typing import List

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.models.schemas import ErrorDetail, ErrorResponse
from src.utils.exceptions import (
    InvalidModelResponseException,
    TranslationAPIException,
    ValidationException,
)
from src.utils.logger import setup_logger

logger = setup_logger(__name__)

GENERIC_ERROR_MESSAGE = "Internal server error"


class ErrorKind(str, Enum):
    """Kinds of failure the API reports."""
    VALIDATION = "validation"
    INVALID_MODEL_RESPONSE = "invalid_model_response"
    INTERNAL = "internal"


ERROR_STATUS = {
    ErrorKind.VALIDATION: HTTPStatus.BAD_REQUEST,
    ErrorKind.INVALID_MODEL_RESPONSE: HTTPStatus.INTERNAL_SERVER_ERROR,
    ErrorKind.INTERNAL: HTTPStatus.INTERNAL_SERVER_ERROR,
}


def build_error_response(kind: ErrorKind, message: str, path: str) -> JSONResponse:
    """
    Build the JSON error response for a kind of failure.

    Args:
        kind: Failure kind
        message: Message shown to the caller
        path: Request path

    Returns:
        JSONResponse with an ErrorResponse body
    """
    status = ERROR_STATUS[kind]
    body = ErrorResponse(
        status=status.value,
        error=status.phrase,
        message=message,
        path=path,
    )
    return JSONResponse(status_code=status.value, content=jsonable_encoder(body))


def format_field_errors(errors: List[ErrorDetail]) -> str:
    field_messages = {error.field: error.message for error in errors}
    return f"Invalid request data: {field_messages}"


def _request_validation_details(exc: RequestValidationError) -> List[ErrorDetail]:
    details = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part != "body"]
        details.append(ErrorDetail(field=".".join(location) or "body", message=error.get("msg", "")))
    return details


async def validation_exception_handler(request: Request, exc: ValidationException) -> JSONResponse:
    message = format_field_errors(exc.errors)
    logger.error(f"Validation error: {message}")
    return build_error_response(ErrorKind.VALIDATION, message, request.url.path)


async def request_validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = format_field_errors(_request_validation_details(exc))
    logger.error(f"Validation error: {message}")
    return build_error_response(ErrorKind.VALIDATION, message, request.url.path)


async def invalid_model_response_handler(request: Request, exc: InvalidModelResponseException) -> JSONResponse:
    logger.error(f"Invalid model response: {exc}")
    return build_error_response(ErrorKind.INVALID_MODEL_RESPONSE, str(exc), request.url.path)


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Internal error: {exc}", exc_info=exc)
    return build_error_response(ErrorKind.INTERNAL, GENERIC_ERROR_MESSAGE, request.url.path)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the handlers on the application."""
    app.add_exception_handler(ValidationException, validation_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
    app.add_exception_handler(InvalidModelResponseException, invalid_model_response_handler)
    app.add_exception_handler(TranslationAPIException, unhandled_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
