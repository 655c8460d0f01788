"""Uniform error responder: every failure leaves the API as a status code + message."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from src.api.models import ErrorResponse
from src.core.exceptions import INTERNAL_SERVER_ERROR, CatalogError

logger = logging.getLogger(__name__)


def error_response(status_code: int, message: str) -> JSONResponse:
    body = ErrorResponse(status_code=status_code, status_message=message)
    return JSONResponse(status_code=status_code, content=body.model_dump(by_alias=True))


async def catalog_error_handler(request: Request, exc: CatalogError) -> JSONResponse:
    """Client errors are reported verbatim; server-side failures only as a generic message."""
    if exc.status_code >= 500:
        logger.error(f"API Error on {request.method} {request.url.path}: {exc.message}")
        return error_response(exc.status_code, INTERNAL_SERVER_ERROR)
    logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return error_response(exc.status_code, exc.message)


async def validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.info(f"Malformed request on {request.method} {request.url.path}: {exc}")
    return error_response(400, "Bad Request")


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"API Error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return error_response(500, INTERNAL_SERVER_ERROR)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CatalogError, catalog_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
