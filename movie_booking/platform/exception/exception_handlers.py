"""
HTTP rendering of errors

Every error body is `{"detail": ...}`. Domain errors carry their own status;
request validation and bare ValueError are client errors (400); anything
else is logged with its traceback and hidden behind a 500.
"""

from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from movie_booking.platform.exception.exceptions import CustomBaseError
from movie_booking.platform.logging.loguru_io import Logger


def _detail_response(status_code: int, detail: Any) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={'detail': detail})


async def domain_error_handler(request: Request, exc: CustomBaseError) -> JSONResponse:
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        Logger.base.warning(
            f'⚠️ [HTTP] {request.method} {request.url.path} -> {exc.status_code}: {exc.message}'
        )
    return _detail_response(exc.status_code, exc.message)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return _detail_response(status.HTTP_400_BAD_REQUEST, jsonable_encoder(exc.errors()))


async def value_error_handler(request: Request, exc: Exception) -> JSONResponse:
    return _detail_response(status.HTTP_400_BAD_REQUEST, str(exc))


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    Logger.base.opt(exception=exc).error(
        f'💥 [HTTP] Unhandled {type(exc).__name__} on {request.method} {request.url.path}'
    )
    return _detail_response(status.HTTP_500_INTERNAL_SERVER_ERROR, 'Internal server error')


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(CustomBaseError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(ValueError, value_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
