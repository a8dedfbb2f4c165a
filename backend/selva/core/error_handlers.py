# selva/core/error_handlers.py
import logging

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from selva.core.config import get_settings
from selva.core.exceptions import AppError, ServerError

logger = logging.getLogger(__name__)


async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(status_code=exc.status_code, content=jsonable_encoder(exc.to_body()))


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # Unmatched routes surface here, not through NotFound
    if exc.status_code == 404:
        return JSONResponse(
            status_code=404,
            content={
                "error": "Route not found",
                "message": f"The requested route {request.url.path} does not exist",
            },
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"message": "Validation failed", "errors": jsonable_encoder(exc.errors())},
    )


async def generic_exception_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    settings = request.app.state.settings if hasattr(request.app.state, "settings") else get_settings()
    error = ServerError(str(exc) if settings.is_development else None)
    return JSONResponse(
        status_code=error.status_code,
        content={"error": "Something went wrong!", **error.to_body()},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
