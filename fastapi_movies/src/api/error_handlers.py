import logging
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from core.exceptions import StoreError, ValidationError
from services.validation import format_error

logger = logging.getLogger(__name__)


def error_response(status: HTTPStatus, message: str) -> JSONResponse:
    return JSONResponse(status_code=status, content={"error": message})


def register_error_handlers(app: FastAPI) -> None:
    """Последний рубеж: всё, что не обработали ручки, приводим к {"error": ...}"""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(
        request: Request, exc: RequestValidationError
    ):
        message = "; ".join(format_error(error) for error in exc.errors())
        logger.info("Invalid request on %s: %s", request.url.path, message)
        return error_response(HTTPStatus.BAD_REQUEST, message)

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError):
        logger.info("Validation error on %s: %s", request.url.path, exc.message)
        return error_response(HTTPStatus.BAD_REQUEST, exc.message)

    @app.exception_handler(StoreError)
    async def store_error_handler(request: Request, exc: StoreError):
        logger.error("Store error on %s: %s", request.url.path, exc.message)
        return error_response(HTTPStatus.INTERNAL_SERVER_ERROR, exc.message)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s", request.url.path)
        return error_response(HTTPStatus.INTERNAL_SERVER_ERROR, str(exc))
