import logging
from http import HTTPStatus
from typing import Any, TypeVar

from fastapi import HTTPException
from pydantic import BaseModel

from services.validation import ValidationResult

from .api_models import ErrorResponse

T = TypeVar("T")

logger = logging.getLogger(__name__)

ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    HTTPStatus.BAD_REQUEST.value: {"model": ErrorResponse, "description": "Bad Request"},
    HTTPStatus.INTERNAL_SERVER_ERROR.value: {
        "model": ErrorResponse,
        "description": "Internal Server Error",
    },
}


def not_found_response(description: str) -> dict[int | str, dict[str, Any]]:
    return {
        **ERROR_RESPONSES,
        HTTPStatus.NOT_FOUND.value: {"model": ErrorResponse, "description": description},
    }


def json_body(model: type[BaseModel]) -> dict[str, Any]:
    """Схема тела запроса для Swagger, сама проверка идёт через валидаторы"""
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": model.model_json_schema()}},
        }
    }


def validated(result: ValidationResult[T]) -> T:
    """Возвращает проверенное значение или отвечает 400"""
    if not result.ok:
        logger.info("Validation failed: %s", result.message)
        raise HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail=result.message)
    return result.value
