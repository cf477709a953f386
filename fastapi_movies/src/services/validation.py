import re
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Generic, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from api.v1.api_models import (GENRE_NAME_MAX_LENGTH, GENRE_NAME_MIN_LENGTH,
                               GenreIn, GenreUpdate, MovieIn, MovieUpdate)

T = TypeVar("T")

OBJECT_ID_LENGTH = 24
HEX_PATTERN = re.compile(r"^[0-9a-fA-F]*$")


@dataclass(frozen=True)
class ValidationResult(Generic[T]):
    """Результат проверки: либо значение, либо список нарушений"""

    value: T | None = None
    errors: tuple[str, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def message(self) -> str:
        return "; ".join(self.errors)

    @classmethod
    def success(cls, value: T) -> "ValidationResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, *errors: str) -> "ValidationResult[T]":
        return cls(errors=tuple(errors))


def format_error(error: dict[str, Any]) -> str:
    """Человекочитаемое описание одной ошибки pydantic"""
    location = ".".join(str(part) for part in error["loc"])
    if not location:
        return error["msg"]
    if error["type"] == "missing":
        return f'"{location}" is required'
    if error["type"] == "extra_forbidden":
        return f'"{location}" is not allowed'
    return f'"{location}": {error["msg"]}'


class PayloadValidator(Generic[T]):
    """Проверяет тело запроса по модели запроса"""

    def __init__(self, model: type[BaseModel]):
        self.model = model

    def validate(self, payload: Any) -> ValidationResult[T]:
        if not isinstance(payload, dict):
            return ValidationResult.failure("payload must be a JSON object")
        try:
            value = self.model.model_validate(payload)
        except PydanticValidationError as exc:
            return ValidationResult.failure(*(format_error(e) for e in exc.errors()))
        return ValidationResult.success(value)


class ObjectIdValidator:
    """Проверяет идентификатор из пути: ровно 24 шестнадцатеричных символа"""

    def __init__(self, entity: str):
        self.entity = entity

    def validate(self, value: Any) -> ValidationResult[str]:
        if not isinstance(value, str):
            return ValidationResult.failure(f"{self.entity} ID must be a string")
        errors = []
        if len(value) != OBJECT_ID_LENGTH:
            errors.append(
                f"{self.entity} ID must be {OBJECT_ID_LENGTH} characters long"
            )
        if not HEX_PATTERN.match(value):
            errors.append(
                f"{self.entity} ID must only contain hexadecimal characters"
            )
        if errors:
            return ValidationResult.failure(*errors)
        return ValidationResult.success(value.lower())


class GenreNameValidator:
    def validate(self, value: Any) -> ValidationResult[str]:
        if not isinstance(value, str):
            return ValidationResult.failure("Genre name must be a string")
        if len(value) < GENRE_NAME_MIN_LENGTH:
            return ValidationResult.failure(
                f"Genre name must be at least {GENRE_NAME_MIN_LENGTH} character long"
            )
        if len(value) > GENRE_NAME_MAX_LENGTH:
            return ValidationResult.failure(
                "Genre name must be less than or equal to "
                f"{GENRE_NAME_MAX_LENGTH} characters long"
            )
        return ValidationResult.success(value)


@dataclass(frozen=True)
class Validators:
    genre_create: PayloadValidator[GenreIn]
    genre_update: PayloadValidator[GenreUpdate]
    movie_create: PayloadValidator[MovieIn]
    movie_update: PayloadValidator[MovieUpdate]
    genre_id: ObjectIdValidator
    movie_id: ObjectIdValidator
    genre_name: GenreNameValidator


@lru_cache()
def get_validators() -> Validators:
    """Валидаторы не хранят состояния, собираем их один раз на процесс"""
    return Validators(
        genre_create=PayloadValidator(GenreIn),
        genre_update=PayloadValidator(GenreUpdate),
        movie_create=PayloadValidator(MovieIn),
        movie_update=PayloadValidator(MovieUpdate),
        genre_id=ObjectIdValidator("Genre"),
        movie_id=ObjectIdValidator("Movie"),
        genre_name=GenreNameValidator(),
    )
