from datetime import datetime, timezone
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, model_validator
from pydantic_core import PydanticCustomError

GENRE_NAME_MIN_LENGTH = 3
GENRE_NAME_MAX_LENGTH = 50


def to_store_precision(value: datetime) -> datetime:
    """BSON хранит даты в UTC с точностью до миллисекунд, наивные считаем UTC"""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.replace(microsecond=value.microsecond // 1000 * 1000)


ReleaseDate = Annotated[datetime, AfterValidator(to_store_precision)]


class RequestModel(BaseModel):
    """Тело запроса: лишние поля запрещены"""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class PartialUpdateMixIn(RequestModel):
    """Тело PUT-запроса должно содержать хотя бы одно поле"""

    @model_validator(mode="after")
    def check_not_empty(self):
        if not self.model_fields_set:
            raise PydanticCustomError(
                "empty_update", "update payload must contain at least one field"
            )
        for field in sorted(self.model_fields_set):
            if getattr(self, field) is None:
                name = type(self).model_fields[field].alias or field
                raise PydanticCustomError(
                    "null_field", '"{field}" must not be null', {"field": name}
                )
        return self


class GenreIn(RequestModel):
    name: str = Field(
        min_length=GENRE_NAME_MIN_LENGTH, max_length=GENRE_NAME_MAX_LENGTH
    )


class GenreUpdate(PartialUpdateMixIn):
    name: str | None = Field(
        None, min_length=GENRE_NAME_MIN_LENGTH, max_length=GENRE_NAME_MAX_LENGTH
    )


class MovieIn(RequestModel):
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    release_date: ReleaseDate = Field(alias="releaseDate")
    genre: list[str] = Field(min_length=1)


class MovieUpdate(PartialUpdateMixIn):
    title: str | None = Field(None, min_length=1)
    description: str | None = Field(None, min_length=1)
    release_date: ReleaseDate | None = Field(None, alias="releaseDate")
    genre: list[str] | None = Field(None, min_length=1)


class GenreDetail(BaseModel):
    id: str
    name: str


class MovieDetail(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    description: str
    release_date: datetime = Field(alias="releaseDate")
    genre: list[str]


class ErrorResponse(BaseModel):
    error: str


class HealthCheck(BaseModel):
    status: str
    message: str
