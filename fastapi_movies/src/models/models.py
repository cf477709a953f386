from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class IdMixIn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str


class Genre(IdMixIn):
    name: str


class Movie(IdMixIn):
    title: str
    description: str
    release_date: datetime = Field(alias="releaseDate")
    genre: list[str]
