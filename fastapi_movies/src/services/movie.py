from fastapi import Depends

from api.v1.api_models import MovieIn, MovieUpdate
from core.exceptions import InvalidGenresError
from db.mongo import get_movie_storage
from db.storage import AbstractStorage
from models.models import Movie

from .genre import GenreService, get_genre_service


class MovieService:
    def __init__(self, storage: AbstractStorage, genre_service: GenreService):
        self.storage = storage
        self.genre_service = genre_service

    async def create(self, movie: MovieIn) -> Movie:
        if not await self.genre_service.all_exist(movie.genre):
            raise InvalidGenresError()

        doc = await self.storage.create(movie.model_dump(by_alias=True))
        return Movie(**doc)

    async def get_all_movies(self) -> list[Movie]:
        docs = await self.storage.find({})
        return [Movie(**doc) for doc in docs]

    async def get_by_id(self, movie_id: str) -> Movie | None:
        doc = await self.storage.find_by_id(movie_id)
        if not doc:
            return None
        return Movie(**doc)

    async def get_by_genre(self, genre_name: str) -> list[Movie]:
        # для массива Mongo сравнивает значение с каждым элементом
        docs = await self.storage.find({"genre": genre_name})
        return [Movie(**doc) for doc in docs]

    async def update(self, movie_id: str, patch: MovieUpdate) -> Movie | None:
        # жанры перепроверяем, только если их меняют
        if patch.genre is not None and not await self.genre_service.all_exist(
            patch.genre
        ):
            raise InvalidGenresError()

        doc = await self.storage.find_by_id_and_update(
            movie_id, patch.model_dump(by_alias=True, exclude_unset=True)
        )
        if not doc:
            return None
        return Movie(**doc)

    async def delete(self, movie_id: str) -> Movie | None:
        doc = await self.storage.find_by_id_and_delete(movie_id)
        if not doc:
            return None
        return Movie(**doc)


def get_movie_service(
    storage: AbstractStorage = Depends(get_movie_storage),
    genre_service: GenreService = Depends(get_genre_service),
) -> MovieService:
    return MovieService(storage, genre_service)
