import logging

from fastapi import Depends

from api.v1.api_models import GenreIn, GenreUpdate
from db.mongo import get_genre_storage
from db.storage import AbstractStorage
from models.models import Genre

logger = logging.getLogger(__name__)


class GenreService:
    def __init__(self, storage: AbstractStorage):
        self.storage = storage

    async def create(self, genre: GenreIn) -> Genre:
        doc = await self.storage.create(genre.model_dump())
        return Genre(**doc)

    async def get_all_genres(self) -> list[Genre]:
        docs = await self.storage.find({})
        return [Genre(**doc) for doc in docs]

    async def get_by_id(self, genre_id: str) -> Genre | None:
        doc = await self.storage.find_by_id(genre_id)
        if not doc:
            return None
        return Genre(**doc)

    async def update(self, genre_id: str, patch: GenreUpdate) -> Genre | None:
        doc = await self.storage.find_by_id_and_update(
            genre_id, patch.model_dump(exclude_unset=True)
        )
        if not doc:
            return None
        return Genre(**doc)

    async def delete(self, genre_id: str) -> Genre | None:
        """Удаляет жанр. Фильмы, ссылающиеся на него, не трогаем"""
        doc = await self.storage.find_by_id_and_delete(genre_id)
        if not doc:
            return None
        return Genre(**doc)

    async def all_exist(self, names: list[str]) -> bool:
        """
        Проверяет, что все переданные названия жанров есть в хранилище.
        Повторы в запросе и одноимённые жанры в хранилище не влияют на результат.
        """
        requested = set(names)
        docs = await self.storage.find({"name": {"$in": sorted(requested)}})
        found = {doc["name"] for doc in docs}
        if len(found) != len(requested):
            logger.info("Unknown genres requested: %s", sorted(requested - found))
            return False
        return True


def get_genre_service(
    storage: AbstractStorage = Depends(get_genre_storage),
) -> GenreService:
    return GenreService(storage)
