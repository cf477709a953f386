import logging
from datetime import timezone
from typing import Any

from bson import ObjectId
from bson.errors import InvalidId
from fastapi import Depends
from motor.motor_asyncio import (AsyncIOMotorClient, AsyncIOMotorCollection,
                                 AsyncIOMotorDatabase)
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

from core.config import settings
from core.exceptions import StoreError

from .storage import AbstractStorage

GENRES_COLLECTION = "genres"
MOVIES_COLLECTION = "movies"

logger = logging.getLogger(__name__)

mongo_client: AsyncIOMotorClient | None = None


def create_mongo_client() -> AsyncIOMotorClient:
    return AsyncIOMotorClient(
        settings.mongo_url,
        maxPoolSize=settings.mongo_max_pool_size,
        socketTimeoutMS=settings.mongo_socket_timeout_ms,
        tz_aware=True,
        tzinfo=timezone.utc,
    )


# Функция понадобится при внедрении зависимостей
async def get_mongo() -> AsyncIOMotorDatabase:
    return mongo_client[settings.mongo_db]


def to_object_id(document_id: str) -> ObjectId:
    try:
        return ObjectId(document_id)
    except (InvalidId, TypeError) as exc:
        raise StoreError(str(exc)) from exc


def from_mongo(document: dict[str, Any] | None) -> dict[str, Any] | None:
    """Переводит документ Mongo во внешний вид: ``_id`` -> ``id`` строкой"""
    if document is None:
        return None
    document = dict(document)
    document["id"] = str(document.pop("_id"))
    document.pop("__v", None)
    return document


class MongoStorage(AbstractStorage):
    """Хранилище поверх коллекции motor"""

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def create(self, document: dict[str, Any]) -> dict[str, Any]:
        document = {key: value for key, value in document.items() if key != "id"}
        try:
            result = await self.collection.insert_one(document)
        except PyMongoError as exc:
            self._log_error("insert_one", exc)
            raise StoreError(str(exc)) from exc
        return from_mongo({**document, "_id": result.inserted_id})

    async def find(self, query: dict[str, Any] | None = None) -> list[dict[str, Any]]:
        try:
            documents = await self.collection.find(query or {}).to_list(length=None)
        except PyMongoError as exc:
            self._log_error("find", exc)
            raise StoreError(str(exc)) from exc
        return [from_mongo(document) for document in documents]

    async def find_by_id(self, document_id: str) -> dict[str, Any] | None:
        try:
            document = await self.collection.find_one(
                {"_id": to_object_id(document_id)}
            )
        except PyMongoError as exc:
            self._log_error("find_one", exc)
            raise StoreError(str(exc)) from exc
        return from_mongo(document)

    async def find_by_id_and_update(
        self, document_id: str, patch: dict[str, Any]
    ) -> dict[str, Any] | None:
        try:
            document = await self.collection.find_one_and_update(
                {"_id": to_object_id(document_id)},
                {"$set": patch},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as exc:
            self._log_error("find_one_and_update", exc)
            raise StoreError(str(exc)) from exc
        return from_mongo(document)

    async def find_by_id_and_delete(self, document_id: str) -> dict[str, Any] | None:
        try:
            document = await self.collection.find_one_and_delete(
                {"_id": to_object_id(document_id)}
            )
        except PyMongoError as exc:
            self._log_error("find_one_and_delete", exc)
            raise StoreError(str(exc)) from exc
        return from_mongo(document)

    def _log_error(self, operation: str, exc: Exception) -> None:
        logger.error(
            "Mongo %s on collection %s failed: %s",
            operation,
            self.collection.name,
            exc,
        )


def get_genre_storage(
    mongo: AsyncIOMotorDatabase = Depends(get_mongo),
) -> AbstractStorage:
    return MongoStorage(mongo[GENRES_COLLECTION])


def get_movie_storage(
    mongo: AsyncIOMotorDatabase = Depends(get_mongo),
) -> AbstractStorage:
    return MongoStorage(mongo[MOVIES_COLLECTION])
