from abc import ABC, abstractmethod
from typing import Any


class AbstractStorage(ABC):
    """Абстрактное хранилище документов одной коллекции.

    Документы отдаются словарями, идентификатор лежит в ключе ``id``
    в виде строки. Отсутствие документа - это ``None``, а не исключение.
    """

    @abstractmethod
    async def create(self, document: dict[str, Any]) -> dict[str, Any]:
        pass

    @abstractmethod
    async def find(self, query: dict[str, Any] | None = None) -> list[dict[str, Any]]:
        pass

    @abstractmethod
    async def find_by_id(self, document_id: str) -> dict[str, Any] | None:
        pass

    @abstractmethod
    async def find_by_id_and_update(
        self, document_id: str, patch: dict[str, Any]
    ) -> dict[str, Any] | None:
        """Обновляет документ и возвращает его состояние после обновления"""

    @abstractmethod
    async def find_by_id_and_delete(self, document_id: str) -> dict[str, Any] | None:
        """Удаляет документ и возвращает его состояние до удаления"""
