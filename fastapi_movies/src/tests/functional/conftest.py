from typing import Any

import httpx
import pytest

from db.mongo import get_genre_storage, get_movie_storage
from main import app
from tests.functional.settings import test_settings
from tests.functional.utils.memory_storage import InMemoryStorage


@pytest.fixture
def genre_storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def movie_storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
async def api_client(genre_storage: InMemoryStorage, movie_storage: InMemoryStorage):
    app.dependency_overrides[get_genre_storage] = lambda: genre_storage
    app.dependency_overrides[get_movie_storage] = lambda: movie_storage
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(
        transport=transport, base_url=test_settings.service_url
    ) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def api_request(api_client: httpx.AsyncClient):
    async def inner(method: str, endpoint: str, **kwargs: Any) -> tuple[Any, int]:
        response = await api_client.request(method=method, url=endpoint, **kwargs)
        if response.headers.get("content-type", "").startswith("application/json"):
            body = response.json()
        else:
            body = response.text
        return body, response.status_code

    return inner


@pytest.fixture
def write_data(genre_storage: InMemoryStorage, movie_storage: InMemoryStorage):
    async def inner(
        genres: list[dict], movies: list[dict]
    ) -> tuple[list[dict], list[dict]]:
        created_genres = [await genre_storage.create(genre) for genre in genres]
        created_movies = [await movie_storage.create(movie) for movie in movies]
        genre_storage.writes = 0
        movie_storage.writes = 0
        return created_genres, created_movies

    return inner
