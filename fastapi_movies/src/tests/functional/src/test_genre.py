from http import HTTPStatus

import pytest

from tests.functional.settings import test_settings
from tests.functional.test_data.mongo_data import genres_data

ENDPOINT = test_settings.genres_endpoint
MISSING_ID = "aaaa12345678901234567890"


@pytest.mark.parametrize(
    "payload, expected_answer",
    [
        # минимальная допустимая длина названия
        ({"name": "War"}, {"status": HTTPStatus.CREATED}),
        # максимальная допустимая длина названия
        ({"name": "x" * 50}, {"status": HTTPStatus.CREATED}),
        # слишком короткое название
        ({"name": "Ab"}, {"status": HTTPStatus.BAD_REQUEST}),
        # слишком длинное название
        ({"name": "x" * 51}, {"status": HTTPStatus.BAD_REQUEST}),
        # пустое название
        ({"name": ""}, {"status": HTTPStatus.BAD_REQUEST}),
        # нет названия
        ({}, {"status": HTTPStatus.BAD_REQUEST}),
        # название не строка
        ({"name": 123}, {"status": HTTPStatus.BAD_REQUEST}),
        # лишнее поле
        ({"name": "Western", "rating": 5}, {"status": HTTPStatus.BAD_REQUEST}),
    ],
)
@pytest.mark.asyncio
async def test_create_genre(api_request, genre_storage, payload, expected_answer):
    body, status = await api_request(method="POST", endpoint=ENDPOINT, json=payload)

    assert status == expected_answer["status"]
    if status == HTTPStatus.CREATED:
        assert body["name"] == payload["name"]
        assert len(body["id"]) == 24
        assert genre_storage.writes == 1
    else:
        assert list(body) == ["error"]
        assert genre_storage.writes == 0


@pytest.mark.asyncio
async def test_create_genre_error_lists_every_rule(api_request):
    body, status = await api_request(
        method="POST", endpoint=ENDPOINT, json={"name": "Ab", "extra": True}
    )

    assert status == HTTPStatus.BAD_REQUEST
    assert '"name"' in body["error"]
    assert '"extra" is not allowed' in body["error"]


@pytest.mark.asyncio
async def test_create_genre_not_an_object(api_request):
    body, status = await api_request(method="POST", endpoint=ENDPOINT, json=["Action"])

    assert status == HTTPStatus.BAD_REQUEST
    assert body == {"error": "payload must be a JSON object"}


@pytest.mark.asyncio
async def test_create_genre_broken_json(api_request):
    body, status = await api_request(
        method="POST",
        endpoint=ENDPOINT,
        content=b'{"name": ',
        headers={"content-type": "application/json"},
    )

    assert status == HTTPStatus.BAD_REQUEST
    assert "error" in body


@pytest.mark.asyncio
async def test_genres_list(api_request, write_data):
    await write_data(genres_data, [])

    body, status = await api_request(method="GET", endpoint=ENDPOINT)

    assert status == HTTPStatus.OK
    assert sorted(genre["name"] for genre in body) == sorted(
        genre["name"] for genre in genres_data
    )


@pytest.mark.asyncio
async def test_genres_list_empty(api_request):
    body, status = await api_request(method="GET", endpoint=ENDPOINT)

    assert status == HTTPStatus.OK
    assert body == []


@pytest.mark.asyncio
async def test_genre_details(api_request, write_data):
    genres, _ = await write_data(genres_data, [])

    body, status = await api_request(
        method="GET", endpoint=f"{ENDPOINT}/{genres[0]['id']}"
    )

    assert status == HTTPStatus.OK
    assert body == {"id": genres[0]["id"], "name": "Action"}


@pytest.mark.parametrize(
    "genre_id, expected_answer",
    [
        # корректный id, но такого жанра нет
        (
            MISSING_ID,
            {"status": HTTPStatus.NOT_FOUND, "body": {"error": "Genre not found"}},
        ),
        # id неправильной длины
        (
            "35b63763",
            {
                "status": HTTPStatus.BAD_REQUEST,
                "body": {"error": "Genre ID must be 24 characters long"},
            },
        ),
        # id с недопустимыми символами
        (
            "zzzz12345678901234567890",
            {
                "status": HTTPStatus.BAD_REQUEST,
                "body": {"error": "Genre ID must only contain hexadecimal characters"},
            },
        ),
    ],
)
@pytest.mark.asyncio
async def test_genre_details_errors(api_request, genre_id, expected_answer):
    body, status = await api_request(method="GET", endpoint=f"{ENDPOINT}/{genre_id}")

    assert status == expected_answer["status"]
    assert body == expected_answer["body"]


@pytest.mark.asyncio
async def test_update_genre(api_request, write_data, genre_storage):
    genres, _ = await write_data(genres_data, [])

    body, status = await api_request(
        method="PUT",
        endpoint=f"{ENDPOINT}/{genres[0]['id']}",
        json={"name": "Adventure"},
    )

    assert status == HTTPStatus.OK
    assert body == {"id": genres[0]["id"], "name": "Adventure"}
    assert genre_storage.writes == 1


@pytest.mark.parametrize(
    "genre_id, payload, expected_status",
    [
        # пустое тело обновления
        (None, {}, HTTPStatus.BAD_REQUEST),
        # название короче 3 символов
        (None, {"name": "Ab"}, HTTPStatus.BAD_REQUEST),
        # явный null вместо названия
        (None, {"name": None}, HTTPStatus.BAD_REQUEST),
        # жанра с таким id нет
        (MISSING_ID, {"name": "Adventure"}, HTTPStatus.NOT_FOUND),
        # некорректный id
        ("not-an-id", {"name": "Adventure"}, HTTPStatus.BAD_REQUEST),
    ],
)
@pytest.mark.asyncio
async def test_update_genre_errors(
    api_request, write_data, genre_id, payload, expected_status
):
    genres, _ = await write_data(genres_data, [])

    body, status = await api_request(
        method="PUT",
        endpoint=f"{ENDPOINT}/{genre_id or genres[0]['id']}",
        json=payload,
    )

    assert status == expected_status
    assert list(body) == ["error"]


@pytest.mark.asyncio
async def test_delete_genre_twice(api_request, write_data):
    genres, _ = await write_data(genres_data, [])
    endpoint = f"{ENDPOINT}/{genres[1]['id']}"

    body, status = await api_request(method="DELETE", endpoint=endpoint)
    assert status == HTTPStatus.OK
    assert body == {"id": genres[1]["id"], "name": "Comedy"}

    body, status = await api_request(method="DELETE", endpoint=endpoint)
    assert status == HTTPStatus.NOT_FOUND
    assert body == {"error": "Genre not found"}


@pytest.mark.asyncio
async def test_genres_store_failure(api_request, genre_storage):
    genre_storage.broken = True

    body, status = await api_request(method="GET", endpoint=ENDPOINT)

    assert status == HTTPStatus.INTERNAL_SERVER_ERROR
    assert body == {"error": "connection refused"}
