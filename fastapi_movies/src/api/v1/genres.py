from http import HTTPStatus
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException

from services.genre import GenreService, get_genre_service
from services.validation import Validators, get_validators

from .api_models import GenreDetail, GenreIn, GenreUpdate
from .common import ERROR_RESPONSES, json_body, not_found_response, validated

router = APIRouter()

GENRE_NOT_FOUND = "Genre not found"


@router.post(
    "/",
    response_model=GenreDetail,
    status_code=HTTPStatus.CREATED,
    include_in_schema=False,
)
@router.post(
    "",
    response_model=GenreDetail,
    status_code=HTTPStatus.CREATED,
    summary="Создание жанра",
    description="Создаёт жанр. Название жанра должно быть длиной от 3 до 50 символов.",
    responses=ERROR_RESPONSES,
    openapi_extra=json_body(GenreIn),
)
async def create_genre(
    payload: Any = Body(None),
    validators: Validators = Depends(get_validators),
    genre_service: GenreService = Depends(get_genre_service),
) -> GenreDetail:
    genre_in = validated(validators.genre_create.validate(payload))

    genre = await genre_service.create(genre_in)

    return GenreDetail(**genre.model_dump())


@router.get("/", response_model=list[GenreDetail], include_in_schema=False)
@router.get(
    "",
    response_model=list[GenreDetail],
    summary="Все жанры",
    description="Возвращает список всех жанров. Если жанров нет, возвращается пустой список.",
    responses=ERROR_RESPONSES,
)
async def genres(
    genre_service: GenreService = Depends(get_genre_service),
) -> list[GenreDetail]:
    all_genres = await genre_service.get_all_genres()

    return [GenreDetail(**genre.model_dump()) for genre in all_genres]


@router.get(
    "/{genre_id}",
    response_model=GenreDetail,
    summary="Поиск жанра по id",
    description="Возвращает жанр по его идентификатору (24 шестнадцатеричных символа)."
    " Если жанр не найден, возвращается ошибка 404.",
    responses=not_found_response(GENRE_NOT_FOUND),
)
async def genre_details(
    genre_id: str,
    validators: Validators = Depends(get_validators),
    genre_service: GenreService = Depends(get_genre_service),
) -> GenreDetail:
    genre_id = validated(validators.genre_id.validate(genre_id))

    genre = await genre_service.get_by_id(genre_id)

    if not genre:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=GENRE_NOT_FOUND)

    return GenreDetail(**genre.model_dump())


@router.put(
    "/{genre_id}",
    response_model=GenreDetail,
    summary="Изменение жанра",
    description="Обновляет жанр и возвращает его новое состояние.",
    responses=not_found_response(GENRE_NOT_FOUND),
    openapi_extra=json_body(GenreUpdate),
)
async def update_genre(
    genre_id: str,
    payload: Any = Body(None),
    validators: Validators = Depends(get_validators),
    genre_service: GenreService = Depends(get_genre_service),
) -> GenreDetail:
    genre_id = validated(validators.genre_id.validate(genre_id))
    patch = validated(validators.genre_update.validate(payload))

    genre = await genre_service.update(genre_id, patch)

    if not genre:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=GENRE_NOT_FOUND)

    return GenreDetail(**genre.model_dump())


@router.delete(
    "/{genre_id}",
    response_model=GenreDetail,
    summary="Удаление жанра",
    description="Удаляет жанр и возвращает удалённую запись."
    " Фильмы, в которых указан этот жанр, не изменяются.",
    responses=not_found_response(GENRE_NOT_FOUND),
)
async def delete_genre(
    genre_id: str,
    validators: Validators = Depends(get_validators),
    genre_service: GenreService = Depends(get_genre_service),
) -> GenreDetail:
    genre_id = validated(validators.genre_id.validate(genre_id))

    genre = await genre_service.delete(genre_id)

    if not genre:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=GENRE_NOT_FOUND)

    return GenreDetail(**genre.model_dump())
