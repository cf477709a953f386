from http import HTTPStatus
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException

from core.exceptions import ValidationError
from services.movie import MovieService, get_movie_service
from services.validation import Validators, get_validators

from .api_models import MovieDetail, MovieIn, MovieUpdate
from .common import ERROR_RESPONSES, json_body, not_found_response, validated

router = APIRouter()

MOVIE_NOT_FOUND = "Movie not found"
NO_MOVIES_FOR_GENRE = "No movies found for this genre"


@router.post(
    "/",
    response_model=MovieDetail,
    status_code=HTTPStatus.CREATED,
    include_in_schema=False,
)
@router.post(
    "",
    response_model=MovieDetail,
    status_code=HTTPStatus.CREATED,
    summary="Создание фильма",
    description="Создаёт фильм. Все жанры фильма должны существовать,"
    " иначе возвращается ошибка 400.",
    responses=ERROR_RESPONSES,
    openapi_extra=json_body(MovieIn),
)
async def create_movie(
    payload: Any = Body(None),
    validators: Validators = Depends(get_validators),
    movie_service: MovieService = Depends(get_movie_service),
) -> MovieDetail:
    movie_in = validated(validators.movie_create.validate(payload))

    try:
        movie = await movie_service.create(movie_in)
    except ValidationError as exc:
        raise HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail=exc.message)

    return MovieDetail(**movie.model_dump())


@router.get("/", response_model=list[MovieDetail], include_in_schema=False)
@router.get(
    "",
    response_model=list[MovieDetail],
    summary="Все фильмы",
    description="Возвращает список всех фильмов. Если фильмов нет, возвращается пустой список.",
    responses=ERROR_RESPONSES,
)
async def movies(
    movie_service: MovieService = Depends(get_movie_service),
) -> list[MovieDetail]:
    all_movies = await movie_service.get_all_movies()

    return [MovieDetail(**movie.model_dump()) for movie in all_movies]


@router.get(
    "/genre/{genre_name}",
    response_model=list[MovieDetail],
    summary="Поиск фильмов по жанру",
    description="Возвращает фильмы, в списке жанров которых есть указанный жанр"
    " (точное совпадение с учётом регистра)."
    " Если фильмы не найдены, возвращается ошибка 404.",
    responses=not_found_response(NO_MOVIES_FOR_GENRE),
)
async def movies_by_genre(
    genre_name: str,
    validators: Validators = Depends(get_validators),
    movie_service: MovieService = Depends(get_movie_service),
) -> list[MovieDetail]:
    genre_name = validated(validators.genre_name.validate(genre_name))

    genre_movies = await movie_service.get_by_genre(genre_name)

    if not genre_movies:
        raise HTTPException(
            status_code=HTTPStatus.NOT_FOUND, detail=NO_MOVIES_FOR_GENRE
        )

    return [MovieDetail(**movie.model_dump()) for movie in genre_movies]


@router.get(
    "/{movie_id}",
    response_model=MovieDetail,
    summary="Поиск фильма по id",
    description="Возвращает фильм по его идентификатору (24 шестнадцатеричных символа)."
    " Если фильм не найден, возвращается ошибка 404.",
    responses=not_found_response(MOVIE_NOT_FOUND),
)
async def movie_details(
    movie_id: str,
    validators: Validators = Depends(get_validators),
    movie_service: MovieService = Depends(get_movie_service),
) -> MovieDetail:
    movie_id = validated(validators.movie_id.validate(movie_id))

    movie = await movie_service.get_by_id(movie_id)

    if not movie:
        # Если фильм не найден, отдаём 404 статус
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=MOVIE_NOT_FOUND)

    return MovieDetail(**movie.model_dump())


@router.put(
    "/{movie_id}",
    response_model=MovieDetail,
    summary="Изменение фильма",
    description="Обновляет переданные поля фильма и возвращает его новое состояние."
    " Жанры проверяются, только если они есть в запросе.",
    responses=not_found_response(MOVIE_NOT_FOUND),
    openapi_extra=json_body(MovieUpdate),
)
async def update_movie(
    movie_id: str,
    payload: Any = Body(None),
    validators: Validators = Depends(get_validators),
    movie_service: MovieService = Depends(get_movie_service),
) -> MovieDetail:
    movie_id = validated(validators.movie_id.validate(movie_id))
    patch = validated(validators.movie_update.validate(payload))

    try:
        movie = await movie_service.update(movie_id, patch)
    except ValidationError as exc:
        raise HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail=exc.message)

    if not movie:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=MOVIE_NOT_FOUND)

    return MovieDetail(**movie.model_dump())


@router.delete(
    "/{movie_id}",
    response_model=MovieDetail,
    summary="Удаление фильма",
    description="Удаляет фильм и возвращает удалённую запись.",
    responses=not_found_response(MOVIE_NOT_FOUND),
)
async def delete_movie(
    movie_id: str,
    validators: Validators = Depends(get_validators),
    movie_service: MovieService = Depends(get_movie_service),
) -> MovieDetail:
    movie_id = validated(validators.movie_id.validate(movie_id))

    movie = await movie_service.delete(movie_id)

    if not movie:
        raise HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=MOVIE_NOT_FOUND)

    return MovieDetail(**movie.model_dump())
