"""Genre use cases: create, update, get, delete, list."""

from app.application.use_cases.genres.create_genre import CreateGenreUseCase
from app.application.use_cases.genres.delete_genre import DeleteGenreUseCase
from app.application.use_cases.genres.get_genre import GetGenreByIdUseCase
from app.application.use_cases.genres.list_genres import ListGenresUseCase
from app.application.use_cases.genres.update_genre import UpdateGenreUseCase

__all__ = [
    "CreateGenreUseCase",
    "DeleteGenreUseCase",
    "GetGenreByIdUseCase",
    "ListGenresUseCase",
    "UpdateGenreUseCase",
]
