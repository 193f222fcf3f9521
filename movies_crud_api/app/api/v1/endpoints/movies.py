"""
Movie endpoints for API v1.

These routes expose a CRUD API over the in‑memory movie store.  The
collection is served at ``/movies`` (list and create) while single
records live at ``/movie/{movie_id}`` (read, replace and delete).

Successful responses are JSON.  Errors are plain text messages with
the matching status code rather than a JSON ``detail`` object.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse

from movies_crud_api.app.core.dependencies import get_movie_store
from movies_crud_api.app.schemas.movie import Movie, MovieCreate, MovieUpdate
from movies_crud_api.app.services.movie_service import (
    MovieAlreadyExistsError,
    MovieNotFoundError,
    MovieStore,
)

router = APIRouter()
logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "No movie found with the given ID"
ALREADY_EXISTS_MESSAGE = "A movie with the given ID already exists"


@router.post("/movies", response_model=Movie)
async def create_movie(
    movie_in: MovieCreate,
    store: MovieStore = Depends(get_movie_store),
):
    """Add a movie to the collection and return it.

    The identifier is generated when the body does not carry one.
    Returns HTTP 409 if the identifier is already taken.
    """
    try:
        return store.create(movie_in)
    except MovieAlreadyExistsError as exc:
        logger.info("Rejected duplicate movie %s", exc.movie_id)
        return PlainTextResponse(ALREADY_EXISTS_MESSAGE, status_code=status.HTTP_409_CONFLICT)


@router.get("/movies", response_model=List[Movie])
async def list_movies(store: MovieStore = Depends(get_movie_store)) -> List[Movie]:
    """Return all movies in insertion order."""
    return store.list()


@router.get("/movie/{movie_id}", response_model=Movie)
async def get_movie(movie_id: str, store: MovieStore = Depends(get_movie_store)):
    """Retrieve a single movie by ID.

    Returns HTTP 404 if the movie is not found.
    """
    movie = store.get(movie_id)
    if movie is None:
        return PlainTextResponse(NOT_FOUND_MESSAGE, status_code=status.HTTP_404_NOT_FOUND)
    return movie


@router.put("/movie/{movie_id}", response_model=Movie)
async def update_movie(
    movie_id: str,
    movie_in: MovieUpdate,
    store: MovieStore = Depends(get_movie_store),
):
    """Replace everything but the identifier of an existing movie."""
    try:
        return store.update(movie_id, movie_in)
    except MovieNotFoundError:
        return PlainTextResponse(NOT_FOUND_MESSAGE, status_code=status.HTTP_404_NOT_FOUND)


@router.delete("/movie/{movie_id}", response_model=List[Movie])
async def delete_movie(movie_id: str, store: MovieStore = Depends(get_movie_store)) -> List[Movie]:
    """Delete a movie by ID and return the movies that remain.

    Deleting an unknown ID is not an error; the unchanged collection is
    returned.
    """
    return store.delete(movie_id)
