"""
Service layer for movies.

``MovieStore`` keeps the movie collection for one application
instance: an ordered list of records in insertion order, held in
memory for the lifetime of the process.  Nothing is persisted; a
restart starts again from the demo data.

All operations take the store's lock for their whole duration, so the
store can be shared between concurrent request handlers.  Lookups are
linear scans, which is fine for the handful of records the service is
meant to hold.  Records are copied on the way in and on the way out so
callers never hold a reference into the store's state.
"""

from __future__ import annotations

import logging
import random
import threading
from typing import List, Optional

from movies_crud_api.app.schemas.movie import Director, Movie, MovieCreate, MovieUpdate


logger = logging.getLogger(__name__)

# Generated identifiers are decimal strings below this bound.
MAX_GENERATED_ID = 100000000


class MovieStoreError(Exception):
    """Base class for errors raised by :class:`MovieStore`."""

    def __init__(self, movie_id: str) -> None:
        super().__init__(movie_id)
        self.movie_id = movie_id


class MovieNotFoundError(MovieStoreError):
    """No movie with the requested identifier exists."""

    def __str__(self) -> str:
        return f"Movie {self.movie_id!r} not found"


class MovieAlreadyExistsError(MovieStoreError):
    """A movie with the requested identifier is already stored."""

    def __str__(self) -> str:
        return f"Movie {self.movie_id!r} already exists"


DEMO_MOVIES = (
    Movie(
        id="1",
        isbn="12345678",
        title="Movie One",
        director=Director(firstname="John", lastname="Doe"),
    ),
    Movie(
        id="2",
        isbn="87654321",
        title="Movie Two",
        director=Director(firstname="Jane", lastname="Doe"),
    ),
)


class MovieStore:
    """In‑memory, lock protected collection of movies."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._movies: List[Movie] = []
        self._lock = threading.Lock()
        self._rng = rng or random.Random()

    def seed_demo_data(self) -> None:
        """Append the two demo movies the service starts with."""
        with self._lock:
            for movie in DEMO_MOVIES:
                self._movies.append(movie.model_copy(deep=True))
        logger.info("Seeded %d demo movies", len(DEMO_MOVIES))

    def list(self) -> List[Movie]:
        """Return every movie in insertion order."""
        with self._lock:
            return self._snapshot()

    def get(self, movie_id: str) -> Optional[Movie]:
        """Return the first movie with ``movie_id`` or ``None``."""
        with self._lock:
            index = self._find_index(movie_id)
            if index is None:
                return None
            return self._movies[index].model_copy(deep=True)

    def create(self, data: MovieCreate) -> Movie:
        """Append a new movie and return it.

        When ``data.id`` is missing or empty a random unused numeric
        identifier is assigned.  A duplicate identifier raises
        :class:`MovieAlreadyExistsError` and leaves the store unchanged.
        """
        with self._lock:
            movie_id = data.id or self._generate_id()
            if self._find_index(movie_id) is not None:
                raise MovieAlreadyExistsError(movie_id)
            movie = Movie(
                id=movie_id,
                isbn=data.isbn,
                title=data.title,
                director=data.director.model_copy() if data.director else None,
            )
            self._movies.append(movie)
            logger.info("Created movie %s", movie_id)
            return movie.model_copy(deep=True)

    def update(self, movie_id: str, data: MovieUpdate) -> Movie:
        """Overwrite every field of ``movie_id`` except the identifier.

        The movie keeps its position in the collection.  Raises
        :class:`MovieNotFoundError` if no such movie exists.
        """
        with self._lock:
            index = self._find_index(movie_id)
            if index is None:
                raise MovieNotFoundError(movie_id)
            movie = Movie(
                id=movie_id,
                isbn=data.isbn,
                title=data.title,
                director=data.director.model_copy() if data.director else None,
            )
            self._movies[index] = movie
            logger.info("Updated movie %s", movie_id)
            return movie.model_copy(deep=True)

    def delete(self, movie_id: str) -> List[Movie]:
        """Remove the first movie with ``movie_id``.

        Removing an unknown identifier is a no‑op.  Either way the
        remaining movies are returned in order.
        """
        with self._lock:
            index = self._find_index(movie_id)
            if index is not None:
                del self._movies[index]
                logger.info("Deleted movie %s", movie_id)
            else:
                logger.debug("Delete of unknown movie %s ignored", movie_id)
            return self._snapshot()

    def __len__(self) -> int:
        with self._lock:
            return len(self._movies)

    # The helpers below expect the lock to be held by the caller.

    def _snapshot(self) -> List[Movie]:
        return [movie.model_copy(deep=True) for movie in self._movies]

    def _find_index(self, movie_id: str) -> Optional[int]:
        for index, movie in enumerate(self._movies):
            if movie.id == movie_id:
                return index
        return None

    def _generate_id(self) -> str:
        while True:
            candidate = str(self._rng.randrange(MAX_GENERATED_ID))
            if self._find_index(candidate) is None:
                return candidate
