"""Movies CRUD API client.

This module defines a small client wrapper around the movie service's
REST API.  The client uses the ``requests`` library internally and
exposes one method per operation:

* :meth:`list_movies` – return every movie.
* :meth:`get_movie` – fetch a single movie by its identifier.
* :meth:`create_movie` – add a movie.
* :meth:`update_movie` – replace a movie's fields.
* :meth:`delete_movie` – remove a movie and return the ones left.

Every method returns a ``(data, error)`` tuple.  On success ``error``
is ``None``; on failure ``data`` is empty and ``error`` is a dictionary
with the keys ``status_code`` and ``message``.  The service reports
errors as plain text, so ``message`` is usually the response body.
"""

from __future__ import annotations

import logging
from urllib.parse import quote
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class MoviesAPI:
    """Client for interacting with the movies API."""

    def __init__(
        self,
        *,
        base_url: str = "http://localhost:8000",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8000``.
                Include the API prefix if the server was started with one.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/movies``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)`` as described in the module docstring.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = exc.response.text.strip() if exc.response is not None else ""
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    @staticmethod
    def _movie_path(movie_id: Any) -> str:
        return f"/movie/{quote(str(movie_id), safe='')}"

    # ------------------------------------------------------------------
    # Movie operations
    # ------------------------------------------------------------------
    def list_movies(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all movies in the order the service stores them."""
        data, error = self._request("GET", "/movies")
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def get_movie(self, movie_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single movie by ID.

        An unknown ID yields ``error["status_code"] == 404``.
        """
        return self._request("GET", self._movie_path(movie_id))

    def create_movie(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a movie.

        Args:
            payload: Movie fields.  Leave ``id`` out to have the service
                assign one.
        Returns:
            A tuple ``(movie, error)`` holding the stored movie.
        """
        return self._request("POST", "/movies", json_body=payload)

    def update_movie(
        self, movie_id: Any, payload: Dict[str, Any]
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace the ISBN, title and director of an existing movie."""
        return self._request("PUT", self._movie_path(movie_id), json_body=payload)

    def delete_movie(self, movie_id: Any) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Delete a movie and return the remaining ones."""
        data, error = self._request("DELETE", self._movie_path(movie_id))
        if error:
            return [], error
        return data if isinstance(data, list) else [], None
