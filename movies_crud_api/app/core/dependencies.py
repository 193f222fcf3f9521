"""
FastAPI dependencies shared by the endpoint modules.
"""

from fastapi import Request

from movies_crud_api.app.services.movie_service import MovieStore


def get_movie_store(request: Request) -> MovieStore:
    """Return the movie store owned by the running application."""
    return request.app.state.movie_store
