"""
Top‑level router for version 1 of the API.

This router aggregates resource routers under a unified prefix.  When
new resources are added, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import movies

router = APIRouter()

# The movies router defines both "/movies" and "/movie/{id}" itself, so
# it is included without a prefix.
router.include_router(movies.router, tags=["movies"])
