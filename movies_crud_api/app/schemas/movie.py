"""
Pydantic models for movie data.

A ``Movie`` carries an identifier, an ISBN, a title and an optional
nested ``Director``.  The director has no identity of its own; it only
exists inside its movie.  None of the string fields are validated
beyond their JSON type.
"""

from typing import Optional

from pydantic import BaseModel, Field


class Director(BaseModel):
    firstname: str = Field("", examples=["John"])
    lastname: str = Field("", examples=["Doe"])


class Movie(BaseModel):
    """Schema for reading a movie from the API."""

    id: str = Field(..., examples=["1"])
    isbn: str = Field("", examples=["12345678"])
    title: str = Field("", examples=["Movie One"])
    director: Optional[Director] = None


class MovieCreate(BaseModel):
    """Schema for creating a movie.

    ``id`` may be left out or empty, in which case the store assigns one.
    """

    id: Optional[str] = Field(None, examples=["3"])
    isbn: str = Field("", examples=["11223344"])
    title: str = Field("", examples=["Movie Three"])
    director: Optional[Director] = None


class MovieUpdate(BaseModel):
    """Schema for replacing a movie.

    Every field except the identifier is overwritten.  An ``id`` in the
    body is accepted but ignored; the identifier from the path wins.
    """

    id: Optional[str] = None
    isbn: str = Field("", examples=["12345678"])
    title: str = Field("", examples=["Movie One (Director's Cut)"])
    director: Optional[Director] = None
