"""
Application package initializer.

The service is split into the usual pieces: ``core`` holds settings
and logging, ``schemas`` the pydantic payload models, ``services`` the
in‑memory record store and ``api`` the versioned routers that expose
it over HTTP.
"""

from .main import app  # noqa: F401
