"""
Top‑level package for the Movies CRUD API.

The HTTP service lives in the ``app`` subpackage and can be imported
as ``movies_crud_api.app.main``.  A small ``requests`` based client
for talking to a running instance is provided in
``movies_crud_api.client``.
"""

__all__ = []
