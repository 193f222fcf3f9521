"""
Version 1 of the API.

Version 1 is mounted at the application root by default so that the
plain ``/movies`` and ``/movie/{id}`` paths are served as is.  Set
``API_PREFIX`` to move it elsewhere.
"""
