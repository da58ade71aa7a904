"""
Top‑level package for the Company Directory.

The package is split in two halves.  ``app`` holds the REST backend
(FastAPI application, record store and CRUD endpoints) and ``view``
holds the client side: the derived view pipeline, the mutation
reconciler and the session object that ties them to the HTTP client
in ``directory_api``.

The package provides no public exports; all functionality lives in
submodules.
"""

__all__ = []
