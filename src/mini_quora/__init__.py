"""
Mini Quora - post sharing over server-rendered pages and a JSON API.

This package is organised in layers:

- models / normalize / store: the post record store (no web imports)
- api: FastAPI application, routers, middleware
- cli: the ``mini-quora`` command

Both HTTP surfaces call the same :class:`PostStore`, so the rules for
what a valid post looks like live in exactly one place.
"""

__version__ = "0.1.0"

from mini_quora.models import Post, UpdateMode
from mini_quora.store import PostStore

__all__ = [
    "Post",
    "PostStore",
    "UpdateMode",
    "__version__",
]
