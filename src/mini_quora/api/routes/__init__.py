"""API routes.

- health: liveness probe
- pages: server-rendered HTML pages driven by forms
- posts: JSON REST API under ``/api/posts``
"""

from mini_quora.api.routes import health, pages, posts

__all__ = ["health", "pages", "posts"]
