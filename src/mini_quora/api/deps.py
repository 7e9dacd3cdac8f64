"""
FastAPI dependency injection - per-application singletons.

The store and the template environment are built once by ``create_app``
and stashed on ``app.state``; routers reach them only through these
dependencies.
"""

from typing import Annotated

from fastapi import Depends, Request
from fastapi.templating import Jinja2Templates

from mini_quora.store import PostStore


def get_store(request: Request) -> PostStore:
    """The application's post store."""
    return request.app.state.store


def get_templates(request: Request) -> Jinja2Templates:
    """The application's Jinja2 template environment."""
    return request.app.state.templates


# ── Convenience type aliases ─────────────────────────────────────────────

Store = Annotated[PostStore, Depends(get_store)]
Templates = Annotated[Jinja2Templates, Depends(get_templates)]
