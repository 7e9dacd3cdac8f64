"""
FastAPI application factory.

``create_app()`` is the single composition root: it builds the post store
and template environment, wires middleware and routers, and installs the
catch-all 404 handling. Nothing else in the package touches ``FastAPI``
directly.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

import structlog
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from starlette.exceptions import HTTPException as StarletteHTTPException

from mini_quora import __version__
from mini_quora.api.middleware import MethodOverrideMiddleware, RequestIDMiddleware
from mini_quora.api.routes.pages import render_not_found
from mini_quora.config import Settings, get_settings
from mini_quora.logging import configure_logging
from mini_quora.store import PostStore

logger = structlog.get_logger()

PACKAGE_DIR = Path(__file__).resolve().parent.parent
TEMPLATES_DIR = PACKAGE_DIR / "templates"
STATIC_DIR = PACKAGE_DIR / "static"

API_PREFIX = "/api/"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler."""
    settings: Settings = app.state.settings
    configure_logging(settings.log_level, settings.log_format)
    logger.info("app_starting", version=app.version, posts=len(app.state.store))

    yield

    logger.info("app_stopping")


async def not_found_handler(request: Request, exc: StarletteHTTPException):
    """
    Catch-all for requests no route accepted.

    An unmatched path and a known path with an unsupported method are both
    answered with 404: JSON under ``/api/``, the rendered page elsewhere.
    """
    if exc.status_code not in (404, 405):
        return await http_exception_handler(request, exc)

    logger.debug("route_not_found", method=request.method, path=request.url.path)
    if request.url.path.startswith(API_PREFIX):
        return JSONResponse(status_code=404, content={"error": "Route not found"})
    return render_not_found(request, "Route not found")


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Override settings (useful for testing). When None the
            cached instance from :func:`get_settings` is used.

    Returns:
        Configured FastAPI application instance
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_title,
        description="Share short tagged posts through HTML pages or a JSON API",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.store = PostStore(seed=settings.seed_demo_post)
    app.state.templates = Jinja2Templates(directory=str(TEMPLATES_DIR))
    app.state.templates.env.globals["app_title"] = settings.app_title
    app.state.templates.env.globals["method_param"] = settings.method_override_param

    # ── Middleware (last added runs first) ───────────────────────────
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(MethodOverrideMiddleware, param=settings.method_override_param)

    # ── Exception handlers ───────────────────────────────────────────
    app.add_exception_handler(StarletteHTTPException, not_found_handler)

    # ── Routers ──────────────────────────────────────────────────────
    from mini_quora.api.routes import health, pages, posts

    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
    app.include_router(health.router, tags=["Health"])
    app.include_router(posts.router, prefix="/api/posts", tags=["Posts API"])
    app.include_router(pages.router, tags=["Pages"], include_in_schema=False)

    return app


# Default app instance
app = create_app()
