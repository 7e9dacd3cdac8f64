"""Method-override middleware - lets HTML forms issue PUT and DELETE.

Browsers only submit forms as GET or POST. A form that targets
``/posts/abc?_method=DELETE`` is rewritten to ``DELETE /posts/abc`` before
routing, so the page routers can be declared with their real methods.
Only POST requests are rewritten, and only to a known method.
"""

from __future__ import annotations

from starlette.datastructures import QueryParams
from starlette.types import ASGIApp, Receive, Scope, Send

OVERRIDABLE_METHODS = frozenset({"PUT", "PATCH", "DELETE"})


class MethodOverrideMiddleware:
    """Rewrite ``POST ...?_method=X`` into method ``X``."""

    def __init__(self, app: ASGIApp, param: str = "_method") -> None:
        self.app = app
        self.param = param

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] == "http" and scope["method"] == "POST":
            override = QueryParams(scope.get("query_string", b"")).get(self.param, "").upper()
            if override in OVERRIDABLE_METHODS:
                scope = dict(scope)
                scope["method"] = override
        await self.app(scope, receive, send)
