"""Middleware components for the Mini Quora app."""

from mini_quora.api.middleware.method_override import MethodOverrideMiddleware
from mini_quora.api.middleware.request_id import RequestIDMiddleware

__all__ = ["MethodOverrideMiddleware", "RequestIDMiddleware"]
