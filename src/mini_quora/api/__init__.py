"""
HTTP layer for Mini Quora.

Entry Points:
    - app: The FastAPI application instance
    - create_app(): Factory function for testing/configuration
"""

from mini_quora.api.app import app, create_app

__all__ = ["app", "create_app"]
