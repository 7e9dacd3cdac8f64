"""Health check endpoint."""

from fastapi import APIRouter

from mini_quora.api.deps import Store

router = APIRouter()


@router.get("/health")
async def health_check(store: Store):
    """Basic health check."""
    return {"status": "healthy", "posts": len(store)}
