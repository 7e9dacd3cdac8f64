"""
JSON REST API for posts.

Endpoints:
- GET    /api/posts          - every post, newest first (no tag filter here)
- POST   /api/posts          - create, 201 + post
- GET    /api/posts/{id}     - one post
- PUT    /api/posts/{id}     - partial update, 200 + post
- DELETE /api/posts/{id}     - 204, no body

A missing post is always ``404 {"error": "Post not found"}``.
"""

import structlog
from fastapi import APIRouter, Response, status
from fastapi.responses import JSONResponse

from mini_quora.api.deps import Store
from mini_quora.api.schemas import ErrorResponse, PostPayload, PostResponse
from mini_quora.models import UpdateMode

logger = structlog.get_logger()

router = APIRouter()

NOT_FOUND = {404: {"model": ErrorResponse, "description": "Post not found"}}


def _not_found(post_id: str) -> JSONResponse:
    logger.debug("api_post_not_found", post_id=post_id)
    return JSONResponse(status_code=404, content={"error": "Post not found"})


@router.get("", response_model=list[PostResponse])
async def list_posts(store: Store):
    """List all posts."""
    return [PostResponse.from_post(post) for post in store.list()]


@router.get("/{post_id}", response_model=PostResponse, responses=NOT_FOUND)
async def get_post(post_id: str, store: Store):
    """Get a post by ID."""
    post = store.get(post_id)
    if post is None:
        return _not_found(post_id)
    return PostResponse.from_post(post)


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(store: Store, payload: PostPayload | None = None):
    """
    Create a post.

    Blank or missing title/author become "Untitled"/"Anonymous".
    ``tags`` may be a list or a comma-separated string.
    """
    fields = payload.supplied_fields() if payload else {}
    return PostResponse.from_post(store.create(fields))


@router.put("/{post_id}", response_model=PostResponse, responses=NOT_FOUND)
async def update_post(post_id: str, store: Store, payload: PostPayload | None = None):
    """
    Update a post.

    Only keys present in the body are changed. A supplied empty string is
    stored as-is; defaults are never re-applied on update.
    """
    fields = payload.supplied_fields() if payload else {}
    post = store.update(post_id, fields, UpdateMode.PARTIAL)
    if post is None:
        return _not_found(post_id)
    return PostResponse.from_post(post)


@router.delete(
    "/{post_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND,
)
async def delete_post(post_id: str, store: Store):
    """Delete a post."""
    if not store.delete(post_id):
        return _not_found(post_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
