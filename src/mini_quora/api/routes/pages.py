"""
Server-rendered pages for posts.

Forms submit every field as a string, so updates here use
``UpdateMode.FALLBACK``: a blank title/author/body keeps the stored value,
and tags are always rebuilt from the submitted string. PUT and DELETE
arrive as ``POST ?_method=...`` and are rewritten by
:class:`~mini_quora.api.middleware.MethodOverrideMiddleware`.

Successful writes answer with ``303 See Other`` so the browser follows up
with a GET.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Form, Query, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from mini_quora.api.deps import Store, Templates
from mini_quora.models import UpdateMode

router = APIRouter(default_response_class=HTMLResponse)


def render_not_found(request: Request, message: str = "Post not found") -> HTMLResponse:
    """Render the 404 page with the given message."""
    templates = request.app.state.templates
    return templates.TemplateResponse(
        request,
        "404.html",
        {"message": message},
        status_code=status.HTTP_404_NOT_FOUND,
    )


def _redirect(url: str) -> RedirectResponse:
    return RedirectResponse(url, status_code=status.HTTP_303_SEE_OTHER)


async def post_form(
    title: Annotated[str | None, Form()] = None,
    author: Annotated[str | None, Form()] = None,
    body: Annotated[str | None, Form()] = None,
    tags: Annotated[str | None, Form()] = None,
) -> dict[str, Any]:
    """Decode a post form; a missing tags field is an empty tag string."""
    return {"title": title, "author": author, "body": body, "tags": tags or ""}


PostForm = Annotated[dict[str, Any], Depends(post_form)]


@router.get("/")
async def home():
    return _redirect("/posts")


@router.get("/posts")
async def list_posts(
    request: Request,
    store: Store,
    templates: Templates,
    tag: Annotated[str | None, Query(description="Only show posts with this exact tag")] = None,
):
    """List posts, optionally filtered by tag."""
    return templates.TemplateResponse(
        request,
        "posts/index.html",
        {"posts": store.list(tag), "query_tag": tag or ""},
    )


@router.get("/posts/new")
async def new_post(request: Request, templates: Templates):
    return templates.TemplateResponse(request, "posts/new.html", {})


@router.post("/posts")
async def create_post(store: Store, fields: PostForm):
    store.create(fields)
    return _redirect("/posts")


@router.get("/posts/{post_id}")
async def show_post(post_id: str, request: Request, store: Store, templates: Templates):
    post = store.get(post_id)
    if post is None:
        return render_not_found(request)
    return templates.TemplateResponse(request, "posts/show.html", {"post": post})


@router.get("/posts/{post_id}/edit")
async def edit_post(post_id: str, request: Request, store: Store, templates: Templates):
    post = store.get(post_id)
    if post is None:
        return render_not_found(request)
    return templates.TemplateResponse(request, "posts/edit.html", {"post": post})


@router.put("/posts/{post_id}")
async def update_post(post_id: str, request: Request, store: Store, fields: PostForm):
    post = store.update(post_id, fields, UpdateMode.FALLBACK)
    if post is None:
        return render_not_found(request)
    return _redirect(f"/posts/{post.id}")


@router.delete("/posts/{post_id}")
async def delete_post(post_id: str, request: Request, store: Store):
    if not store.delete(post_id):
        return render_not_found(request)
    return _redirect("/posts")
