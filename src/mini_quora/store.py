"""Post store - in-memory CRUD for post records."""

import threading
import uuid
from collections.abc import Mapping
from dataclasses import replace
from typing import Any

import structlog

from mini_quora.models import POST_FIELDS, Post, UpdateMode
from mini_quora.normalize import clean_text, new_post_fields, normalize_tags

logger = structlog.get_logger()

SEED_POST = {
    "title": "Welcome to Mini Quora",
    "author": "Admin",
    "body": "Ask and answer! This is a demo post.",
    "tags": ["intro", "demo"],
}


def _snapshot(post: Post) -> Post:
    return replace(post, tags=list(post.tags))


class PostStore:
    """
    Owns the collection of posts.

    Posts are kept newest-first: ``create`` prepends. Every public method
    takes the store lock for its whole duration, so callers only ever see
    fully applied writes. Returned posts are copies; mutate through
    :meth:`update`.
    """

    def __init__(self, seed: bool = False) -> None:
        self._lock = threading.Lock()
        self._posts: list[Post] = []
        self._issued_ids: set[str] = set()
        if seed:
            self.create(SEED_POST)

    def __len__(self) -> int:
        with self._lock:
            return len(self._posts)

    def _new_id(self) -> str:
        # Caller holds the lock. Ids are never reissued, even after delete.
        while True:
            post_id = str(uuid.uuid4())
            if post_id not in self._issued_ids:
                self._issued_ids.add(post_id)
                return post_id

    def _find(self, post_id: str) -> Post | None:
        for post in self._posts:
            if post.id == post_id:
                return post
        return None

    def create(self, fields: Mapping[str, Any]) -> Post:
        """
        Create a new post.

        Args:
            fields: Raw title/author/body/tags values; any may be missing

        Returns:
            The stored post
        """
        values = new_post_fields(fields)
        with self._lock:
            post = Post(id=self._new_id(), **values)
            self._posts.insert(0, post)
            result = _snapshot(post)

        logger.info("post_created", post_id=post.id, tags=post.tags)
        return result

    def get(self, post_id: str) -> Post | None:
        """Get a post by ID."""
        with self._lock:
            post = self._find(post_id)
            return _snapshot(post) if post else None

    def list(self, tag: str | None = None) -> list[Post]:
        """List posts in store order, optionally only those carrying ``tag``."""
        with self._lock:
            if not tag:
                return [_snapshot(post) for post in self._posts]
            return [_snapshot(post) for post in self._posts if post.has_tag(tag)]

    def update(
        self,
        post_id: str,
        fields: Mapping[str, Any],
        mode: UpdateMode = UpdateMode.PARTIAL,
    ) -> Post | None:
        """
        Update a post in place.

        Args:
            post_id: Post to update
            fields: Raw values from the request
            mode: FALLBACK keeps existing title/author/body when the new
                value is blank and always rebuilds tags. PARTIAL only touches
                keys present in ``fields`` and stores blanks as given.

        Returns:
            The updated post, or None if no post has that ID
        """
        with self._lock:
            post = self._find(post_id)
            if post is None:
                logger.info("post_not_found", post_id=post_id, operation="update")
                return None

            changes: dict[str, Any] = {}
            if mode is UpdateMode.FALLBACK:
                for name in ("title", "author", "body"):
                    value = clean_text(fields.get(name))
                    if value:
                        changes[name] = value
                changes["tags"] = normalize_tags(fields.get("tags"))
            else:
                for name in POST_FIELDS:
                    if name not in fields:
                        continue
                    if name == "tags":
                        changes[name] = normalize_tags(fields[name])
                    else:
                        changes[name] = clean_text(fields[name])

            for name, value in changes.items():
                setattr(post, name, value)
            result = _snapshot(post)

        logger.info(
            "post_updated",
            post_id=post_id,
            mode=mode.value,
            fields=sorted(changes),
        )
        return result

    def delete(self, post_id: str) -> bool:
        """Delete a post. Returns False if no post has that ID."""
        with self._lock:
            before = len(self._posts)
            self._posts = [post for post in self._posts if post.id != post_id]
            deleted = len(self._posts) < before

        if deleted:
            logger.info("post_deleted", post_id=post_id)
        else:
            logger.info("post_not_found", post_id=post_id, operation="delete")
        return deleted
