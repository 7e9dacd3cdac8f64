"""
Write-time normalization for post fields.

Nothing here ever rejects input. Absent values, ``None`` and non-string
scalars are coerced into the canonical shape instead.
"""

from collections.abc import Mapping
from typing import Any

from mini_quora.models import DEFAULT_AUTHOR, DEFAULT_TITLE


def clean_text(value: Any) -> str:
    """Trim a field value, treating ``None`` as blank.

    JSON ``null`` therefore stores ``""`` on a partial update, and other
    scalars use Python's ``str`` (``true`` becomes ``"True"``).
    """
    if value is None:
        return ""
    return str(value).strip()


def normalize_tags(value: Any) -> list[str]:
    """Build a tag list from a comma-joined string or a sequence.

    Order and duplicates are preserved; blank entries are dropped.

    >>> normalize_tags("a, b ,,c")
    ['a', 'b', 'c']
    >>> normalize_tags([" x", "", "y"])
    ['x', 'y']
    """
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        parts = [clean_text(item) for item in value]
    else:
        parts = [part.strip() for part in str(value).split(",")]
    return [part for part in parts if part]


def new_post_fields(fields: Mapping[str, Any]) -> dict[str, Any]:
    """Normalize the fields of a post being created.

    Blank or missing title/author fall back to their display defaults.
    """
    return {
        "title": clean_text(fields.get("title")) or DEFAULT_TITLE,
        "author": clean_text(fields.get("author")) or DEFAULT_AUTHOR,
        "body": clean_text(fields.get("body")),
        "tags": normalize_tags(fields.get("tags")),
    }
