"""
Post record and update-mode definitions.

These models are shared by both HTTP surfaces. They are plain dataclasses;
Pydantic is used only at the JSON API boundary.
"""

from dataclasses import dataclass, field
from enum import Enum

# Field names accepted from either surface
POST_FIELDS = ("title", "author", "body", "tags")

DEFAULT_TITLE = "Untitled"
DEFAULT_AUTHOR = "Anonymous"


class UpdateMode(str, Enum):
    """
    How an update treats the fields it was given.

    FALLBACK is the HTML form convention: every field arrives as a string,
    so a blank title/author/body means "keep what is there", and tags are
    always rebuilt from the submitted value.

    PARTIAL is the JSON API convention: only keys present in the request
    are touched, and a supplied blank is stored as blank.
    """

    FALLBACK = "fallback"
    PARTIAL = "partial"


@dataclass
class Post:
    """A tagged, authored text record."""

    id: str
    title: str
    author: str
    body: str = ""
    tags: list[str] = field(default_factory=list)

    def has_tag(self, tag: str) -> bool:
        """Exact, case-sensitive tag membership."""
        return tag in self.tags
