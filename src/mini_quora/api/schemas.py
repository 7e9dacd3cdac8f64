"""
JSON API schemas.

Request bodies are deliberately loose: every field is optional and of any
type, because the store coerces rather than rejects. Which keys were sent
matters (partial updates), so routes read ``model_fields_set``.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from mini_quora.models import Post


class PostPayload(BaseModel):
    """Create/update request body."""

    model_config = ConfigDict(extra="ignore")

    title: Any = Field(None, description="Post title")
    author: Any = Field(None, description="Author display name")
    body: Any = Field(None, description="Post text")
    tags: Any = Field(None, description="List of tags or a comma-separated string")

    def supplied_fields(self) -> dict[str, Any]:
        """Only the keys present in the request body."""
        return self.model_dump(include=self.model_fields_set)


class PostResponse(BaseModel):
    """A stored post."""

    id: str
    title: str
    author: str
    body: str
    tags: list[str]

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_post(cls, post: Post) -> "PostResponse":
        return cls.model_validate(post)


class ErrorResponse(BaseModel):
    """Error body for JSON API failures."""

    error: str = Field(..., examples=["Post not found"])
