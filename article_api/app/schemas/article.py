"""
Pydantic schemas for articles.

``ArticleCreate`` is the request body for creating an article,
``ArticleRead`` the response body for a stored article and
``ArticleCloneRead`` the response of the clone endpoint, which carries
both the source article and its persisted copy.

Tags are a list of strings.  For clients that still send the legacy
comma‑separated form (``"design pattern,laravel,prototype"``) the
string is split on commas, stripped, and empty fragments are dropped.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def parse_tags(value) -> List[str]:
    """Normalise a tag value into a list of non‑empty strings."""
    if value is None:
        return []
    if isinstance(value, str):
        return [tag.strip() for tag in value.split(",") if tag.strip()]
    if not isinstance(value, (list, tuple)):
        raise ValueError("Tags must be a list of strings or a comma-separated string")
    tags = []
    for item in value:
        if not isinstance(item, str):
            raise ValueError("Each tag must be a string")
        if item.strip():
            tags.append(item.strip())
    return tags


class ArticleCreate(BaseModel):
    """Schema for creating a new article."""

    title: str = Field(..., min_length=1, examples=["Prototype Pattern"])
    content: str = Field(..., examples=["This article is about the Prototype Pattern..."])
    tags: List[str] = Field(
        default_factory=list,
        examples=[["design pattern", "fastapi", "prototype"]],
    )

    @field_validator("tags", mode="before")
    @classmethod
    def validate_tags(cls, v):
        return parse_tags(v)


class ArticleRead(BaseModel):
    """Schema for reading an article."""

    id: int
    title: str
    content: str
    tags: List[str]
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class ArticleCloneRead(BaseModel):
    """Result of cloning: the source article and its persisted copy.

    The copy is exposed as ``copy`` in JSON; the attribute is named
    ``clone`` because ``copy`` is a ``BaseModel`` method.
    """

    original: ArticleRead
    clone: ArticleRead = Field(..., alias="copy")

    model_config = ConfigDict(populate_by_name=True)
