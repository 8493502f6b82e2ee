"""
Article entity and the Prototype capability.

``Prototype`` is the interface for objects that can produce a fresh,
unsaved copy of themselves.  ``Article`` implements it: a duplicate
keeps the content and tags of its source, gets a derived title and has
no identity until the store saves it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional

COPY_SUFFIX = " (Copy)"


class Prototype(ABC):
    """Interface for entities that can be duplicated."""

    @abstractmethod
    def duplicate(self) -> "Prototype":
        """Return a new, unsaved instance copied from this one."""


@dataclass
class Article(Prototype):
    """An article record.

    ``id``, ``created_at`` and ``updated_at`` are assigned by the
    store; they are ``None`` while the article is transient.
    """

    title: str
    content: str
    tags: List[str] = field(default_factory=list)
    id: Optional[int] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    def duplicate(self) -> "Article":
        return Article(
            title=self.title + COPY_SUFFIX,
            content=self.content,
            tags=list(self.tags),
        )
