"""
Domain errors raised above the storage layer.

Only one error kind exists: a lookup by identifier that resolves to no
stored record.  Endpoints translate it into an HTTP 404 response.
"""

from typing import Any


class NotFoundError(LookupError):
    """A record with the requested identifier does not exist."""

    def __init__(self, object_type: str, object_id: Any) -> None:
        self.object_type = object_type
        self.object_id = object_id
        super().__init__(f"{object_type} {object_id} not found")


class ArticleNotFoundError(NotFoundError):
    def __init__(self, article_id: Any) -> None:
        super().__init__("Article", article_id)
