"""
Service layer for articles.

``ArticleService`` is the record store for the ``Article`` entity: it
creates, fetches and saves articles in the ``articles`` table and
implements the two demonstration flows, creating the sample article and
cloning an existing one.

Tags are stored as JSON text.  Rows written by older clients as
comma‑separated text are still readable.  All queries use
parameterized statements.
"""

from __future__ import annotations

import json
import logging
import sqlite3
from typing import List, Optional, Tuple

from article_api.app.core.db import get_connection
from article_api.app.core.exceptions import ArticleNotFoundError
from article_api.app.models.article import Article
from article_api.app.schemas.article import ArticleCreate, parse_tags
from article_api.app.services.duplication_service import DuplicationService

logger = logging.getLogger(__name__)

SAMPLE_TITLE = "Prototype Pattern in FastAPI"
SAMPLE_CONTENT = "This article is about the Prototype Pattern..."
SAMPLE_TAGS = ("design pattern", "fastapi", "prototype")

# Range of an SQLite INTEGER primary key.
MIN_ROW_ID = -(2**63)
MAX_ROW_ID = 2**63 - 1


class ArticleService:
    """Service class for storing and cloning articles."""

    @classmethod
    async def create(cls, data: ArticleCreate) -> Article:
        """Insert a new article and return it with its assigned ID."""
        article = Article(title=data.title, content=data.content, tags=list(data.tags))
        return await cls.save(article)

    @classmethod
    async def create_sample(cls) -> Article:
        """Create the fixed sample article.

        Every call inserts a new row; the samples differ only by ID and
        timestamps.
        """
        data = ArticleCreate(title=SAMPLE_TITLE, content=SAMPLE_CONTENT, tags=list(SAMPLE_TAGS))
        return await cls.create(data)

    @classmethod
    async def get(cls, article_id: int) -> Optional[Article]:
        """Retrieve a single article by its ID, or ``None``."""
        if not MIN_ROW_ID <= article_id <= MAX_ROW_ID:
            return None
        conn = get_connection()
        try:
            row = conn.execute(
                "SELECT * FROM articles WHERE id = ?",
                (article_id,),
            ).fetchone()
            if not row:
                return None
            return cls._row_to_article(row)
        finally:
            conn.close()

    @classmethod
    async def find_by_id(cls, article_id: int) -> Article:
        """Retrieve an article by its ID.

        Raises ``ArticleNotFoundError`` if no such article exists.
        """
        article = await cls.get(article_id)
        if article is None:
            logger.warning("Article %s not found", article_id)
            raise ArticleNotFoundError(article_id)
        return article

    @classmethod
    async def list_articles(cls, limit: int = 100, offset: int = 0) -> List[Article]:
        """Return a page of articles ordered by ID."""
        conn = get_connection()
        try:
            rows = conn.execute(
                "SELECT * FROM articles ORDER BY id ASC LIMIT ? OFFSET ?",
                (limit, offset),
            ).fetchall()
            return [cls._row_to_article(row) for row in rows]
        finally:
            conn.close()

    @classmethod
    async def save(cls, article: Article) -> Article:
        """Persist ``article`` and return it.

        A transient article (``id`` is ``None``) is inserted and receives
        its ID and timestamps in place.  A persisted article has its
        title, content and tags updated; its ID never changes.  Raises
        ``ArticleNotFoundError`` if the row of a persisted article no
        longer exists.
        """
        if article.id is not None and not MIN_ROW_ID <= article.id <= MAX_ROW_ID:
            raise ArticleNotFoundError(article.id)
        conn = get_connection()
        try:
            cursor = conn.cursor()
            tags_json = json.dumps(list(article.tags))
            if article.id is None:
                cursor.execute(
                    "INSERT INTO articles (title, content, tags) VALUES (?, ?, ?)",
                    (article.title, article.content, tags_json),
                )
                article_id = cursor.lastrowid
                logger.info("Created article %s", article_id)
            else:
                article_id = article.id
                cursor.execute(
                    """
                    UPDATE articles
                    SET title = ?, content = ?, tags = ?, updated_at = CURRENT_TIMESTAMP
                    WHERE id = ?
                    """,
                    (article.title, article.content, tags_json, article_id),
                )
                if cursor.rowcount == 0:
                    raise ArticleNotFoundError(article_id)
                logger.info("Updated article %s", article_id)
            conn.commit()
            row = cursor.execute(
                "SELECT id, created_at, updated_at FROM articles WHERE id = ?",
                (article_id,),
            ).fetchone()
            article.id = row["id"]
            article.created_at = row["created_at"]
            article.updated_at = row["updated_at"]
            return article
        finally:
            conn.close()

    @classmethod
    async def clone(cls, article_id: int) -> Tuple[Article, Article]:
        """Clone the article with ``article_id``.

        Fetches the source, duplicates it and saves the duplicate as a
        new article.  Returns ``(original, copy)``.  Nothing is written
        if the source does not exist.
        """
        original = await cls.find_by_id(article_id)
        copy = DuplicationService.duplicate(original)
        await cls.save(copy)
        logger.info("Cloned article %s into %s", original.id, copy.id)
        return original, copy

    @staticmethod
    def _decode_tags(raw: Optional[str]) -> List[str]:
        if not raw:
            return []
        try:
            tags = json.loads(raw)
        except json.JSONDecodeError:
            return parse_tags(raw)
        if isinstance(tags, str):
            return parse_tags(tags)
        if not isinstance(tags, list):
            return parse_tags(raw)
        return [str(tag) for tag in tags]

    @classmethod
    def _row_to_article(cls, row: sqlite3.Row) -> Article:
        """Convert a database row to an ``Article``."""
        return Article(
            id=row["id"],
            title=row["title"],
            content=row["content"],
            tags=cls._decode_tags(row["tags"]),
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
