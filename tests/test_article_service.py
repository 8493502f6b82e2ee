from __future__ import annotations

import asyncio
import json
import sqlite3
from pathlib import Path

import pytest

from article_api.app.core.exceptions import ArticleNotFoundError, NotFoundError
from article_api.app.models.article import Article
from article_api.app.schemas.article import ArticleCreate
from article_api.app.services.article_service import (
    SAMPLE_CONTENT,
    SAMPLE_TAGS,
    SAMPLE_TITLE,
    ArticleService,
)


def count_rows(db_path: Path) -> int:
    conn = sqlite3.connect(db_path)
    try:
        return conn.execute("SELECT COUNT(*) FROM articles").fetchone()[0]
    finally:
        conn.close()


def test_create_assigns_id_and_timestamps(db_path: Path):
    article = asyncio.run(
        ArticleService.create(ArticleCreate(title="Hello", content="World", tags=["a", "b"]))
    )

    assert article.id is not None
    assert article.created_at is not None
    assert article.updated_at is not None

    fetched = asyncio.run(ArticleService.find_by_id(article.id))
    assert fetched == article
    assert fetched.tags == ["a", "b"]


def test_find_by_id_raises_not_found(db_path: Path):
    with pytest.raises(ArticleNotFoundError) as exc_info:
        asyncio.run(ArticleService.find_by_id(42))

    assert isinstance(exc_info.value, NotFoundError)
    assert exc_info.value.object_id == 42
    assert str(exc_info.value) == "Article 42 not found"
    assert asyncio.run(ArticleService.get(42)) is None


def test_save_inserts_transient_then_updates_in_place(db_path: Path):
    article = Article(title="Draft", content="body", tags=["x"])

    saved = asyncio.run(ArticleService.save(article))
    assert saved is article
    article_id = article.id
    assert article_id is not None

    article.title = "Final"
    article.tags = ["x", "y"]
    asyncio.run(ArticleService.save(article))

    assert article.id == article_id
    assert count_rows(db_path) == 1
    stored = asyncio.run(ArticleService.find_by_id(article_id))
    assert stored.title == "Final"
    assert stored.tags == ["x", "y"]


def test_save_of_missing_persisted_article_raises(db_path: Path):
    ghost = Article(id=99, title="t", content="c")
    with pytest.raises(ArticleNotFoundError):
        asyncio.run(ArticleService.save(ghost))
    assert count_rows(db_path) == 0


def test_create_sample_twice_gives_two_rows(db_path: Path):
    first = asyncio.run(ArticleService.create_sample())
    second = asyncio.run(ArticleService.create_sample())

    assert first.id != second.id
    for article in (first, second):
        assert article.title == SAMPLE_TITLE
        assert article.content == SAMPLE_CONTENT
        assert article.tags == list(SAMPLE_TAGS)


def test_clone_persists_a_new_copy(db_path: Path):
    source = asyncio.run(
        ArticleService.create(
            ArticleCreate(title="Prototype Pattern", content="...", tags="design pattern,laravel,prototype")
        )
    )

    original, copy = asyncio.run(ArticleService.clone(source.id))

    assert original.id == source.id
    assert copy.id is not None and copy.id != source.id
    assert copy.title == "Prototype Pattern (Copy)"
    assert copy.content == "..."
    assert copy.tags == ["design pattern", "laravel", "prototype"]
    assert asyncio.run(ArticleService.find_by_id(copy.id)) == copy
    # The source row is untouched.
    assert asyncio.run(ArticleService.find_by_id(source.id)).title == "Prototype Pattern"


def test_clone_missing_writes_nothing(db_path: Path):
    with pytest.raises(ArticleNotFoundError):
        asyncio.run(ArticleService.clone(1))
    assert count_rows(db_path) == 0


def test_list_articles_orders_by_id_and_paginates(db_path: Path):
    for title in ("a", "b", "c"):
        asyncio.run(ArticleService.create(ArticleCreate(title=title, content="")))

    assert [a.title for a in asyncio.run(ArticleService.list_articles())] == ["a", "b", "c"]
    page = asyncio.run(ArticleService.list_articles(limit=1, offset=1))
    assert [a.title for a in page] == ["b"]


def test_reads_legacy_comma_separated_tags(db_path: Path):
    conn = sqlite3.connect(db_path)
    try:
        cur = conn.execute(
            "INSERT INTO articles (title, content, tags) VALUES (?, ?, ?)",
            ("Legacy", "old row", "design pattern,laravel,prototype"),
        )
        conn.commit()
        legacy_id = cur.lastrowid
    finally:
        conn.close()

    article = asyncio.run(ArticleService.find_by_id(legacy_id))
    assert article.tags == ["design pattern", "laravel", "prototype"]


def insert_raw_tags(db_path: Path, raw: str) -> int:
    conn = sqlite3.connect(db_path)
    try:
        cur = conn.execute(
            "INSERT INTO articles (title, content, tags) VALUES (?, ?, ?)",
            ("Raw", "row", raw),
        )
        conn.commit()
        return cur.lastrowid
    finally:
        conn.close()


def test_reads_json_string_tags_without_quotes(db_path: Path):
    article_id = insert_raw_tags(db_path, json.dumps("a, b"))

    article = asyncio.run(ArticleService.find_by_id(article_id))
    assert article.tags == ["a", "b"]


def test_out_of_range_id_is_not_found(db_path: Path):
    huge = 2**63

    assert asyncio.run(ArticleService.get(huge)) is None
    assert asyncio.run(ArticleService.get(-(2**63) - 1)) is None
    with pytest.raises(ArticleNotFoundError):
        asyncio.run(ArticleService.clone(huge))
    with pytest.raises(ArticleNotFoundError):
        asyncio.run(ArticleService.save(Article(id=huge, title="t", content="c")))
    assert count_rows(db_path) == 0
