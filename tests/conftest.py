"""Pytest configuration and shared fixtures."""
from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from article_api.app.core.config import settings
from article_api.app.core.db import init_db
from article_api.app.main import create_app


@pytest.fixture(scope="function")
def db_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the store at a fresh SQLite file with the schema applied."""
    path = tmp_path / "articles.db"
    monkeypatch.setattr(settings, "database_url", str(path))
    init_db()
    return path


@pytest.fixture(scope="function")
def client(db_path: Path):
    """TestClient for a freshly created app backed by ``db_path``."""
    with TestClient(create_app()) as c:
        yield c
