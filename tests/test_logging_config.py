from __future__ import annotations

import logging
from pathlib import Path

from article_api.app.core.logging_config import DATE_FORMAT, setup_logging


def test_setup_logging_writes_to_file_in_new_directory(tmp_path: Path):
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_levels = {
        name: logging.getLogger(name).level
        for name in ("", "uvicorn", "uvicorn.access", "uvicorn.error")
    }
    logfile = tmp_path / "logs" / "api.log"
    root.handlers.clear()
    try:
        setup_logging("debug", str(logfile))

        assert root.level == logging.DEBUG
        assert logging.getLogger("uvicorn.access").level == logging.DEBUG
        assert len(root.handlers) == 2
        assert all(h.formatter.datefmt == DATE_FORMAT for h in root.handlers)

        # A second call keeps the existing configuration.
        setup_logging("error")
        assert len(root.handlers) == 2
        assert root.level == logging.DEBUG

        logging.getLogger("article_api.test").info("hello file")
        for handler in root.handlers:
            handler.flush()
        assert "[INFO] article_api.test: hello file" in logfile.read_text(encoding="utf-8")
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers[:] = saved_handlers
        for name, level in saved_levels.items():
            logging.getLogger(name).setLevel(level)


def test_unknown_level_falls_back_to_info():
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level
    root.handlers.clear()
    try:
        setup_logging("chatty")
        assert root.level == logging.INFO
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
        for name in ("uvicorn", "uvicorn.access", "uvicorn.error"):
            logging.getLogger(name).setLevel(logging.NOTSET)
