"""
Top‑level package for the Article API.

This file makes ``article_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``article_api.app.main``.  Without this marker file, import
resolution for ``article_api`` would fail when running tests outside
of the package root.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
