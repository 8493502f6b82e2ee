"""
Top‑level router for version 1 of the API.

Aggregates the domain routers under a unified prefix.  When new
domains are introduced, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import articles

router = APIRouter()

router.include_router(articles.router, prefix="/articles", tags=["articles"])
