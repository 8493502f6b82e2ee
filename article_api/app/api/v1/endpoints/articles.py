"""
Article endpoints for API v1.

Besides plain create, list and retrieve routes this module exposes the
two Prototype pattern demonstrations: ``POST /sample`` stores a fixed
sample article and ``POST /{article_id}/clone`` stores a copy of an
existing article and returns both.
"""

from typing import List

from fastapi import APIRouter, HTTPException, Query, status

from article_api.app.core.exceptions import NotFoundError
from article_api.app.schemas.article import ArticleCloneRead, ArticleCreate, ArticleRead
from article_api.app.services.article_service import ArticleService

router = APIRouter()


@router.post("/", response_model=ArticleRead, status_code=status.HTTP_201_CREATED)
async def create_article(article_in: ArticleCreate) -> ArticleRead:
    """Create a new article."""
    article = await ArticleService.create(article_in)
    return ArticleRead.model_validate(article)


@router.get("/", response_model=List[ArticleRead])
async def list_articles(
    limit: int = Query(100, ge=1, le=1000),
    offset: int = Query(0, ge=0),
) -> List[ArticleRead]:
    """Return a paginated list of articles ordered by ID."""
    articles = await ArticleService.list_articles(limit=limit, offset=offset)
    return [ArticleRead.model_validate(article) for article in articles]


@router.post("/sample", response_model=ArticleRead, status_code=status.HTTP_201_CREATED)
async def create_sample_article() -> ArticleRead:
    """Create the sample article and return it with its new ID."""
    article = await ArticleService.create_sample()
    return ArticleRead.model_validate(article)


@router.get("/{article_id}", response_model=ArticleRead)
async def get_article(article_id: int) -> ArticleRead:
    """Retrieve a single article by ID.

    Returns HTTP 404 if the article is not found.
    """
    try:
        article = await ArticleService.find_by_id(article_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return ArticleRead.model_validate(article)


@router.post(
    "/{article_id}/clone",
    response_model=ArticleCloneRead,
    status_code=status.HTTP_201_CREATED,
)
async def clone_article(article_id: int) -> ArticleCloneRead:
    """Clone an article.

    The copy gets the source title with ``" (Copy)"`` appended, the
    same content and tags, and a new ID.  Returns HTTP 404, without
    creating anything, if the source article does not exist.
    """
    try:
        original, copy = await ArticleService.clone(article_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return ArticleCloneRead(
        original=ArticleRead.model_validate(original),
        clone=ArticleRead.model_validate(copy),
    )
