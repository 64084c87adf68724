# services/site_content/controllers/news_service.py

import logging
from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from shared.db import next_updated_at, store_errors, utcnow
from shared.errors import NotFoundError, ValidationError
from services.site_content.models.news import NewsArticle
from services.site_content.schemas.news import NewsArticleCreate, NewsArticleUpdate

logger = logging.getLogger(__name__)

DEFAULT_NEWS_LIMIT = 5
MAX_NEWS_LIMIT = 100


# --- CREATE NEWS ARTICLE ---
async def create_news_article(db: AsyncSession, payload: NewsArticleCreate) -> NewsArticle:
    now = utcnow()
    article = NewsArticle(
        title=payload.title,
        content=payload.content,
        summary=payload.summary,
        author=payload.author,
        published_at=payload.published_at if payload.published_at is not None else now,
        created_at=now,
        updated_at=now
    )

    db.add(article)
    async with store_errors(db, "News article creation"):
        await db.commit()
        await db.refresh(article)

    logger.info("Created news article %s", article.id)
    return article


# --- GET NEWS ARTICLE BY ID ---
async def get_news_article(db: AsyncSession, article_id: int) -> NewsArticle:
    async with store_errors(db, "News article lookup"):
        result = await db.execute(select(NewsArticle).where(NewsArticle.id == article_id))
        article = result.scalars().first()

    if article is None:
        logger.warning("News article %s not found", article_id)
        raise NotFoundError("News article", article_id)
    return article


# --- GET LATEST NEWS ---
async def get_latest_news(db: AsyncSession, limit: int = DEFAULT_NEWS_LIMIT) -> List[NewsArticle]:
    if limit < 0:
        raise ValidationError("limit must not be negative")
    if limit > MAX_NEWS_LIMIT:
        raise ValidationError(f"limit must not exceed {MAX_NEWS_LIMIT}")
    if limit == 0:
        return []

    async with store_errors(db, "Fetching latest news"):
        result = await db.execute(
            select(NewsArticle)
            .order_by(NewsArticle.published_at.desc(), NewsArticle.id.desc())
            .limit(limit)
        )
        return list(result.scalars().all())


# --- UPDATE NEWS ARTICLE ---
async def update_news_article(
    db: AsyncSession,
    article_id: int,
    payload: NewsArticleUpdate
) -> NewsArticle:
    article = await get_news_article(db, article_id)

    for field, value in payload.changes().items():
        setattr(article, field, value)
    article.updated_at = next_updated_at(article.updated_at)

    async with store_errors(db, "News article update"):
        await db.commit()
        await db.refresh(article)

    logger.info("Updated news article %s", article.id)
    return article
