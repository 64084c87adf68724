# services/site_content/api/news_router.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List
from services.site_content.schemas.news import NewsArticleCreate, NewsArticleUpdate, NewsArticleOut
from services.site_content.controllers.news_service import (
    DEFAULT_NEWS_LIMIT,
    MAX_NEWS_LIMIT,
    create_news_article,
    get_latest_news,
    get_news_article,
    update_news_article
)
from shared.db import get_db

router = APIRouter(prefix="/news", tags=["News"])

@router.post("/", response_model=NewsArticleOut)
async def create_article(payload: NewsArticleCreate, db: AsyncSession = Depends(get_db)):
    return await create_news_article(db, payload)

@router.get("/latest", response_model=List[NewsArticleOut])
async def latest_news(
    limit: int = Query(DEFAULT_NEWS_LIMIT, gt=0, le=MAX_NEWS_LIMIT, description="How many articles to return"),
    db: AsyncSession = Depends(get_db)
):
    return await get_latest_news(db, limit)

@router.get("/{article_id}", response_model=NewsArticleOut)
async def read_article(article_id: int, db: AsyncSession = Depends(get_db)):
    return await get_news_article(db, article_id)

@router.patch("/{article_id}", response_model=NewsArticleOut)
async def update_article(article_id: int, payload: NewsArticleUpdate, db: AsyncSession = Depends(get_db)):
    return await update_news_article(db, article_id, payload)
