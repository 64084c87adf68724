# services/site_content/schemas/news.py

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional

from services.site_content.schemas.base import PartialUpdate, UtcDatetime, UtcTimestamp, reject_null


class NewsArticleCreate(BaseModel):
    title: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)
    summary: Optional[str] = None
    author: str = Field(..., min_length=1)
    published_at: Optional[UtcDatetime] = None   # Defaults to the creation time


class NewsArticleUpdate(PartialUpdate):
    title: Optional[str] = Field(None, min_length=1)
    content: Optional[str] = Field(None, min_length=1)
    summary: Optional[str] = None
    author: Optional[str] = Field(None, min_length=1)
    published_at: Optional[UtcDatetime] = None

    @field_validator("title", "content", "author", "published_at")
    @classmethod
    def not_null(cls, value):
        return reject_null(value)


class NewsArticleOut(BaseModel):
    id: int
    title: str
    content: str
    summary: Optional[str]
    author: str
    published_at: UtcTimestamp
    created_at: UtcTimestamp
    updated_at: UtcTimestamp

    model_config = ConfigDict(from_attributes=True)
