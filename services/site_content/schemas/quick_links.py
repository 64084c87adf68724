# services/site_content/schemas/quick_links.py

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional

from services.site_content.schemas.base import PartialUpdate, Url, UtcTimestamp, reject_null


class QuickLinkCreate(BaseModel):
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    url: Url
    display_order: int = Field(0, ge=0)
    is_active: bool = True


class QuickLinkUpdate(PartialUpdate):
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    url: Optional[Url] = None
    display_order: Optional[int] = Field(None, ge=0)
    is_active: Optional[bool] = None

    @field_validator("title", "url", "display_order", "is_active")
    @classmethod
    def not_null(cls, value):
        return reject_null(value)


class QuickLinkOut(BaseModel):
    id: int
    title: str
    description: Optional[str]
    url: str
    display_order: int
    is_active: bool
    created_at: UtcTimestamp
    updated_at: UtcTimestamp

    model_config = ConfigDict(from_attributes=True)
