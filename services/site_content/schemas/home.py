# services/site_content/schemas/home.py

from pydantic import BaseModel, ConfigDict, Field
from typing import List

from services.site_content.schemas.news import NewsArticleOut
from services.site_content.schemas.events import EventOut
from services.site_content.schemas.quick_links import QuickLinkOut
from services.site_content.schemas.contact_info import ContactInfoOut


class HomePageData(BaseModel):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    latest_news: List[NewsArticleOut] = Field(..., alias="latestNews")
    upcoming_events: List[EventOut] = Field(..., alias="upcomingEvents")
    quick_links: List[QuickLinkOut] = Field(..., alias="quickLinks")
    contact_info: ContactInfoOut = Field(..., alias="contactInfo")
