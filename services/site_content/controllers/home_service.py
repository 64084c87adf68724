# services/site_content/controllers/home_service.py

import asyncio
import logging
from datetime import datetime
from typing import Optional

from shared.db import utcnow
from services.site_content.controllers.news_service import get_latest_news
from services.site_content.controllers.event_service import get_upcoming_events
from services.site_content.controllers.quick_link_service import get_quick_links
from services.site_content.controllers.contact_info_service import get_contact_info
from services.site_content.defaults import DEFAULT_CONTACT_INFO, DEFAULT_CONTACT_INFO_ID
from services.site_content.schemas.news import NewsArticleOut
from services.site_content.schemas.events import EventOut
from services.site_content.schemas.quick_links import QuickLinkOut
from services.site_content.schemas.contact_info import ContactInfoOut
from services.site_content.schemas.home import HomePageData

logger = logging.getLogger(__name__)

HOME_NEWS_LIMIT = 5
HOME_EVENTS_LIMIT = 8


async def _read(session_factory, reader, *args):
    # One session per read; a session cannot run queries concurrently.
    async with session_factory() as db:
        return await reader(db, *args)


async def get_home_page_data(session_factory, now: Optional[datetime] = None) -> HomePageData:
    """
    Gather everything the home page shows in one call.

    The four reads run concurrently and all of them are awaited. If any of
    them failed, the first failure is raised and nothing is returned.
    """
    if now is None:
        now = utcnow()

    results = await asyncio.gather(
        _read(session_factory, get_latest_news, HOME_NEWS_LIMIT),
        _read(session_factory, get_upcoming_events, HOME_EVENTS_LIMIT, now),
        _read(session_factory, get_quick_links),
        _read(session_factory, get_contact_info),
        return_exceptions=True,
    )
    for outcome in results:
        if isinstance(outcome, BaseException):
            logger.error("Home page data could not be loaded: %r", outcome)
            raise outcome

    latest_news, upcoming_events, quick_links, contact_info = results

    if contact_info is None:
        contact_out = ContactInfoOut(
            id=DEFAULT_CONTACT_INFO_ID,
            created_at=now,
            updated_at=now,
            **DEFAULT_CONTACT_INFO
        )
    else:
        contact_out = ContactInfoOut.model_validate(contact_info)

    return HomePageData(
        latest_news=[NewsArticleOut.model_validate(article) for article in latest_news],
        upcoming_events=[EventOut.model_validate(event) for event in upcoming_events],
        quick_links=[QuickLinkOut.model_validate(link) for link in quick_links],
        contact_info=contact_out
    )
