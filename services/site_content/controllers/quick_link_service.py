# services/site_content/controllers/quick_link_service.py

import logging
from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from shared.db import next_updated_at, store_errors, utcnow
from shared.errors import NotFoundError
from services.site_content.models.quick_links import QuickLink
from services.site_content.schemas.quick_links import QuickLinkCreate, QuickLinkUpdate

logger = logging.getLogger(__name__)


# --- CREATE QUICK LINK ---
async def create_quick_link(db: AsyncSession, payload: QuickLinkCreate) -> QuickLink:
    now = utcnow()
    link = QuickLink(
        title=payload.title,
        description=payload.description,
        url=payload.url,
        display_order=payload.display_order,
        is_active=payload.is_active,
        created_at=now,
        updated_at=now
    )

    db.add(link)
    async with store_errors(db, "Quick link creation"):
        await db.commit()
        await db.refresh(link)

    logger.info("Created quick link %s", link.id)
    return link


# --- GET QUICK LINK BY ID ---
async def get_quick_link(db: AsyncSession, link_id: int) -> QuickLink:
    async with store_errors(db, "Quick link lookup"):
        result = await db.execute(select(QuickLink).where(QuickLink.id == link_id))
        link = result.scalars().first()

    if link is None:
        logger.warning("Quick link %s not found", link_id)
        raise NotFoundError("Quick link", link_id)
    return link


# --- GET ACTIVE QUICK LINKS ---
async def get_quick_links(db: AsyncSession) -> List[QuickLink]:
    # Equal display_order keeps insertion order
    async with store_errors(db, "Fetching quick links"):
        result = await db.execute(
            select(QuickLink)
            .where(QuickLink.is_active.is_(True))
            .order_by(QuickLink.display_order.asc(), QuickLink.id.asc())
        )
        return list(result.scalars().all())


# --- UPDATE QUICK LINK ---
async def update_quick_link(db: AsyncSession, link_id: int, payload: QuickLinkUpdate) -> QuickLink:
    link = await get_quick_link(db, link_id)

    for field, value in payload.changes().items():
        setattr(link, field, value)
    link.updated_at = next_updated_at(link.updated_at)

    async with store_errors(db, "Quick link update"):
        await db.commit()
        await db.refresh(link)

    logger.info("Updated quick link %s", link.id)
    return link
