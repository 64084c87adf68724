# services/site_content/controllers/contact_info_service.py

import logging
from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from shared.db import next_updated_at, store_errors, utcnow
from shared.errors import NotFoundError
from services.site_content.models.contact_info import ContactInfo
from services.site_content.schemas.contact_info import ContactInfoCreate, ContactInfoUpdate

logger = logging.getLogger(__name__)


# --- CREATE CONTACT INFO ---
async def create_contact_info(db: AsyncSession, payload: ContactInfoCreate) -> ContactInfo:
    now = utcnow()
    contact = ContactInfo(
        school_name=payload.school_name,
        address=payload.address,
        phone=payload.phone,
        email=payload.email,
        website=payload.website,
        office_hours=payload.office_hours,
        created_at=now,
        updated_at=now
    )

    db.add(contact)
    async with store_errors(db, "Contact info creation"):
        await db.commit()
        await db.refresh(contact)

    logger.info("Created contact info %s", contact.id)
    return contact


# --- GET CURRENT CONTACT INFO ---
async def get_contact_info(db: AsyncSession) -> Optional[ContactInfo]:
    """
    Return the current contact record, or None when nothing is stored.

    Several rows may exist; the first one inserted is the current one.
    """
    async with store_errors(db, "Fetching contact info"):
        result = await db.execute(
            select(ContactInfo).order_by(ContactInfo.id.asc()).limit(1)
        )
        return result.scalars().first()


# --- GET CONTACT INFO BY ID ---
async def get_contact_info_by_id(db: AsyncSession, contact_id: int) -> ContactInfo:
    async with store_errors(db, "Contact info lookup"):
        result = await db.execute(select(ContactInfo).where(ContactInfo.id == contact_id))
        contact = result.scalars().first()

    if contact is None:
        logger.warning("Contact info %s not found", contact_id)
        raise NotFoundError("Contact info", contact_id)
    return contact


# --- UPDATE CONTACT INFO ---
async def update_contact_info(
    db: AsyncSession,
    contact_id: int,
    payload: ContactInfoUpdate
) -> ContactInfo:
    contact = await get_contact_info_by_id(db, contact_id)

    for field, value in payload.changes().items():
        setattr(contact, field, value)
    contact.updated_at = next_updated_at(contact.updated_at)

    async with store_errors(db, "Contact info update"):
        await db.commit()
        await db.refresh(contact)

    logger.info("Updated contact info %s", contact.id)
    return contact
