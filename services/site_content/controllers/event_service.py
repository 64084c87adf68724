# services/site_content/controllers/event_service.py

import logging
from datetime import datetime
from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from shared.db import next_updated_at, store_errors, utcnow
from shared.errors import NotFoundError, ValidationError
from services.site_content.models.events import Event
from services.site_content.schemas.events import EventCreate, EventUpdate

logger = logging.getLogger(__name__)

DEFAULT_EVENTS_LIMIT = 10
MAX_EVENTS_LIMIT = 100


# --- CREATE EVENT ---
async def create_event(db: AsyncSession, payload: EventCreate) -> Event:
    now = utcnow()
    event = Event(
        title=payload.title,
        description=payload.description,
        event_date=payload.event_date,
        event_time=payload.event_time,
        location=payload.location,
        created_at=now,
        updated_at=now
    )

    db.add(event)
    async with store_errors(db, "Event creation"):
        await db.commit()
        await db.refresh(event)

    logger.info("Created event %s", event.id)
    return event


# --- GET EVENT BY ID ---
async def get_event(db: AsyncSession, event_id: int) -> Event:
    async with store_errors(db, "Event lookup"):
        result = await db.execute(select(Event).where(Event.id == event_id))
        event = result.scalars().first()

    if event is None:
        logger.warning("Event %s not found", event_id)
        raise NotFoundError("Event", event_id)
    return event


# --- GET UPCOMING EVENTS ---
async def get_upcoming_events(
    db: AsyncSession,
    limit: int = DEFAULT_EVENTS_LIMIT,
    now: Optional[datetime] = None
) -> List[Event]:
    """
    Events happening at or after ``now``, soonest first.

    An event dated exactly ``now`` counts as upcoming.
    """
    if limit < 0:
        raise ValidationError("limit must not be negative")
    if limit > MAX_EVENTS_LIMIT:
        raise ValidationError(f"limit must not exceed {MAX_EVENTS_LIMIT}")
    if limit == 0:
        return []
    if now is None:
        now = utcnow()

    async with store_errors(db, "Fetching upcoming events"):
        result = await db.execute(
            select(Event)
            .where(Event.event_date >= now)
            .order_by(Event.event_date.asc(), Event.id.asc())
            .limit(limit)
        )
        return list(result.scalars().all())


# --- UPDATE EVENT ---
async def update_event(db: AsyncSession, event_id: int, payload: EventUpdate) -> Event:
    event = await get_event(db, event_id)

    for field, value in payload.changes().items():
        setattr(event, field, value)
    event.updated_at = next_updated_at(event.updated_at)

    async with store_errors(db, "Event update"):
        await db.commit()
        await db.refresh(event)

    logger.info("Updated event %s", event.id)
    return event
