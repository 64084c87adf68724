# services/site_content/api/event_router.py
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List
from services.site_content.schemas.events import EventCreate, EventUpdate, EventOut
from services.site_content.controllers.event_service import (
    DEFAULT_EVENTS_LIMIT,
    MAX_EVENTS_LIMIT,
    create_event,
    get_event,
    get_upcoming_events,
    update_event
)
from shared.db import get_db

router = APIRouter(prefix="/events", tags=["Events"])

@router.post("/", response_model=EventOut)
async def add_event(payload: EventCreate, db: AsyncSession = Depends(get_db)):
    return await create_event(db, payload)

@router.get("/upcoming", response_model=List[EventOut])
async def upcoming_events(
    limit: int = Query(DEFAULT_EVENTS_LIMIT, gt=0, le=MAX_EVENTS_LIMIT, description="How many events to return"),
    db: AsyncSession = Depends(get_db)
):
    return await get_upcoming_events(db, limit)

@router.get("/{event_id}", response_model=EventOut)
async def read_event(event_id: int, db: AsyncSession = Depends(get_db)):
    return await get_event(db, event_id)

@router.patch("/{event_id}", response_model=EventOut)
async def edit_event(event_id: int, payload: EventUpdate, db: AsyncSession = Depends(get_db)):
    return await update_event(db, event_id, payload)
