# services/site_content/api/quick_link_router.py
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from typing import List
from services.site_content.schemas.quick_links import QuickLinkCreate, QuickLinkUpdate, QuickLinkOut
from services.site_content.controllers.quick_link_service import (
    create_quick_link,
    get_quick_link,
    get_quick_links,
    update_quick_link
)
from shared.db import get_db

router = APIRouter(prefix="/quick-links", tags=["Quick Links"])

@router.post("/", response_model=QuickLinkOut)
async def add_quick_link(payload: QuickLinkCreate, db: AsyncSession = Depends(get_db)):
    return await create_quick_link(db, payload)

@router.get("/", response_model=List[QuickLinkOut])
async def active_quick_links(db: AsyncSession = Depends(get_db)):
    return await get_quick_links(db)

@router.get("/{link_id}", response_model=QuickLinkOut)
async def read_quick_link(link_id: int, db: AsyncSession = Depends(get_db)):
    return await get_quick_link(db, link_id)

@router.patch("/{link_id}", response_model=QuickLinkOut)
async def edit_quick_link(link_id: int, payload: QuickLinkUpdate, db: AsyncSession = Depends(get_db)):
    return await update_quick_link(db, link_id, payload)
