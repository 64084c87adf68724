# services/site_content/api/contact_info_router.py
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
from services.site_content.schemas.contact_info import ContactInfoCreate, ContactInfoUpdate, ContactInfoOut
from services.site_content.controllers.contact_info_service import (
    create_contact_info,
    get_contact_info,
    get_contact_info_by_id,
    update_contact_info
)
from shared.db import get_db

router = APIRouter(prefix="/contact-info", tags=["Contact Info"])

@router.post("/", response_model=ContactInfoOut)
async def add_contact_info(payload: ContactInfoCreate, db: AsyncSession = Depends(get_db)):
    return await create_contact_info(db, payload)

# Responds with null rather than a placeholder when nothing is stored
@router.get("/", response_model=Optional[ContactInfoOut])
async def current_contact_info(db: AsyncSession = Depends(get_db)):
    return await get_contact_info(db)

@router.get("/{contact_id}", response_model=ContactInfoOut)
async def read_contact_info(contact_id: int, db: AsyncSession = Depends(get_db)):
    return await get_contact_info_by_id(db, contact_id)

@router.patch("/{contact_id}", response_model=ContactInfoOut)
async def edit_contact_info(contact_id: int, payload: ContactInfoUpdate, db: AsyncSession = Depends(get_db)):
    return await update_contact_info(db, contact_id, payload)
