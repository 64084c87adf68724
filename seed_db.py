# seed_db.py
import asyncio
from shared.db import SessionLocal
from services.site_content.controllers.contact_info_service import create_contact_info, get_contact_info
from services.site_content.defaults import DEFAULT_CONTACT_INFO
from services.site_content.schemas.contact_info import ContactInfoCreate

async def seed_contact_info():
    async with SessionLocal() as db:
        if await get_contact_info(db) is not None:
            print("ℹ️ Contact info already present, nothing to do.")
            return
        contact = await create_contact_info(db, ContactInfoCreate(**DEFAULT_CONTACT_INFO))
        print(f"✅ Contact info created with id {contact.id}.")

if __name__ == "__main__":
    asyncio.run(seed_contact_info())
