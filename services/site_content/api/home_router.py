# services/site_content/api/home_router.py
from fastapi import APIRouter, Depends
from services.site_content.schemas.home import HomePageData
from services.site_content.controllers.home_service import get_home_page_data
from shared.db import get_session_factory

router = APIRouter(prefix="/home", tags=["Home"])

@router.get("", response_model=HomePageData)
async def home_page_data(session_factory=Depends(get_session_factory)):
    return await get_home_page_data(session_factory)
