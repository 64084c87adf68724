import logging
from datetime import datetime, timezone
from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

from shared.config import settings
from shared.errors import ContentError, content_error_handler
from services.site_content.api.home_router import router as home_router
from services.site_content.api.news_router import router as news_router
from services.site_content.api.event_router import router as event_router
from services.site_content.api.quick_link_router import router as quick_link_router
from services.site_content.api.contact_info_router import router as contact_info_router

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=settings.LOG_LEVEL
)

app = FastAPI(title=settings.APP_TITLE)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(ContentError, content_error_handler)

@app.get("/")
@app.get("/healthcheck")
def health_check():
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}


app.include_router(home_router)
app.include_router(news_router)
app.include_router(event_router)
app.include_router(quick_link_router)
app.include_router(contact_info_router)
