# shared/db.py
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timedelta, timezone

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from shared.config import settings
from shared.errors import StoreError

logger = logging.getLogger(__name__)

engine = create_async_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)
SessionLocal = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
Base = declarative_base()


async def get_db():
    async with SessionLocal() as session:
        yield session


def get_session_factory():
    return SessionLocal


def utcnow() -> datetime:
    # Columns hold naive UTC.
    return datetime.now(timezone.utc).replace(tzinfo=None)


@asynccontextmanager
async def store_errors(db: AsyncSession, action: str):
    """Roll back and re-raise database failures as StoreError."""
    try:
        yield
    except SQLAlchemyError as exc:
        await db.rollback()
        logger.exception("%s failed", action)
        raise StoreError(f"{action} failed") from exc


def next_updated_at(previous: datetime) -> datetime:
    # Must move forward even when the clock has not ticked since the last write.
    return max(utcnow(), previous + timedelta(microseconds=1))
