# services/site_content/schemas/events.py

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional

from services.site_content.schemas.base import PartialUpdate, UtcDatetime, UtcTimestamp, reject_null


class EventCreate(BaseModel):
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    event_date: UtcDatetime
    event_time: Optional[str] = None   # e.g. "10:00 AM"
    location: Optional[str] = None


class EventUpdate(PartialUpdate):
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = Field(None, min_length=1)
    event_date: Optional[UtcDatetime] = None
    event_time: Optional[str] = None
    location: Optional[str] = None

    @field_validator("title", "description", "event_date")
    @classmethod
    def not_null(cls, value):
        return reject_null(value)


class EventOut(BaseModel):
    id: int
    title: str
    description: str
    event_date: UtcTimestamp
    event_time: Optional[str]
    location: Optional[str]
    created_at: UtcTimestamp
    updated_at: UtcTimestamp

    model_config = ConfigDict(from_attributes=True)
