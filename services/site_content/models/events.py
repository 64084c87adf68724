# services/site_content/models/events.py

from sqlalchemy import Column, Integer, Text, DateTime, Index
from shared.db import Base


class Event(Base):
    __tablename__ = "events"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    event_date = Column(DateTime, nullable=False)
    event_time = Column(Text, nullable=True)   # Free text, e.g. "10:00 AM"
    location = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)

    __table_args__ = (
        Index("ix_events_event_date", "event_date"),
    )
