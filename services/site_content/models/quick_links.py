# services/site_content/models/quick_links.py

from sqlalchemy import Column, Integer, Text, Boolean, DateTime, Index
from shared.db import Base


class QuickLink(Base):
    __tablename__ = "quick_links"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    url = Column(Text, nullable=False)
    display_order = Column(Integer, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)

    __table_args__ = (
        Index("ix_quick_links_active_order", "is_active", "display_order"),
    )
