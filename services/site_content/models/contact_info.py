# services/site_content/models/contact_info.py

from sqlalchemy import Column, Integer, Text, DateTime
from shared.db import Base


# No uniqueness is enforced; readers treat the lowest id as the current record.
class ContactInfo(Base):
    __tablename__ = "contact_info"

    id = Column(Integer, primary_key=True, autoincrement=True)
    school_name = Column(Text, nullable=False)
    address = Column(Text, nullable=False)
    phone = Column(Text, nullable=False)
    email = Column(Text, nullable=False)
    website = Column(Text, nullable=True)
    office_hours = Column(Text, nullable=True)
    created_at = Column(DateTime, nullable=False)
    updated_at = Column(DateTime, nullable=False)
