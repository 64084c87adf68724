# services/site_content/schemas/contact_info.py

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from typing import Optional

from services.site_content.schemas.base import PartialUpdate, Url, UtcTimestamp, reject_null


class ContactInfoCreate(BaseModel):
    school_name: str = Field(..., min_length=1)
    address: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)
    email: EmailStr
    website: Optional[Url] = None
    office_hours: Optional[str] = None


class ContactInfoUpdate(PartialUpdate):
    school_name: Optional[str] = Field(None, min_length=1)
    address: Optional[str] = Field(None, min_length=1)
    phone: Optional[str] = Field(None, min_length=1)
    email: Optional[EmailStr] = None
    website: Optional[Url] = None
    office_hours: Optional[str] = None

    @field_validator("school_name", "address", "phone", "email")
    @classmethod
    def not_null(cls, value):
        return reject_null(value)


class ContactInfoOut(BaseModel):
    id: int
    school_name: str
    address: str
    phone: str
    email: str
    website: Optional[str]
    office_hours: Optional[str]
    created_at: UtcTimestamp
    updated_at: UtcTimestamp

    model_config = ConfigDict(from_attributes=True)
