import pytest
from pydantic import ValidationError as SchemaValidationError

from shared.errors import NotFoundError
from services.site_content.controllers.contact_info_service import (
    create_contact_info,
    get_contact_info,
    get_contact_info_by_id,
    update_contact_info,
)
from services.site_content.schemas.contact_info import ContactInfoCreate, ContactInfoUpdate


def _contact(**overrides):
    data = {
        "school_name": "Riverside Elementary",
        "address": "456 Test Street",
        "phone": "(555) 123-4567",
        "email": "office@riverside.example.com",
        "website": "https://riverside.example.com",
        "office_hours": "Mon-Fri: 9-5",
    }
    data.update(overrides)
    return ContactInfoCreate(**data)


async def test_get_contact_info_empty_store_returns_none(db):
    assert await get_contact_info(db) is None


async def test_first_inserted_record_is_current(db):
    first = await create_contact_info(db, _contact())
    await create_contact_info(db, _contact(school_name="Second School"))

    # Updating the first one must not change which record is current
    await update_contact_info(db, first.id, ContactInfoUpdate(phone="(555) 000-0000"))
    current = await get_contact_info(db)

    assert current.id == first.id
    assert current.school_name == "Riverside Elementary"


def test_create_rejects_malformed_email():
    with pytest.raises(SchemaValidationError):
        _contact(email="not-an-email")


def test_create_rejects_malformed_website():
    with pytest.raises(SchemaValidationError):
        _contact(website="riverside")


async def test_update_can_clear_optional_fields(db):
    contact = await create_contact_info(db, _contact())
    created = contact.created_at
    previous = contact.updated_at

    updated = await update_contact_info(
        db, contact.id, ContactInfoUpdate(website=None, office_hours=None)
    )

    assert updated.website is None
    assert updated.office_hours is None
    assert updated.school_name == "Riverside Elementary"
    assert updated.email == "office@riverside.example.com"
    assert updated.created_at == created
    assert updated.updated_at > previous


async def test_update_missing_contact_raises_not_found(db):
    with pytest.raises(NotFoundError) as exc_info:
        await update_contact_info(db, 3, ContactInfoUpdate(phone="123"))

    assert exc_info.value.record_id == 3
    assert "3" in exc_info.value.detail


async def test_get_by_id_missing_raises_not_found(db):
    with pytest.raises(NotFoundError):
        await get_contact_info_by_id(db, 1)


def test_update_rejects_null_email():
    with pytest.raises(SchemaValidationError):
        ContactInfoUpdate(email=None)
