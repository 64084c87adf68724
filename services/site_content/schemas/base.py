# services/site_content/schemas/base.py

from datetime import datetime, timezone
from typing import Annotated, Any, Dict
from pydantic import AfterValidator, AnyUrl, BaseModel, TypeAdapter

_url_adapter = TypeAdapter(AnyUrl)


def _check_url(value: str) -> str:
    # Validate only; the caller's string is stored as given.
    _url_adapter.validate_python(value)
    return value


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _to_naive_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


Url = Annotated[str, AfterValidator(_check_url)]
UtcDatetime = Annotated[datetime, AfterValidator(_to_naive_utc)]

# Outgoing timestamps: stored as naive UTC, sent with an explicit offset
UtcTimestamp = Annotated[datetime, AfterValidator(_as_utc)]


def reject_null(value: Any) -> Any:
    if value is None:
        raise ValueError("field may be omitted but not set to null")
    return value


class PartialUpdate(BaseModel):
    """
    Base for update payloads.

    Every field is in one of three states: left out (unchanged), sent as null
    (cleared) or sent with a value (overwritten). Pydantic tracks which fields
    were sent in ``model_fields_set``; ``changes()`` returns exactly those.
    """

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)
