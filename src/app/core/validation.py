"""Presence checks for inbound write payloads."""
from typing import Any, Iterable, Mapping

from pydantic import BaseModel

from src.shared.exceptions import RequiredFieldsMissing

CLIENT_REQUIRED_FIELDS = ("name", "birthdate", "phone")
TECHNICAL_SHEET_CREATE_REQUIRED_FIELDS = ("client_id", "datetime", "rimel", "gestante")
# The client ID of an update comes from the path
TECHNICAL_SHEET_UPDATE_REQUIRED_FIELDS = ("datetime", "rimel", "gestante")
APPOINTMENT_REQUIRED_FIELDS = ("client_id", "procedure", "date", "time")


def _is_missing(value: Any) -> bool:
    return value is None or value == ""


def missing_fields(payload: BaseModel | Mapping[str, Any], required: Iterable[str]) -> list[str]:
    """Return the required fields that are absent, null or empty in the payload."""
    if isinstance(payload, BaseModel):
        values = {name: getattr(payload, name, None) for name in required}
    else:
        values = {name: payload.get(name) for name in required}
    return [name for name, value in values.items() if _is_missing(value)]


def require_fields(payload: BaseModel | Mapping[str, Any], required: Iterable[str]) -> None:
    """
    Ensure every required field is present.

    Raises:
        RequiredFieldsMissing: listing the missing fields in declaration order
    """
    missing = missing_fields(payload, required)
    if missing:
        raise RequiredFieldsMissing(missing)
