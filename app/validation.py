# app/validation.py
"""Required-field checks for incoming contact documents."""

from enum import Enum
from typing import Any


class ContactIssue(str, Enum):
    """First rule a contact document breaks, with its client-facing message."""

    MISSING_FIELDS = "Missing required fields: fullName, email, address, picture"
    INVALID_ADDRESS = (
        "Invalid address structure. Required: address.street.number and address.street.name"
    )
    INVALID_PICTURE = (
        "Invalid picture structure. Required: picture.large, picture.medium, picture.thumbnail"
    )
    MISSING_REGISTERED_DATE = "registeredDate is required"


def _missing(value: Any) -> bool:
    return value is None or value == "" or value == {}


def check_contact_payload(payload: dict[str, Any]) -> ContactIssue | None:
    """
    Check a contact document for required fields.

    Rules are evaluated in order and the first failure wins:

    1. ``fullName``, ``email``, ``address`` and ``picture`` are present.
    2. ``address.street.number`` and ``address.street.name`` are present.
    3. ``picture.large``, ``picture.medium`` and ``picture.thumbnail`` are present.
    4. ``registeredDate`` is present.

    Returns:
        The failing rule, or None when the document passes every rule
    """
    if any(
        _missing(payload.get(field))
        for field in ("fullName", "email", "address", "picture")
    ):
        return ContactIssue.MISSING_FIELDS

    address = payload["address"]
    street = address.get("street") if isinstance(address, dict) else None
    if not isinstance(street, dict) or any(
        _missing(street.get(field)) for field in ("number", "name")
    ):
        return ContactIssue.INVALID_ADDRESS

    picture = payload["picture"]
    if not isinstance(picture, dict) or any(
        _missing(picture.get(field)) for field in ("large", "medium", "thumbnail")
    ):
        return ContactIssue.INVALID_PICTURE

    if _missing(payload.get("registeredDate")):
        return ContactIssue.MISSING_REGISTERED_DATE

    return None
