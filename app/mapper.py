# app/mapper.py
"""
Conversion between the nested contact document and the flat storage row.

The API exchanges contacts as nested documents (``address.street``,
``picture``) while the ``contacts`` table stores one column per leaf value.
``registeredDate`` arrives either as a temporal value or as text and is
stored as a single canonical ISO-8601 UTC string.
"""

from datetime import date, datetime, time, timezone
from typing import Any

from app.models import MAX_INTEGER, MIN_INTEGER, Contact
from app.schemas import ContactRead
from app.timestamps import format_timestamp, parse_timestamp

INVALID_DATE_FORMAT = (
    "Invalid registeredDate format. Use ISO string format: YYYY-MM-DDTHH:mm:ss.sssZ"
)
UNSUPPORTED_DATE_TYPE = "registeredDate must be a Date object or ISO date string"


class ContactValidationError(ValueError):
    """Raised when a contact document cannot be converted to a row."""


def normalize_registered_date(value: Any) -> str:
    """
    Resolve a registration date to its canonical stored form.

    Accepts ``datetime``/``date`` values and ISO-8601 strings.

    Raises:
        ContactValidationError: If the value is missing, unparseable, out of
            the representable UTC range or of an unsupported type.
    """
    if isinstance(value, datetime):
        timestamp = value
    elif isinstance(value, date):
        timestamp = datetime.combine(value, time(), tzinfo=timezone.utc)
    elif isinstance(value, str):
        try:
            timestamp = parse_timestamp(value.strip())
        except (ValueError, OverflowError) as exc:
            raise ContactValidationError(INVALID_DATE_FORMAT) from exc
    else:
        raise ContactValidationError(UNSUPPORTED_DATE_TYPE)

    try:
        return format_timestamp(timestamp)
    except OverflowError as exc:
        raise ContactValidationError(INVALID_DATE_FORMAT) from exc


def _section(document: dict[str, Any], key: str, label: str) -> dict[str, Any]:
    value = document.get(key)
    if not isinstance(value, dict):
        raise ContactValidationError(f"{label} must be an object")
    return value


def _text(value: Any, label: str) -> str | None:
    if value is None or isinstance(value, str):
        return value
    raise ContactValidationError(f"{label} must be a string")


def _integer(value: Any, label: str) -> int | None:
    if value is None:
        return None

    number = None
    if isinstance(value, bool):
        pass
    elif isinstance(value, int):
        number = value
    elif isinstance(value, float) and value.is_integer():
        number = int(value)
    elif isinstance(value, str):
        try:
            number = int(value.strip())
        except ValueError:
            pass

    if number is None or not MIN_INTEGER <= number <= MAX_INTEGER:
        raise ContactValidationError(f"{label} must be an integer")
    return number


def document_to_row(document: dict[str, Any]) -> dict[str, Any]:
    """
    Flatten a contact document into storage columns.

    Required-field presence is checked by the caller beforehand; this only
    shapes the data and normalizes ``registeredDate``.
    """
    address = _section(document, "address", "address")
    street = _section(address, "street", "address.street")
    picture = _section(document, "picture", "picture")

    return {
        "full_name": _text(document.get("fullName"), "fullName"),
        "email": _text(document.get("email"), "email"),
        "phone": _text(document.get("phone"), "phone"),
        "cell": _text(document.get("cell"), "cell"),
        "registered_date": normalize_registered_date(document.get("registeredDate")),
        "age": _integer(document.get("age"), "age"),
        "street_number": _integer(street.get("number"), "address.street.number"),
        "street_name": _text(street.get("name"), "address.street.name"),
        "city": _text(address.get("city"), "address.city"),
        "country": _text(address.get("country"), "address.country"),
        "picture_large": _text(picture.get("large"), "picture.large"),
        "picture_medium": _text(picture.get("medium"), "picture.medium"),
        "picture_thumbnail": _text(picture.get("thumbnail"), "picture.thumbnail"),
    }


def row_to_document(contact: Contact) -> ContactRead:
    """Rebuild the nested contact document from a stored row."""
    return ContactRead(
        id=str(contact.id),
        full_name=contact.full_name,
        email=contact.email,
        phone=contact.phone,
        cell=contact.cell,
        registered_date=parse_timestamp(contact.registered_date),
        age=contact.age,
        address={
            "street": {
                "number": contact.street_number,
                "name": contact.street_name,
            },
            "city": contact.city,
            "country": contact.country,
        },
        picture={
            "large": contact.picture_large,
            "medium": contact.picture_medium,
            "thumbnail": contact.picture_thumbnail,
        },
    )
