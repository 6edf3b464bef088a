# app/schemas.py
"""Pydantic v2 schemas for API responses."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, field_serializer
from pydantic.alias_generators import to_camel

from app.timestamps import format_timestamp


class CamelModel(BaseModel):
    """Base schema exposing camelCase field names on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Street(CamelModel):
    number: int | None = None
    name: str | None = None


class Address(CamelModel):
    street: Street
    city: str | None = None
    country: str | None = None


class Picture(CamelModel):
    large: str | None = None
    medium: str | None = None
    thumbnail: str | None = None


class ContactRead(CamelModel):
    """Contact in document form, as returned to clients."""

    id: str
    full_name: str
    email: str
    phone: str | None = None
    cell: str | None = None
    registered_date: datetime
    age: int | None = None
    address: Address
    picture: Picture

    @field_serializer("registered_date")
    def serialize_registered_date(self, value: datetime) -> str:
        """Emit the same ``YYYY-MM-DDTHH:MM:SS.mmmZ`` form that is stored."""
        return format_timestamp(value)


class ContactListResponse(BaseModel):
    """Envelope for the contact list."""

    success: bool = True
    data: list[ContactRead]
    count: int


class ContactResponse(BaseModel):
    """Envelope for a single contact."""

    success: bool = True
    data: ContactRead


class ContactMessageResponse(ContactResponse):
    """Envelope for a written contact plus a status message."""

    message: str


class MessageResponse(BaseModel):
    """Generic message response."""

    success: bool = True
    message: str


class HealthResponse(MessageResponse):
    """Health check payload."""

    timestamp: str


class ErrorResponse(BaseModel):
    """Error body shared by every failure status."""

    error: str
