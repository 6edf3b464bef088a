# app/models.py
"""SQLAlchemy 2.0 ORM models."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

# Range of a signed 64-bit SQL INTEGER
MIN_INTEGER = -(2**63)
MAX_INTEGER = 2**63 - 1


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Declarative base for all ORM models."""

    pass


class Contact(Base):
    """
    Flat storage row for a contact.

    The nested ``address`` and ``picture`` objects of the API document are
    expanded into individual columns. ``created_at`` and ``updated_at`` are
    managed by the service and never supplied by clients.
    """

    __tablename__ = "contacts"
    # Never reuse ids of deleted rows
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    full_name: Mapped[str] = mapped_column("fullName", Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    phone: Mapped[str | None] = mapped_column(Text, nullable=True)
    cell: Mapped[str | None] = mapped_column(Text, nullable=True)
    registered_date: Mapped[str] = mapped_column(
        "registeredDate", String(32), nullable=False
    )
    age: Mapped[int | None] = mapped_column(Integer, nullable=True)

    street_number: Mapped[int | None] = mapped_column(Integer, nullable=True)
    street_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    city: Mapped[str | None] = mapped_column(Text, nullable=True)
    country: Mapped[str | None] = mapped_column(Text, nullable=True)

    picture_large: Mapped[str | None] = mapped_column(Text, nullable=True)
    picture_medium: Mapped[str | None] = mapped_column(Text, nullable=True)
    picture_thumbnail: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False, index=True
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )

    def __repr__(self) -> str:
        """Return string representation of Contact."""
        return f"<Contact(id={self.id}, email='{self.email}')>"
