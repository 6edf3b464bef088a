# app/crud.py
"""CRUD operations for contacts - pure data access layer."""

from typing import Any

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from app.models import Contact, utcnow


def list_contacts(session: Session) -> list[Contact]:
    """List every contact, most recently created first."""
    stmt = select(Contact).order_by(Contact.created_at.desc(), Contact.id.desc())
    return list(session.execute(stmt).scalars().all())


def get_contact(session: Session, contact_id: int) -> Contact | None:
    """Get a contact by ID."""
    stmt = select(Contact).where(Contact.id == contact_id)
    return session.execute(stmt).scalar_one_or_none()


def create_contact(session: Session, row: dict[str, Any]) -> int:
    """Insert a contact row and return its newly assigned ID."""
    contact = Contact(**row)
    session.add(contact)
    session.flush()
    return contact.id


def update_contact(session: Session, contact_id: int, row: dict[str, Any]) -> int:
    """
    Replace every mapped column of a contact and refresh ``updated_at``.

    Returns:
        Number of rows affected (0 when the contact does not exist)
    """
    stmt = (
        update(Contact)
        .where(Contact.id == contact_id)
        .values(**row, updated_at=utcnow())
        .execution_options(synchronize_session=False)
    )
    result = session.execute(stmt)
    # The UPDATE bypasses the identity map; re-reads must hit the database
    session.expire_all()
    return result.rowcount


def delete_contact(session: Session, contact_id: int) -> int:
    """Hard-delete a contact, returning the number of rows removed."""
    stmt = (
        delete(Contact)
        .where(Contact.id == contact_id)
        .execution_options(synchronize_session=False)
    )
    return session.execute(stmt).rowcount
