# app/routers/contacts.py
"""Contact CRUD endpoints."""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Body, HTTPException, status

from app import crud
from app.deps import CONTACT_NOT_FOUND, ContactId, DBSession
from app.mapper import ContactValidationError, document_to_row, row_to_document
from app.schemas import (
    ContactListResponse,
    ContactMessageResponse,
    ContactResponse,
    ErrorResponse,
    MessageResponse,
)
from app.validation import ContactIssue, check_contact_payload

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/contacts", tags=["contacts"])

ContactPayload = Annotated[dict[str, Any], Body(description="Contact document")]

ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
    status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
}


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=CONTACT_NOT_FOUND)


def _validate(payload: dict[str, Any], *, echo: bool = False) -> dict[str, Any]:
    """Check required fields and flatten the document, or fail with 400."""
    issue = check_contact_payload(payload)
    if issue is not None:
        logger.warning("Rejected contact payload: %s", issue.value)
        detail: dict[str, Any] = {"error": issue.value}
        if echo and issue is ContactIssue.MISSING_FIELDS:
            detail["received"] = payload
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)

    try:
        return document_to_row(payload)
    except ContactValidationError as exc:
        logger.warning("Invalid contact data: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": "Invalid request data", "details": str(exc)},
        ) from exc


@router.get("", response_model=ContactListResponse, responses=ERROR_RESPONSES)
def list_contacts(session: DBSession) -> ContactListResponse:
    """List all contacts, newest first."""
    contacts = [row_to_document(row) for row in crud.list_contacts(session)]
    return ContactListResponse(data=contacts, count=len(contacts))


@router.get("/{contact_id}", response_model=ContactResponse, responses=ERROR_RESPONSES)
def get_contact(contact_id: ContactId, session: DBSession) -> ContactResponse:
    """Get a single contact by ID."""
    contact = crud.get_contact(session, contact_id)
    if contact is None:
        raise _not_found()
    return ContactResponse(data=row_to_document(contact))


@router.post(
    "",
    response_model=ContactMessageResponse,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
)
def create_contact(payload: ContactPayload, session: DBSession) -> ContactMessageResponse:
    """
    Create a new contact.

    The stored row is read back by its new ID so the response reflects
    exactly what was persisted.
    """
    logger.debug("Received contact payload: %s", payload)
    row = _validate(payload, echo=True)

    contact_id = crud.create_contact(session, row)
    contact = crud.get_contact(session, contact_id)
    logger.info("Created contact %s", contact_id)
    return ContactMessageResponse(
        data=row_to_document(contact),
        message="Contact created successfully",
    )


@router.put(
    "/{contact_id}", response_model=ContactMessageResponse, responses=ERROR_RESPONSES
)
def update_contact(
    contact_id: ContactId, payload: ContactPayload, session: DBSession
) -> ContactMessageResponse:
    """Replace every field of an existing contact."""
    row = _validate(payload)

    if crud.update_contact(session, contact_id, row) == 0:
        raise _not_found()

    contact = crud.get_contact(session, contact_id)
    logger.info("Updated contact %s", contact_id)
    return ContactMessageResponse(
        data=row_to_document(contact),
        message="Contact updated successfully",
    )


@router.delete("/{contact_id}", response_model=MessageResponse, responses=ERROR_RESPONSES)
def delete_contact(contact_id: ContactId, session: DBSession) -> MessageResponse:
    """Delete a contact permanently."""
    if crud.delete_contact(session, contact_id) == 0:
        raise _not_found()

    logger.info("Deleted contact %s", contact_id)
    return MessageResponse(message="Contact deleted successfully")
