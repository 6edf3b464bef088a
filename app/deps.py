# app/deps.py
"""FastAPI dependencies."""

from typing import Annotated

from fastapi import Depends, HTTPException, Path, status
from sqlalchemy.orm import Session

from app.db import get_session
from app.models import MAX_INTEGER

CONTACT_NOT_FOUND = "Contact not found"

# Database session dependency
DBSession = Annotated[Session, Depends(get_session)]


def contact_id_param(
    contact_id: Annotated[str, Path(description="Contact identifier")],
) -> int:
    """Resolve the path identifier; ids that cannot be stored never match a row."""
    is_number = contact_id.isascii() and contact_id.isdigit()
    if not is_number or int(contact_id) > MAX_INTEGER:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=CONTACT_NOT_FOUND
        )
    return int(contact_id)


ContactId = Annotated[int, Depends(contact_id_param)]
