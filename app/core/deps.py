"""
FastAPI dependencies shared by the opening endpoints.

These build the per-request store object and pull common parameters out of
the request.
"""

from typing import Optional
from fastapi import Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.exceptions import err_param_is_required
from app.crud.opening import OpeningRepository


def get_opening_repository(db: Session = Depends(get_db)) -> OpeningRepository:
    """
    Construct the store-access object for the current request.

    Tests override get_db (or this dependency directly) to point the
    handlers at a different store.
    """
    return OpeningRepository(db)


def get_opening_id(
    id: Optional[str] = Query(None, description="Opening identifier")
) -> str:
    """
    Extract the required ``id`` query parameter.

    Raises:
        HTTPException 400: If the parameter is absent or empty
    """
    if id is None or not id.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(err_param_is_required("id", "queryParameter"))
        )

    return id.strip()
