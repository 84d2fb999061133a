"""
CRUD operations for Opening model.

Implements the Repository pattern: one OpeningRepository wraps the session
of a single request and is handed to the API layer through dependency
injection, so nothing below the routes reaches for a global connection.
"""

from typing import Any, Dict, List, Optional
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from app.models.opening import Opening
from app.schemas.opening import OpeningRequest

# Columns a client may write. id, created_at and updated_at are store-managed.
MUTABLE_FIELDS = ("role", "company", "location", "remote", "link", "salary")


def opening_values_from_request(request: OpeningRequest) -> Dict[str, Any]:
    """
    Map a validated request onto the persisted columns.

    Only MUTABLE_FIELDS are copied, field by field. Text fields are stripped
    of surrounding whitespace.

    Args:
        request: Validated opening payload

    Returns:
        Column name to value mapping for Opening
    """
    return {
        "role": request.role.strip(),
        "company": request.company.strip(),
        "location": request.location.strip(),
        "remote": request.remote,
        "link": request.link.strip() if request.link is not None else None,
        "salary": request.salary,
    }


class OpeningRepository:
    """Store access for openings bound to one database session."""

    def __init__(self, db: Session):
        self.db = db

    def _commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise

    def create(self, request: OpeningRequest) -> Opening:
        """
        Insert a new opening.

        Args:
            request: Validated opening payload

        Returns:
            Created Opening instance with id
        """
        db_opening = Opening(**opening_values_from_request(request))

        self.db.add(db_opening)
        self._commit()
        self.db.refresh(db_opening)

        return db_opening

    def get_by_id(self, opening_id: int) -> Optional[Opening]:
        """
        Retrieve an opening by its ID.

        Returns:
            Opening instance if found, None otherwise
        """
        return self.db.query(Opening).filter(Opening.id == opening_id).first()

    def list(self) -> List[Opening]:
        """All openings ordered by id."""
        return self.db.query(Opening).order_by(Opening.id).all()

    def update(self, opening: Opening, request: OpeningRequest) -> Opening:
        """
        Overwrite every mutable field of an existing opening.

        Args:
            opening: Row previously loaded through this repository
            request: Validated opening payload

        Returns:
            The refreshed Opening instance
        """
        for field, value in opening_values_from_request(request).items():
            setattr(opening, field, value)

        self._commit()
        self.db.refresh(opening)

        return opening

    def delete(self, opening: Opening) -> None:
        """Hard-delete an opening."""
        self.db.delete(opening)
        self._commit()

    def count(self) -> int:
        return self.db.query(Opening).count()
