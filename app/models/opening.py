"""
Opening database model.

A job opening published by a company. Rows are hard-deleted; there is no
tombstone column.
"""

from sqlalchemy import Column, Integer, String, Boolean, DateTime, func
from app.core.database import Base


class Opening(Base):
    """
    A single job opening.

    The id and timestamps are managed by the database; every other column is
    client-controlled and is written through the request mapper only.
    """
    __tablename__ = "openings"

    id = Column(Integer, primary_key=True, index=True)
    role = Column(String, nullable=False, index=True)
    company = Column(String, nullable=False, index=True)
    location = Column(String, nullable=False)
    remote = Column(Boolean, nullable=False)
    link = Column(String, nullable=True)
    salary = Column(Integer, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    def __repr__(self):
        return f"<Opening(id={self.id}, role='{self.role}', company='{self.company}')>"
