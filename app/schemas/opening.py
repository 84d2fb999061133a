"""
Pydantic schemas for Opening API requests/responses.
"""

from datetime import datetime
from typing import Generic, List, Optional, TypeVar
from pydantic import BaseModel, Field, StrictBool


class OpeningRequest(BaseModel):
    """
    Body of create and update requests.

    Every field is optional at the decoding boundary so that a missing key
    stays distinguishable from an explicit value (notably remote=false).
    Required-ness is enforced by the validator, not by pydantic. Unknown keys,
    including a client-supplied id, are dropped.
    """
    role: Optional[str] = Field(None, description="Job title, e.g. 'Backend Engineer'")
    company: Optional[str] = Field(None, description="Hiring company")
    location: Optional[str] = Field(None, description="City, region or 'Remote'")
    remote: Optional[StrictBool] = Field(None, description="Whether the role can be worked remotely")
    link: Optional[str] = Field(None, description="http(s) URL of the posting")
    salary: Optional[int] = Field(None, description="Yearly salary, non-negative")

    class Config:
        extra = "ignore"

    def is_empty(self) -> bool:
        """True when no field carries a usable value."""
        return all(
            value is None or (isinstance(value, str) and not value.strip())
            for value in (self.role, self.company, self.location, self.remote, self.link, self.salary)
        )


class OpeningResponse(BaseModel):
    """Schema for a persisted opening"""
    id: int
    role: str
    company: str
    location: str
    remote: bool
    link: Optional[str] = None
    salary: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True  # Allows conversion from SQLAlchemy models


DataT = TypeVar("DataT")


class SuccessEnvelope(BaseModel, Generic[DataT]):
    """Wrapper for every successful response"""
    message: str
    data: DataT


class ErrorEnvelope(BaseModel):
    """Wrapper for every error response"""
    message: str
    status: int


OpeningEnvelope = SuccessEnvelope[OpeningResponse]
OpeningListEnvelope = SuccessEnvelope[List[OpeningResponse]]
