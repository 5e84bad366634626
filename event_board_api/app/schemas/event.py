"""
Pydantic models for event data.

These schemas define the structure of event data exchanged via the
API.  ``from`` is a reserved word in Python, so the start time lives
in the ``from_`` attribute and is aliased to ``from`` on the wire.
Dates and times are free‑form strings and are stored as given.
"""

from typing import Optional

from pydantic import BaseModel, Field


class EventBase(BaseModel):
    title: str = Field(..., examples=["Yoga Class"])
    desc: str = Field(..., examples=["A relaxing yoga session"])
    date: str = Field(..., examples=["2025-09-01"])
    from_: str = Field(..., alias="from", examples=["10:00"])
    to: str = Field(..., examples=["11:00"])
    location_id: str = Field(..., examples=["Uakgb_J5m9g-0JDMbcJqL"])
    user_id: str = Field(..., examples=["4f90d13a42"])

    model_config = {
        "populate_by_name": True,
    }


class EventCreate(EventBase):
    """Schema for creating an event."""
    pass


class EventUpdate(BaseModel):
    """Schema for updating an event.

    All fields are optional; only provided fields will be updated.
    """
    title: Optional[str] = None
    desc: Optional[str] = None
    date: Optional[str] = None
    from_: Optional[str] = Field(None, alias="from")
    to: Optional[str] = None
    location_id: Optional[str] = None
    user_id: Optional[str] = None

    model_config = {
        "populate_by_name": True,
    }


class EventRead(EventBase):
    """Schema for reading an event from the API."""

    id: str
