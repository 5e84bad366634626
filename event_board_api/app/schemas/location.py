"""
Pydantic models for location data.

Coordinates are plain floats; no range checking is performed.
"""

from typing import Optional

from pydantic import BaseModel, Field


class LocationBase(BaseModel):
    name: str = Field(..., examples=["HQ"])
    desc: str = Field(..., examples=["Main office, 3rd floor"])
    lat: float = Field(..., examples=[52.52])
    lng: float = Field(..., examples=[13.405])
    event_id: str = Field(..., examples=["V1StGXR8_Z5jdHi6B-myT"])


class LocationCreate(LocationBase):
    """Schema for creating a location."""
    pass


class LocationUpdate(BaseModel):
    """Schema for updating a location.

    All fields are optional; only provided fields will be updated.
    """
    name: Optional[str] = None
    desc: Optional[str] = None
    lat: Optional[float] = None
    lng: Optional[float] = None
    event_id: Optional[str] = None


class LocationRead(LocationBase):
    """Schema for reading a location from the API."""

    id: str
