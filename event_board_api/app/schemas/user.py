"""
Pydantic models for user data.

``UserCreate`` requires every field, ``UserUpdate`` makes every field
optional so that only the supplied values are merged into the stored
record.  ``UserRead`` is the flat representation used wherever a user
is nested inside another object.
"""

from typing import Optional

from pydantic import BaseModel, Field


class UserBase(BaseModel):
    username: str = Field(..., examples=["ann"])
    email: str = Field(..., examples=["a@x.com"])


class UserCreate(UserBase):
    """Schema for creating a user."""
    pass


class UserUpdate(BaseModel):
    """Schema for updating a user.

    All fields are optional; only provided fields will be updated.
    """
    username: Optional[str] = None
    email: Optional[str] = None


class UserRead(UserBase):
    """Schema for reading a user from the API."""

    id: str
