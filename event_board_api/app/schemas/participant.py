"""Pydantic models linking a user to an event."""

from typing import Optional

from pydantic import BaseModel, Field


class ParticipantBase(BaseModel):
    user_id: str = Field(..., examples=["4f90d13a42"])
    event_id: str = Field(..., examples=["V1StGXR8_Z5jdHi6B-myT"])


class ParticipantCreate(ParticipantBase):
    pass


class ParticipantUpdate(BaseModel):
    user_id: Optional[str] = None
    event_id: Optional[str] = None


class ParticipantRead(ParticipantBase):
    id: str
