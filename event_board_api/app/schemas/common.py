"""Schemas shared by every entity."""

from pydantic import BaseModel, Field


class DeleteAllOutput(BaseModel):
    """Result of a bulk delete: how many records were removed."""

    count: int = Field(..., examples=[3])
