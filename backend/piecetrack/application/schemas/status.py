"""Pydantic DTOs for the Status feature."""

from pydantic import BaseModel, Field


class StatusCreate(BaseModel):
    """Schema for creating a new status."""

    name: str = Field(..., min_length=1, max_length=100, examples=["Finalizado"])


class StatusResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    name: str
    is_finalized: bool = False
