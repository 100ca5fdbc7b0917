"""Pydantic DTOs (Data Transfer Objects) for the User feature."""

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    """Schema for creating a new user."""

    display_name: str = Field(..., min_length=1, max_length=255, examples=["Ana López"])
    login_name: str = Field("", max_length=255, examples=["alopez"])


class UserUpdate(BaseModel):
    """Schema for updating an existing user — all fields optional."""

    display_name: str | None = Field(None, min_length=1, max_length=255)
    login_name: str | None = Field(None, max_length=255)


class UserResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    display_name: str
    login_name: str

    model_config = {"from_attributes": True}
