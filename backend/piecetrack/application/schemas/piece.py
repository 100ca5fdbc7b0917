"""Pydantic DTOs for the Piece feature."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from piecetrack.domain.drive_links import normalize_drive_url
from piecetrack.domain.entities import Piece


class PieceSave(BaseModel):
    """Form data for creating or replacing a piece.

    The code comes from the URL path. Omitted fields are cleared on save.
    """

    description: str = Field("", max_length=2000, examples=["Motor bracket, left side"])
    assigned_user_id: str | None = Field(None, max_length=255)
    status_id: str | None = Field(None, max_length=255)
    image_url: str | None = Field(
        None,
        max_length=2048,
        examples=["https://drive.google.com/file/d/1AbC-dEf_2/view?usp=sharing"],
    )

    @field_validator("assigned_user_id", "status_id", "image_url", mode="before")
    @classmethod
    def _blank_to_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class PieceResponse(BaseModel):
    """Schema returned to the client."""

    code: str
    description: str
    assigned_user_id: str | None
    status_id: str | None
    image_url: str | None
    image_preview_url: str | None
    registered_at: datetime
    modified_at: datetime

    @classmethod
    def from_entity(cls, piece: Piece) -> "PieceResponse":
        return cls(
            code=piece.code,
            description=piece.description,
            assigned_user_id=piece.assigned_user_id,
            status_id=piece.status_id,
            image_url=piece.image_url,
            image_preview_url=normalize_drive_url(piece.image_url),
            registered_at=piece.registered_at,
            modified_at=piece.modified_at,
        )


class PiecePageResponse(BaseModel):
    """One page of the piece listing, most recently modified first."""

    items: list[PieceResponse] = []
    page: int
    page_size: int
    total_pages: int
    total_items: int


class ImagePreviewResponse(BaseModel):
    """Directly renderable form of an image link."""

    url: str | None
    preview_url: str | None
