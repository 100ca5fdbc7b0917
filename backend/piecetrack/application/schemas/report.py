"""Pydantic schemas for piece report requests and responses."""

from datetime import date, datetime

from pydantic import BaseModel, Field

from piecetrack.domain.entities import OrderField, PieceFilter


# ── Request Schemas ──────────────────────────────────────────────────


class ReportQuery(BaseModel):
    """Filter and ordering choices for a piece report."""

    code: str | None = Field(None, description="Case-insensitive substring of the code")
    description: str | None = Field(None, description="Case-insensitive substring of the description")
    user_id: str | None = Field(None, description="Exact assigned user id")
    status_id: str | None = Field(None, description="Exact status id")
    registered_from: date | None = Field(None, description="First registration day, inclusive")
    registered_to: date | None = Field(None, description="Last registration day, inclusive")
    order_by: str = Field(
        OrderField.REGISTERED_AT.value,
        description="code, description, user, status, registered_at or modified_at",
    )
    order_desc: bool = True

    def to_filter(self) -> PieceFilter:
        return PieceFilter(
            code_contains=self.code,
            description_contains=self.description,
            user_id=self.user_id,
            status_id=self.status_id,
            registered_from=self.registered_from,
            registered_to=self.registered_to,
            order_by=self.order_by,
            order_descending=self.order_desc,
        )


# ── Response Schemas ─────────────────────────────────────────────────


class ReportRowSchema(BaseModel):
    """A piece with user and status names resolved."""

    code: str
    description: str
    user_name: str
    status_name: str
    status_finalized: bool = False
    registered_at: datetime
    modified_at: datetime
    image_url: str | None = None

    model_config = {"from_attributes": True}


class ReportPageSchema(BaseModel):
    """One page of a piece report."""

    rows: list[ReportRowSchema] = []
    page: int
    page_size: int
    total_pages: int
    total_items: int
    first_index: int
    last_index: int
    filter_summary: str = ""
    order_by: str
    order_desc: bool
