"""Domain entities for piece listings and reports."""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Generic, TypeVar

from .piece import Piece

T = TypeVar("T")

MISSING_REFERENCE = "-"


class OrderField(str, Enum):
    """Keys a report can be ordered by."""

    CODE = "code"
    DESCRIPTION = "description"
    USER = "user"
    STATUS = "status"
    REGISTERED_AT = "registered_at"
    MODIFIED_AT = "modified_at"


@dataclass
class PieceFilter:
    """Optional predicates plus one ordering choice.

    ``order_by`` is kept as a plain string so that an unrecognised value can
    fall back to the default ordering instead of failing.
    """

    code_contains: str | None = None
    description_contains: str | None = None
    user_id: str | None = None
    status_id: str | None = None
    registered_from: date | datetime | None = None
    registered_to: date | datetime | None = None
    order_by: str = OrderField.REGISTERED_AT.value
    order_descending: bool = True


@dataclass
class Page(Generic[T]):
    """One page of an ordered sequence."""

    items: list[T]
    page_number: int
    total_pages: int
    total_items: int
    page_size: int

    @property
    def first_index(self) -> int:
        """1-based position of the first item on the page (0 when empty)."""
        if not self.items:
            return 0
        return (self.page_number - 1) * self.page_size + 1

    @property
    def last_index(self) -> int:
        if not self.items:
            return 0
        return self.first_index + len(self.items) - 1


@dataclass
class ReferenceNames:
    """Lookup from user/status ids to display names.

    Missing and dangling references both resolve to the placeholder.
    """

    users: dict[str, str] = field(default_factory=dict)
    statuses: dict[str, str] = field(default_factory=dict)
    placeholder: str = MISSING_REFERENCE

    def user_name(self, user_id: str | None) -> str:
        if not user_id:
            return self.placeholder
        return self.users.get(user_id) or self.placeholder

    def status_name(self, status_id: str | None) -> str:
        if not status_id:
            return self.placeholder
        return self.statuses.get(status_id) or self.placeholder


@dataclass
class ReportRow:
    """A piece with its references resolved for display."""

    code: str
    description: str
    user_name: str
    status_name: str
    status_finalized: bool
    registered_at: datetime
    modified_at: datetime
    image_url: str | None = None

    @classmethod
    def from_piece(
        cls,
        piece: Piece,
        names: ReferenceNames,
        status_finalized: bool = False,
    ) -> "ReportRow":
        return cls(
            code=piece.code,
            description=piece.description,
            user_name=names.user_name(piece.assigned_user_id),
            status_name=names.status_name(piece.status_id),
            status_finalized=status_finalized,
            registered_at=piece.registered_at,
            modified_at=piece.modified_at,
            image_url=piece.image_url,
        )


@dataclass
class PieceReport:
    """A paginated report plus the human-readable description of its filter."""

    page: Page[ReportRow]
    filter_summary: str
    order_by: str
    order_descending: bool


@dataclass
class ExportedReport:
    """A rendered report document ready to be served."""

    filename: str
    content: bytes
    media_type: str = "application/pdf"
    row_count: int = 0
