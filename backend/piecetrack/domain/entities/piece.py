"""Domain entities for inventory pieces and the create/update merge rule."""

from dataclasses import dataclass, field
from datetime import datetime, timezone


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Piece:
    """Core domain entity — an inventory item identified by its user-chosen code.

    ``code`` is the only identity; there is no surrogate id. ``registered_at``
    is fixed at first creation, ``modified_at`` moves on every save.
    """

    code: str
    description: str = ""
    assigned_user_id: str | None = None
    status_id: str | None = None
    image_url: str | None = None
    registered_at: datetime = field(default_factory=_utcnow)
    modified_at: datetime = field(default_factory=_utcnow)


@dataclass
class PieceDraft:
    """Form data submitted for a piece; carries no timestamps."""

    code: str
    description: str = ""
    assigned_user_id: str | None = None
    status_id: str | None = None
    image_url: str | None = None


def upsert_piece(
    existing: Piece | None,
    incoming: PieceDraft,
    now: datetime | None = None,
) -> Piece:
    """Compute the record to persist when *incoming* is saved.

    Mutable fields are replaced wholesale from *incoming*. ``registered_at``
    survives from *existing* when there is one, otherwise it is *now*;
    ``modified_at`` is always *now*.
    """
    now = now or _utcnow()
    return Piece(
        code=incoming.code,
        description=incoming.description,
        assigned_user_id=incoming.assigned_user_id,
        status_id=incoming.status_id,
        image_url=incoming.image_url,
        registered_at=existing.registered_at if existing is not None else now,
        modified_at=now,
    )
