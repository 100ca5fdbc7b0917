"""Mapping between stored documents and domain entities.

Documents hold JSON-compatible values only, so timestamps travel as ISO-8601
strings. Pieces written before ``modified_at`` existed read back with their
registration time as modification time.
"""

from datetime import datetime, timezone
from typing import Any

from piecetrack.application.interfaces import Record
from piecetrack.domain.entities import Piece, Status, User


def parse_timestamp(value: Any) -> datetime | None:
    """Read a stored timestamp; naive values are taken as UTC."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        parsed = value
    else:
        parsed = datetime.fromisoformat(str(value).replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_timestamp(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat()


def _optional(value: Any) -> str | None:
    return value or None


# ── Users ────────────────────────────────────────────────────────────


def user_from_record(key: str, record: Record) -> User:
    return User(
        id=key,
        display_name=record.get("display_name") or "",
        login_name=record.get("login_name") or "",
    )


def user_to_record(user: User) -> Record:
    return {"display_name": user.display_name, "login_name": user.login_name}


# ── Statuses ─────────────────────────────────────────────────────────


def status_from_record(key: str, record: Record) -> Status:
    return Status(id=key, name=record.get("name") or "")


def status_to_record(status: Status) -> Record:
    return {"name": status.name}


# ── Pieces ───────────────────────────────────────────────────────────


def piece_from_record(code: str, record: Record) -> Piece:
    registered_at = parse_timestamp(record.get("registered_at")) or datetime.now(timezone.utc)
    modified_at = parse_timestamp(record.get("modified_at")) or registered_at
    return Piece(
        code=code,
        description=record.get("description") or "",
        assigned_user_id=_optional(record.get("assigned_user_id")),
        status_id=_optional(record.get("status_id")),
        image_url=_optional(record.get("image_url")),
        registered_at=registered_at,
        modified_at=modified_at,
    )


def piece_to_record(piece: Piece) -> Record:
    return {
        "description": piece.description,
        "assigned_user_id": piece.assigned_user_id,
        "status_id": piece.status_id,
        "image_url": piece.image_url,
        "registered_at": format_timestamp(piece.registered_at),
        "modified_at": format_timestamp(piece.modified_at),
    }
