"""Filter & sort engine for piece listings and reports.

Pure, synchronous functions over an in-memory list of pieces; nothing here
touches the record store.
"""

from collections.abc import Callable, Iterable
from datetime import date, datetime, timezone
from typing import Any

from .entities.piece import Piece
from .entities.report import OrderField, PieceFilter

# user/status order by the reference id, not by the resolved display name.
_SORT_KEYS: dict[str, Callable[[Piece], Any]] = {
    OrderField.CODE.value: lambda p: p.code or "",
    OrderField.DESCRIPTION.value: lambda p: p.description or "",
    OrderField.USER.value: lambda p: p.assigned_user_id or "",
    OrderField.STATUS.value: lambda p: p.status_id or "",
    OrderField.REGISTERED_AT.value: lambda p: _as_aware(p.registered_at),
    OrderField.MODIFIED_AT.value: lambda p: _as_aware(p.modified_at),
}


def _contains(haystack: str | None, needle: str | None) -> bool:
    if not needle:
        return True
    return needle.casefold() in (haystack or "").casefold()


_EARLIEST = datetime.min.replace(tzinfo=timezone.utc)


def _as_aware(value: datetime | None) -> datetime:
    """Naive values are read as UTC; a missing timestamp sorts first."""
    if value is None:
        return _EARLIEST
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _on_or_after(moment: datetime | None, bound: date | datetime | None) -> bool:
    if bound is None:
        return True
    moment = _as_aware(moment)
    if isinstance(bound, datetime):
        return moment >= _as_aware(bound)
    return moment.date() >= bound


def _on_or_before(moment: datetime | None, bound: date | datetime | None) -> bool:
    if bound is None:
        return True
    moment = _as_aware(moment)
    if isinstance(bound, datetime):
        return moment <= _as_aware(bound)
    return moment.date() <= bound


def matches(piece: Piece, criteria: PieceFilter) -> bool:
    """Return True when *piece* satisfies every predicate set in *criteria*."""
    if not _contains(piece.code, criteria.code_contains):
        return False
    if not _contains(piece.description, criteria.description_contains):
        return False
    if criteria.user_id and piece.assigned_user_id != criteria.user_id:
        return False
    if criteria.status_id and piece.status_id != criteria.status_id:
        return False
    if not _on_or_after(piece.registered_at, criteria.registered_from):
        return False
    if not _on_or_before(piece.registered_at, criteria.registered_to):
        return False
    return True


def filter_pieces(pieces: Iterable[Piece], criteria: PieceFilter) -> list[Piece]:
    """Apply the predicates of *criteria*, keeping input order."""
    return [p for p in pieces if matches(p, criteria)]


def sort_for_listing(pieces: Iterable[Piece]) -> list[Piece]:
    """Fixed order of the default listing view: most recently modified first."""
    return sorted(pieces, key=lambda p: _as_aware(p.modified_at), reverse=True)


def sort_pieces(pieces: Iterable[Piece], order_by: str, descending: bool) -> list[Piece]:
    """Order *pieces* by the key named in *order_by*.

    The sort is stable and applies no secondary key, so pieces with equal
    keys keep their input order. An unknown *order_by* orders by
    ``modified_at`` descending whatever *descending* says.
    """
    key = _SORT_KEYS.get(getattr(order_by, "value", order_by))
    if key is None:
        return sort_for_listing(pieces)
    return sorted(pieces, key=key, reverse=descending)


def filter_and_sort(pieces: Iterable[Piece], criteria: PieceFilter) -> list[Piece]:
    """Reduce *pieces* to those matching *criteria*, ordered as it requests."""
    return sort_pieces(filter_pieces(pieces, criteria), criteria.order_by, criteria.order_descending)
