"""Application service (use case) for Piece operations."""

import logging
from collections.abc import Callable
from dataclasses import replace
from datetime import datetime, timezone

from piecetrack.application.interfaces import PIECES, RecordStore
from piecetrack.application.services.record_codec import piece_from_record, piece_to_record
from piecetrack.domain.entities import Piece, PieceDraft, PieceFilter, upsert_piece
from piecetrack.domain.exceptions import EntityValidationError
from piecetrack.domain.piece_query import filter_pieces, sort_for_listing

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PieceService:
    """Orchestrates piece listing, lookup and create-or-update.

    The clock is injectable so the timestamp rules can be tested without
    sleeping.
    """

    def __init__(
        self,
        store: RecordStore,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._store = store
        self._clock = clock

    async def all_pieces(self) -> list[Piece]:
        """Full scan of the pieces collection in store order."""
        rows = await self._store.list_all(PIECES)
        return [piece_from_record(code, record) for code, record in rows]

    async def list_pieces(self, criteria: PieceFilter | None = None) -> list[Piece]:
        """Listing view: apply the predicates, most recently modified first.

        Any ordering requested in *criteria* is ignored here.
        """
        pieces = await self.all_pieces()
        if criteria is not None:
            pieces = filter_pieces(pieces, criteria)
        return sort_for_listing(pieces)

    async def find_piece(self, code: str) -> Piece | None:
        """Look a piece up by code. Absence is a normal outcome, not an error."""
        code = code.strip()
        if not code:
            return None
        record = await self._store.get_by_key(PIECES, code)
        if record is None:
            return None
        return piece_from_record(code, record)

    async def save_piece(self, draft: PieceDraft) -> Piece:
        """Create the piece or replace its fields, keeping its registration time.

        Read-then-write with no locking: concurrent saves of the same code
        resolve last-writer-wins in the store.
        """
        code = draft.code.strip()
        if not code:
            raise EntityValidationError("Piece", "code", "piece code is required")

        existing = await self.find_piece(code)
        piece = upsert_piece(existing, replace(draft, code=code), now=self._clock())
        await self._store.write_by_key(PIECES, code, piece_to_record(piece))

        logger.info(
            "%s piece %s (user=%s, status=%s)",
            "Updated" if existing is not None else "Registered",
            code,
            piece.assigned_user_id or "-",
            piece.status_id or "-",
        )
        return piece
