"""Legacy migration service — copies the old relational database into the record store.

Order: users → statuses → pieces, so references written by the pieces
stage already exist. Legacy keys are kept (``Id`` for users and statuses,
``Codigo`` for pieces). Re-running overwrites the same documents.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from piecetrack.application.interfaces import (
    PIECES,
    STATUSES,
    USERS,
    LegacyRow,
    LegacySource,
    RecordStore,
)
from piecetrack.application.services.record_codec import (
    parse_timestamp,
    piece_to_record,
    status_to_record,
    user_to_record,
)
from piecetrack.domain.entities import Piece, Status, User
from piecetrack.infrastructure.logging.colored_logger import PipelineLogger, PipelineStage

logger = logging.getLogger(__name__)
plog = PipelineLogger("LegacyMigrationService")


@dataclass
class MigrationSummary:
    """Number of documents written per collection."""

    users: int = 0
    statuses: int = 0
    pieces: int = 0


def _text(row: LegacyRow, column: str) -> str:
    value = row.get(column)
    return "" if value is None else str(value)


def _reference(row: LegacyRow, column: str) -> str | None:
    value = row.get(column)
    if value is None or value == "":
        return None
    return str(value)


class LegacyMigrationService:
    """Reads every legacy table and writes the matching documents."""

    def __init__(self, source: LegacySource, store: RecordStore):
        self._source = source
        self._store = store

    async def migrate(self) -> MigrationSummary:
        summary = MigrationSummary()
        plog.separator("legacy migration")

        with plog.timed_step(PipelineStage.MIGRATION, "Migrating legacy database"):
            with plog.timed_step(PipelineStage.USERS, "Copying users"):
                summary.users = await self._migrate_users()
            with plog.timed_step(PipelineStage.STATUSES, "Copying statuses"):
                summary.statuses = await self._migrate_statuses()
            with plog.timed_step(PipelineStage.PIECES, "Copying pieces"):
                summary.pieces = await self._migrate_pieces()

        plog.stats(users=summary.users, statuses=summary.statuses, pieces=summary.pieces)
        plog.step_complete(PipelineStage.COMPLETE, "Legacy data copied")
        return summary

    async def _migrate_users(self) -> int:
        rows = await self._source.fetch_users()
        plog.detail(f"Found {len(rows)} users")
        for row in rows:
            user = User(
                id=_text(row, "Id"),
                display_name=_text(row, "Nombre"),
                login_name=_text(row, "Username"),
            )
            await self._store.write_by_key(USERS, user.id, user_to_record(user))
        return len(rows)

    async def _migrate_statuses(self) -> int:
        rows = await self._source.fetch_statuses()
        plog.detail(f"Found {len(rows)} statuses")
        for row in rows:
            status = Status(id=_text(row, "Id"), name=_text(row, "Nombre"))
            await self._store.write_by_key(STATUSES, status.id, status_to_record(status))
        return len(rows)

    async def _migrate_pieces(self) -> int:
        rows = await self._source.fetch_pieces()
        plog.detail(f"Found {len(rows)} pieces")
        written = 0
        for row in rows:
            code = _text(row, "Codigo").strip()
            if not code:
                logger.warning("Skipping legacy piece without code: %r", row)
                continue
            registered_at = parse_timestamp(row.get("FechaRegistro")) or datetime.now(timezone.utc)
            piece = Piece(
                code=code,
                description=_text(row, "Descripcion"),
                assigned_user_id=_reference(row, "UsuarioId"),
                status_id=_reference(row, "EstatusId"),
                image_url=_reference(row, "FotoPath"),
                registered_at=registered_at,
                modified_at=registered_at,
            )
            await self._store.write_by_key(PIECES, code, piece_to_record(piece))
            written += 1
        return written
