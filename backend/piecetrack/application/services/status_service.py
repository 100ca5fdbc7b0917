"""Application service (use case) for Status operations. Statuses are append-only."""

import logging

from piecetrack.application.interfaces import STATUSES, RecordStore
from piecetrack.application.schemas.status import StatusCreate
from piecetrack.application.services.record_codec import status_from_record, status_to_record
from piecetrack.domain.entities import Status
from piecetrack.domain.entities.status import FINALIZED_MARKER, is_finalized_status_name
from piecetrack.domain.exceptions import EntityValidationError

logger = logging.getLogger(__name__)


class StatusService:
    """Lists and creates piece statuses."""

    def __init__(self, store: RecordStore, finalized_marker: str = FINALIZED_MARKER):
        self._store = store
        self._finalized_marker = finalized_marker

    async def list_statuses(self) -> list[Status]:
        rows = await self._store.list_all(STATUSES)
        statuses = [status_from_record(key, record) for key, record in rows]
        return sorted(statuses, key=lambda s: s.name.casefold())

    async def create_status(self, data: StatusCreate) -> Status:
        name = data.name.strip()
        if not name:
            raise EntityValidationError("Status", "name", "name is required")
        status = Status(name=name)
        status.id = await self._store.append(STATUSES, status_to_record(status))
        logger.info("Created status %s (%s)", status.id, status.name)
        return status

    def is_finalized(self, status: Status) -> bool:
        return is_finalized_status_name(status.name, self._finalized_marker)
