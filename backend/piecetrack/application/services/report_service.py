"""Report service — filtered, ordered and paginated piece reports plus document export.

Flow:
  1. Full scan of pieces, users and statuses from the record store.
  2. Filter & sort engine reduces the pieces per the report filter.
  3. Rows get user/status names resolved (dangling ids show the placeholder).
  4. Either one page is sliced for display, or the whole ordered set is
     handed to the exporter.
"""

import logging
from collections.abc import Callable
from datetime import date, datetime, timezone

from piecetrack.application.interfaces import PIECES, STATUSES, USERS, PieceReportExporter, RecordStore
from piecetrack.application.services.record_codec import (
    piece_from_record,
    status_from_record,
    user_from_record,
)
from piecetrack.domain.entities import (
    ExportedReport,
    PieceFilter,
    PieceReport,
    ReferenceNames,
    ReportRow,
)
from piecetrack.domain.entities.report import MISSING_REFERENCE
from piecetrack.domain.entities.status import FINALIZED_MARKER, is_finalized_status_name
from piecetrack.domain.exceptions import EmptyReportError
from piecetrack.domain.pagination import paginate
from piecetrack.domain.piece_query import filter_and_sort

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 10


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _format_bound(value: date | datetime) -> str:
    if isinstance(value, datetime):
        return value.strftime("%Y-%m-%d %H:%M")
    return value.isoformat()


class ReportService:
    """Builds piece reports and exports them through the exporter port."""

    def __init__(
        self,
        store: RecordStore,
        exporter: PieceReportExporter | None = None,
        *,
        finalized_marker: str = FINALIZED_MARKER,
        placeholder: str = MISSING_REFERENCE,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._store = store
        self._exporter = exporter
        self._finalized_marker = finalized_marker
        self._placeholder = placeholder
        self._clock = clock

    async def reference_names(self) -> tuple[ReferenceNames, set[str]]:
        """Load the id → name directory and the ids of finalized statuses."""
        users = [user_from_record(k, r) for k, r in await self._store.list_all(USERS)]
        statuses = [status_from_record(k, r) for k, r in await self._store.list_all(STATUSES)]
        names = ReferenceNames(
            users={u.id: u.display_name for u in users},
            statuses={s.id: s.name for s in statuses},
            placeholder=self._placeholder,
        )
        finalized = {
            s.id for s in statuses
            if is_finalized_status_name(s.name, self._finalized_marker)
        }
        return names, finalized

    def describe_filter(self, criteria: PieceFilter, names: ReferenceNames) -> str:
        """Human-readable summary of the active predicates, '' when none are set."""
        parts: list[str] = []
        if criteria.code_contains:
            parts.append(f"Code: {criteria.code_contains}")
        if criteria.description_contains:
            parts.append(f"Description: {criteria.description_contains}")
        if criteria.user_id:
            parts.append(f"User: {names.user_name(criteria.user_id)}")
        if criteria.status_id:
            parts.append(f"Status: {names.status_name(criteria.status_id)}")
        if criteria.registered_from:
            parts.append(f"From: {_format_bound(criteria.registered_from)}")
        if criteria.registered_to:
            parts.append(f"To: {_format_bound(criteria.registered_to)}")
        return " | ".join(parts)

    async def report_rows(self, criteria: PieceFilter) -> tuple[list[ReportRow], str]:
        """The full filtered, ordered row set and its filter summary."""
        rows = await self._store.list_all(PIECES)
        pieces = filter_and_sort(
            (piece_from_record(code, record) for code, record in rows),
            criteria,
        )
        names, finalized = await self.reference_names()
        report_rows = [
            ReportRow.from_piece(p, names, status_finalized=p.status_id in finalized)
            for p in pieces
        ]
        logger.debug("Report matched %d of %d pieces", len(report_rows), len(rows))
        return report_rows, self.describe_filter(criteria, names)

    async def build_report(
        self,
        criteria: PieceFilter,
        page: int = 1,
        page_size: int = DEFAULT_PAGE_SIZE,
    ) -> PieceReport:
        rows, summary = await self.report_rows(criteria)
        return PieceReport(
            page=paginate(rows, page_size, page),
            filter_summary=summary,
            order_by=criteria.order_by,
            order_descending=criteria.order_descending,
        )

    async def export_report(self, criteria: PieceFilter) -> ExportedReport:
        """Render every matching row (not just one page) into a document."""
        if self._exporter is None:
            raise RuntimeError("ReportService was built without an exporter")

        rows, summary = await self.report_rows(criteria)
        if not rows:
            raise EmptyReportError(summary)

        generated_at = self._clock()
        content = self._exporter.render(rows, summary, generated_at)
        filename = (
            f"pieces_report_{generated_at.date().isoformat()}"
            f".{self._exporter.file_extension}"
        )
        logger.info("Exported report %s with %d rows", filename, len(rows))
        return ExportedReport(
            filename=filename,
            content=content,
            media_type=self._exporter.media_type,
            row_count=len(rows),
        )
