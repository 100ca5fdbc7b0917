"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from piecetrack.config import get_settings
from piecetrack.application.interfaces import PieceReportExporter, RecordStore
from piecetrack.application.services import (
    PieceService,
    ReportService,
    StatusService,
    UserService,
)
from piecetrack.infrastructure.database.session import get_db_session
from piecetrack.infrastructure.database.repositories import SQLAlchemyRecordStore
from piecetrack.infrastructure.export.pdf_report_exporter import ReportLabPieceReportExporter


async def get_record_store(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[RecordStore, None]:
    """Provides the document store bound to the request's session."""
    yield SQLAlchemyRecordStore(session)


def get_report_exporter() -> PieceReportExporter:
    """Provides the PDF exporter for piece reports."""
    return ReportLabPieceReportExporter(title=get_settings().report_title)


async def get_user_service(
    store: RecordStore = Depends(get_record_store),
) -> AsyncGenerator[UserService, None]:
    """Provides a UserService instance with its store wired up."""
    yield UserService(store)


async def get_status_service(
    store: RecordStore = Depends(get_record_store),
) -> AsyncGenerator[StatusService, None]:
    """Provides a StatusService using the configured finalized-name marker."""
    yield StatusService(store, finalized_marker=get_settings().finalized_status_marker)


async def get_piece_service(
    store: RecordStore = Depends(get_record_store),
) -> AsyncGenerator[PieceService, None]:
    """Provides a PieceService instance with its store wired up."""
    yield PieceService(store)


async def get_report_service(
    store: RecordStore = Depends(get_record_store),
    exporter: PieceReportExporter = Depends(get_report_exporter),
) -> AsyncGenerator[ReportService, None]:
    """Provides a ReportService with the store and PDF exporter."""
    settings = get_settings()
    yield ReportService(
        store,
        exporter,
        finalized_marker=settings.finalized_status_marker,
        placeholder=settings.missing_reference_placeholder,
    )
