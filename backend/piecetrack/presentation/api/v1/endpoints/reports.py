"""Piece report endpoints — paginated preview and PDF export."""

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from piecetrack.application.schemas.report import (
    ReportPageSchema,
    ReportQuery,
    ReportRowSchema,
)
from piecetrack.application.services import ReportService
from piecetrack.config import get_settings
from piecetrack.domain.exceptions import EmptyReportError
from piecetrack.infrastructure.dependencies import get_report_service

router = APIRouter(prefix="/reports", tags=["Reports"])


@router.get("/pieces", response_model=ReportPageSchema)
async def piece_report(
    query: ReportQuery = Depends(),
    page: int = Query(1, description="1-based page number, clamped to the last page"),
    page_size: int | None = Query(None, ge=1),
    service: ReportService = Depends(get_report_service),
) -> ReportPageSchema:
    """Filtered, ordered piece report — one page of rows."""
    settings = get_settings()
    size = min(page_size or settings.default_page_size, settings.max_page_size)

    report = await service.build_report(query.to_filter(), page=page, page_size=size)
    result = report.page
    return ReportPageSchema(
        rows=[ReportRowSchema.model_validate(r, from_attributes=True) for r in result.items],
        page=result.page_number,
        page_size=result.page_size,
        total_pages=result.total_pages,
        total_items=result.total_items,
        first_index=result.first_index,
        last_index=result.last_index,
        filter_summary=report.filter_summary,
        order_by=report.order_by,
        order_desc=report.order_descending,
    )


@router.get(
    "/pieces/pdf",
    response_class=Response,
    responses={200: {"content": {"application/pdf": {}}}},
)
async def export_piece_report(
    query: ReportQuery = Depends(),
    service: ReportService = Depends(get_report_service),
) -> Response:
    """Export every row matching the filter (not just one page) as a PDF."""
    try:
        exported = await service.export_report(query.to_filter())
    except EmptyReportError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))

    return Response(
        content=exported.content,
        media_type=exported.media_type,
        headers={"Content-Disposition": f'attachment; filename="{exported.filename}"'},
    )
