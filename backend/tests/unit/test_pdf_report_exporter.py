"""Unit tests for the ReportLab PDF exporter."""

from datetime import datetime, timezone

from piecetrack.domain.entities import ReportRow
from piecetrack.infrastructure.export.pdf_report_exporter import ReportLabPieceReportExporter


def _row(code: str, description: str = "Bracket") -> ReportRow:
    at = datetime(2024, 4, 2, 10, 0, tzinfo=timezone.utc)
    return ReportRow(
        code=code,
        description=description,
        user_name="Ana",
        status_name="Finalizado",
        status_finalized=True,
        registered_at=at,
        modified_at=at,
    )


def test_render_produces_pdf_document():
    exporter = ReportLabPieceReportExporter(title="Pieces report")
    content = exporter.render(
        [_row("P-1"), _row("P-2", description="Bolt <M8> & nut")],
        "Status: Finalizado",
        datetime(2024, 6, 30, 18, 0, tzinfo=timezone.utc),
    )
    assert content.startswith(b"%PDF")
    assert content.rstrip().endswith(b"%%EOF")


def test_long_reports_span_several_pages():
    exporter = ReportLabPieceReportExporter()
    rows = [_row(f"P-{n:03d}", description="x " * 40) for n in range(120)]
    content = exporter.render(rows, "", datetime(2024, 6, 30, tzinfo=timezone.utc))
    pages = content.count(b"/Type /Page") - content.count(b"/Type /Pages")
    assert pages > 1
