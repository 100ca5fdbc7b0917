"""
PDF report exporter — renders piece reports with ReportLab.

Layout: title, optional filter line, generation timestamp, then a striped
table (Code | Description | User | Status | Registered) that flows over as
many pages as needed.
"""

import logging
from datetime import datetime
from io import BytesIO
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from piecetrack.application.interfaces import PieceReportExporter
from piecetrack.domain.entities import ReportRow

logger = logging.getLogger(__name__)

_HEADER = ["Code", "Description", "User", "Status", "Registered"]
_COL_WIDTHS = [28 * mm, 62 * mm, 36 * mm, 30 * mm, 24 * mm]

_TITLE_COLOR = colors.HexColor("#581c87")
_HEADER_FILL = colors.HexColor("#8b5cf6")
_STRIPE_FILL = colors.HexColor("#f8fafc")


class ReportLabPieceReportExporter(PieceReportExporter):
    """Renders report rows into an A4 PDF document."""

    media_type = "application/pdf"
    file_extension = "pdf"

    def __init__(self, title: str = "Pieces report"):
        self.title = title
        self.styles = getSampleStyleSheet()
        self._setup_styles()

    def _setup_styles(self):
        """Setup custom paragraph styles."""
        self.styles.add(ParagraphStyle(
            "ReportTitle",
            parent=self.styles["Title"],
            fontSize=18,
            alignment=0,
            spaceAfter=6,
            textColor=_TITLE_COLOR,
        ))
        self.styles.add(ParagraphStyle(
            "ReportMeta",
            parent=self.styles["Normal"],
            fontSize=9,
            textColor=colors.HexColor("#646464"),
            spaceAfter=2,
        ))
        self.styles.add(ParagraphStyle(
            "Cell",
            parent=self.styles["Normal"],
            fontSize=8,
            leading=10,
        ))

    def render(
        self,
        rows: list[ReportRow],
        filter_summary: str,
        generated_at: datetime,
    ) -> bytes:
        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            leftMargin=14 * mm,
            rightMargin=14 * mm,
            topMargin=16 * mm,
            bottomMargin=16 * mm,
            title=self.title,
        )

        story = [Paragraph(escape(self.title), self.styles["ReportTitle"])]
        if filter_summary:
            story.append(
                Paragraph(f"Filters: {escape(filter_summary)}", self.styles["ReportMeta"])
            )
        story.append(
            Paragraph(
                f"Generated: {generated_at.strftime('%Y-%m-%d %H:%M')}",
                self.styles["ReportMeta"],
            )
        )
        story.append(Spacer(1, 6 * mm))
        story.append(self._create_rows_table(rows))

        doc.build(story)
        logger.debug("Rendered PDF report with %d rows", len(rows))

        buffer.seek(0)
        return buffer.getvalue()

    def _cell(self, value: str) -> Paragraph:
        return Paragraph(escape(value or "-"), self.styles["Cell"])

    def _create_rows_table(self, rows: list[ReportRow]) -> Table:
        table_data = [_HEADER]
        for row in rows:
            table_data.append([
                self._cell(row.code),
                self._cell(row.description),
                self._cell(row.user_name),
                self._cell(row.status_name),
                self._cell(row.registered_at.strftime("%Y-%m-%d")),
            ])

        table = Table(table_data, colWidths=_COL_WIDTHS, repeatRows=1)
        table.setStyle(TableStyle([
            ("BACKGROUND", (0, 0), (-1, 0), _HEADER_FILL),
            ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
            ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
            ("FONTSIZE", (0, 0), (-1, 0), 9),
            ("ROWBACKGROUNDS", (0, 1), (-1, -1), [colors.white, _STRIPE_FILL]),
            ("VALIGN", (0, 0), (-1, -1), "TOP"),
            ("TOPPADDING", (0, 0), (-1, -1), 4),
            ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
        ]))
        return table
