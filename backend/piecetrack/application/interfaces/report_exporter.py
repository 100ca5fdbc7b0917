"""Abstract report exporter interface (port)."""

from abc import ABC, abstractmethod
from datetime import datetime

from piecetrack.domain.entities import ReportRow


class PieceReportExporter(ABC):
    """Port for rendering a piece report document.

    Receives the full filtered, ordered set; print layout and page breaks are
    the exporter's concern.
    """

    media_type: str = "application/pdf"
    file_extension: str = "pdf"

    @abstractmethod
    def render(
        self,
        rows: list[ReportRow],
        filter_summary: str,
        generated_at: datetime,
    ) -> bytes:
        """Render *rows* into a document and return its bytes."""
        ...
