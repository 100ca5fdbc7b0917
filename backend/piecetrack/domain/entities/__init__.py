from .user import User
from .status import Status, is_finalized_status_name
from .piece import Piece, PieceDraft, upsert_piece
from .report import (
    ExportedReport,
    OrderField,
    Page,
    PieceFilter,
    PieceReport,
    ReferenceNames,
    ReportRow,
)

__all__ = [
    "User",
    "Status",
    "is_finalized_status_name",
    "Piece",
    "PieceDraft",
    "upsert_piece",
    "ExportedReport",
    "OrderField",
    "Page",
    "PieceFilter",
    "PieceReport",
    "ReferenceNames",
    "ReportRow",
]
