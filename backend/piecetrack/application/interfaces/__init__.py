from .record_store import PIECES, STATUSES, USERS, Record, RecordStore
from .report_exporter import PieceReportExporter
from .legacy_source import LegacyRow, LegacySource

__all__ = [
    "PIECES",
    "STATUSES",
    "USERS",
    "Record",
    "RecordStore",
    "PieceReportExporter",
    "LegacyRow",
    "LegacySource",
]
