from .user_service import UserService
from .status_service import StatusService
from .piece_service import PieceService
from .report_service import ReportService
from .legacy_migration_service import LegacyMigrationService, MigrationSummary

__all__ = [
    "UserService",
    "StatusService",
    "PieceService",
    "ReportService",
    "LegacyMigrationService",
    "MigrationSummary",
]
