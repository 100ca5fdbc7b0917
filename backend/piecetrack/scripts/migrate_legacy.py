"""One-off migration of the legacy SQLite database into the document store.

Usage:
    python -m piecetrack.scripts.migrate_legacy [--source sqlite:///asignacion.db]

Exits with status 0 on success and 1 when any stage fails.
"""

import argparse
import asyncio
import logging
import sys

from piecetrack.application.services import LegacyMigrationService, MigrationSummary
from piecetrack.config import get_settings
from piecetrack.infrastructure.database import Base, async_session_factory, engine
from piecetrack.infrastructure.database.repositories import SQLAlchemyRecordStore
from piecetrack.infrastructure.legacy.sqlite_legacy_source import SQLiteLegacySource
from piecetrack.infrastructure.logging.log_config import setup_logging

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        description="Copy users, statuses and pieces from the legacy database.",
    )
    parser.add_argument(
        "--source",
        default=settings.legacy_database_url,
        help="SQLAlchemy URL of the legacy database (default: %(default)s)",
    )
    return parser.parse_args(argv)


async def run_migration(source_url: str) -> MigrationSummary:
    """Migrate everything in one transaction on the target store."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    source = SQLiteLegacySource.from_url(source_url)
    try:
        async with async_session_factory() as session:
            service = LegacyMigrationService(source, SQLAlchemyRecordStore(session))
            try:
                summary = await service.migrate()
                await session.commit()
            except Exception:
                await session.rollback()
                raise
    finally:
        await source.close()
        await engine.dispose()
    return summary


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    setup_logging()
    logger.info("Migrating legacy database %s", args.source)
    try:
        summary = asyncio.run(run_migration(args.source))
    except Exception:
        logger.exception("Migration failed")
        return 1
    logger.info(
        "Migration completed: %d users, %d statuses, %d pieces",
        summary.users,
        summary.statuses,
        summary.pieces,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
