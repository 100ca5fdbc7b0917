"""LegacySource implementation for the old SQLite assignment database."""

import logging

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine

from piecetrack.application.interfaces import LegacyRow, LegacySource
from piecetrack.infrastructure.database.session import build_engine

logger = logging.getLogger(__name__)


class SQLiteLegacySource(LegacySource):
    """Reads the ``Usuarios``, ``Estatus`` and ``Piezas`` tables with plain SQL.

    Only SELECTs are issued; the legacy file is never modified.
    """

    def __init__(self, engine: AsyncEngine):
        self._engine = engine

    @classmethod
    def from_url(cls, url: str) -> "SQLiteLegacySource":
        return cls(build_engine(url))

    async def _fetch(self, table: str) -> list[LegacyRow]:
        async with self._engine.connect() as conn:
            result = await conn.execute(text(f'SELECT * FROM "{table}"'))
            rows = [dict(row) for row in result.mappings().all()]
        logger.debug("Read %d rows from legacy table %s", len(rows), table)
        return rows

    async def fetch_users(self) -> list[LegacyRow]:
        return await self._fetch("Usuarios")

    async def fetch_statuses(self) -> list[LegacyRow]:
        return await self._fetch("Estatus")

    async def fetch_pieces(self) -> list[LegacyRow]:
        return await self._fetch("Piezas")

    async def close(self) -> None:
        await self._engine.dispose()
