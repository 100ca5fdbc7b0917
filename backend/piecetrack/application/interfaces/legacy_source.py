"""Abstract interface (port) for the legacy relational database."""

from abc import ABC, abstractmethod
from typing import Any

LegacyRow = dict[str, Any]


class LegacySource(ABC):
    """Read-only access to the tables of the legacy assignment database.

    Rows are returned with the legacy column names (``Id``, ``Nombre``,
    ``Codigo``, ...); mapping them onto documents is the migration's job.
    """

    @abstractmethod
    async def fetch_users(self) -> list[LegacyRow]:
        """All rows of the ``Usuarios`` table."""
        ...

    @abstractmethod
    async def fetch_statuses(self) -> list[LegacyRow]:
        """All rows of the ``Estatus`` table."""
        ...

    @abstractmethod
    async def fetch_pieces(self) -> list[LegacyRow]:
        """All rows of the ``Piezas`` table."""
        ...

    async def close(self) -> None:
        """Release any connection held by the source."""
        return None
