"""Abstract record store interface (port) — keyed JSON documents grouped in collections."""

from abc import ABC, abstractmethod
from typing import Any

USERS = "users"
STATUSES = "statuses"
PIECES = "pieces"

Record = dict[str, Any]


class RecordStore(ABC):
    """Port for document persistence — implemented in the infrastructure layer.

    Records are plain dicts of document fields; the key is never stored
    inside the record. Absence is reported as ``None`` / ``False``, never as
    an exception. Any other failure propagates to the caller untouched.
    """

    @abstractmethod
    async def list_all(self, collection: str) -> list[tuple[str, Record]]:
        """Return every ``(key, record)`` pair of *collection*, ordered by key."""
        ...

    @abstractmethod
    async def get_by_key(self, collection: str, key: str) -> Record | None:
        """Retrieve a single record, or ``None`` when the key is absent."""
        ...

    @abstractmethod
    async def write_by_key(
        self,
        collection: str,
        key: str,
        record: Record,
        *,
        merge: bool = False,
    ) -> None:
        """Store *record* under *key*.

        Replaces the whole document by default; with ``merge=True`` only the
        given fields are updated and the rest of the document is kept.
        """
        ...

    @abstractmethod
    async def append(self, collection: str, record: Record) -> str:
        """Store *record* under a newly generated key and return the key."""
        ...

    @abstractmethod
    async def remove_by_key(self, collection: str, key: str) -> bool:
        """Delete a record. Returns True if deleted, False if not found."""
        ...
