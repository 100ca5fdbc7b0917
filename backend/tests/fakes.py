"""In-memory fakes shared by unit and API tests."""

import copy
from datetime import datetime, timedelta, timezone

from piecetrack.application.interfaces import LegacySource, PieceReportExporter, RecordStore
from piecetrack.domain.entities import ReportRow


class InMemoryRecordStore(RecordStore):
    """In-memory fake record store keyed by (collection, key)."""

    def __init__(self):
        self._collections: dict[str, dict[str, dict]] = {}
        self._next_id = 1
        self.writes: list[tuple[str, str, dict, bool]] = []

    def seed(self, collection: str, key: str, record: dict) -> None:
        self._collections.setdefault(collection, {})[key] = copy.deepcopy(record)

    def raw(self, collection: str, key: str) -> dict | None:
        return self._collections.get(collection, {}).get(key)

    async def list_all(self, collection: str) -> list[tuple[str, dict]]:
        docs = self._collections.get(collection, {})
        return [(key, copy.deepcopy(docs[key])) for key in sorted(docs)]

    async def get_by_key(self, collection: str, key: str) -> dict | None:
        record = self.raw(collection, key)
        return copy.deepcopy(record) if record is not None else None

    async def write_by_key(self, collection, key, record, *, merge=False) -> None:
        docs = self._collections.setdefault(collection, {})
        self.writes.append((collection, key, copy.deepcopy(record), merge))
        if merge and key in docs:
            docs[key] = {**docs[key], **copy.deepcopy(record)}
        else:
            docs[key] = copy.deepcopy(record)

    async def append(self, collection: str, record: dict) -> str:
        key = f"{collection}-{self._next_id}"
        self._next_id += 1
        self._collections.setdefault(collection, {})[key] = copy.deepcopy(record)
        return key

    async def remove_by_key(self, collection: str, key: str) -> bool:
        docs = self._collections.get(collection, {})
        if key in docs:
            del docs[key]
            return True
        return False


class FailingRecordStore(InMemoryRecordStore):
    """Store whose reads succeed but whose writes blow up, like a dropped connection."""

    async def write_by_key(self, collection, key, record, *, merge=False) -> None:
        raise ConnectionError("record store unavailable")


class FakeReportExporter(PieceReportExporter):
    """Captures what it was asked to render."""

    media_type = "application/pdf"
    file_extension = "pdf"

    def __init__(self):
        self.calls: list[tuple[list[ReportRow], str, datetime]] = []

    def render(self, rows, filter_summary, generated_at) -> bytes:
        self.calls.append((list(rows), filter_summary, generated_at))
        return b"%PDF-fake " + ",".join(r.code for r in rows).encode()


class FakeLegacySource(LegacySource):
    """Legacy tables as lists of row dicts."""

    def __init__(self, users=None, statuses=None, pieces=None):
        self._users = users or []
        self._statuses = statuses or []
        self._pieces = pieces or []
        self.closed = False

    async def fetch_users(self):
        return list(self._users)

    async def fetch_statuses(self):
        return list(self._statuses)

    async def fetch_pieces(self):
        return list(self._pieces)

    async def close(self):
        self.closed = True


class StepClock:
    """Clock returning a strictly increasing instant on every call."""

    def __init__(self, start: datetime | None = None, step_seconds: int = 60):
        self._current = start or datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)
        self._step = step_seconds

    def __call__(self) -> datetime:
        value = self._current
        self._current = self._current + timedelta(seconds=self._step)
        return value
