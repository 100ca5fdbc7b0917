"""Concrete RecordStore implementation backed by SQLAlchemy."""

import copy
from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from piecetrack.application.interfaces import Record, RecordStore
from piecetrack.infrastructure.database.models import DocumentModel


class SQLAlchemyRecordStore(RecordStore):
    """Implements the RecordStore port on the 'documents' table using async sessions.

    Writes are flushed, not committed; the session owner decides when the
    transaction ends.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def _get_model(self, collection: str, key: str) -> DocumentModel | None:
        return await self._session.get(DocumentModel, (collection, key))

    async def list_all(self, collection: str) -> list[tuple[str, Record]]:
        stmt = (
            select(DocumentModel)
            .where(DocumentModel.collection == collection)
            .order_by(DocumentModel.key)
        )
        result = await self._session.execute(stmt)
        return [(row.key, dict(row.data or {})) for row in result.scalars().all()]

    async def get_by_key(self, collection: str, key: str) -> Record | None:
        model = await self._get_model(collection, key)
        return dict(model.data or {}) if model else None

    async def write_by_key(
        self,
        collection: str,
        key: str,
        record: Record,
        *,
        merge: bool = False,
    ) -> None:
        model = await self._get_model(collection, key)
        if model is None:
            self._session.add(
                DocumentModel(collection=collection, key=key, data=copy.deepcopy(record))
            )
        else:
            data = {**(model.data or {}), **record} if merge else record
            # A fresh dict so the JSON column registers the change.
            model.data = copy.deepcopy(data)
            model.updated_at = datetime.now(timezone.utc)
        await self._session.flush()

    async def append(self, collection: str, record: Record) -> str:
        key = str(uuid4())
        self._session.add(
            DocumentModel(collection=collection, key=key, data=copy.deepcopy(record))
        )
        await self._session.flush()
        return key

    async def remove_by_key(self, collection: str, key: str) -> bool:
        model = await self._get_model(collection, key)
        if model is None:
            return False
        await self._session.delete(model)
        await self._session.flush()
        return True
