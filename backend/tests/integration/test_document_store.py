"""Integration tests for the SQLAlchemy-backed record store on SQLite."""

from contextlib import asynccontextmanager

import pytest
from sqlalchemy.ext.asyncio import async_sessionmaker

from piecetrack.infrastructure.database import Base
from piecetrack.infrastructure.database.repositories import SQLAlchemyRecordStore
from piecetrack.infrastructure.database.session import build_engine


@asynccontextmanager
async def _engine(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'documents.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.mark.asyncio
async def test_write_and_read_back_across_sessions(tmp_path):
    async with _engine(tmp_path) as engine:
        sessions = async_sessionmaker(engine, expire_on_commit=False)

        async with sessions() as session:
            store = SQLAlchemyRecordStore(session)
            await store.write_by_key("pieces", "P-2", {"description": "b"})
            await store.write_by_key("pieces", "P-1", {"description": "a"})
            await store.write_by_key("users", "u1", {"display_name": "Ana"})
            await session.commit()

        async with sessions() as session:
            store = SQLAlchemyRecordStore(session)
            assert await store.list_all("pieces") == [
                ("P-1", {"description": "a"}),
                ("P-2", {"description": "b"}),
            ]
            assert await store.get_by_key("users", "u1") == {"display_name": "Ana"}
            assert await store.get_by_key("users", "nope") is None


@pytest.mark.asyncio
async def test_replace_and_merge_writes(tmp_path):
    async with _engine(tmp_path) as engine:
        sessions = async_sessionmaker(engine, expire_on_commit=False)

        async with sessions() as session:
            store = SQLAlchemyRecordStore(session)
            await store.write_by_key("users", "u1", {"display_name": "Ana", "login_name": "ana"})
            await store.write_by_key("users", "u1", {"login_name": "alopez"}, merge=True)
            await store.write_by_key("pieces", "P-1", {"description": "a", "status_id": "s1"})
            await store.write_by_key("pieces", "P-1", {"description": "b"})
            await session.commit()

        async with sessions() as session:
            store = SQLAlchemyRecordStore(session)
            assert await store.get_by_key("users", "u1") == {
                "display_name": "Ana",
                "login_name": "alopez",
            }
            assert await store.get_by_key("pieces", "P-1") == {"description": "b"}


@pytest.mark.asyncio
async def test_append_and_remove(tmp_path):
    async with _engine(tmp_path) as engine:
        sessions = async_sessionmaker(engine, expire_on_commit=False)

        async with sessions() as session:
            store = SQLAlchemyRecordStore(session)
            key = await store.append("statuses", {"name": "Pendiente"})
            other = await store.append("statuses", {"name": "Finalizado"})
            assert key != other
            assert await store.remove_by_key("statuses", key) is True
            assert await store.remove_by_key("statuses", key) is False
            await session.commit()

        async with sessions() as session:
            store = SQLAlchemyRecordStore(session)
            assert await store.list_all("statuses") == [(other, {"name": "Finalizado"})]


@pytest.mark.asyncio
async def test_rollback_discards_uncommitted_writes(tmp_path):
    async with _engine(tmp_path) as engine:
        sessions = async_sessionmaker(engine, expire_on_commit=False)

        async with sessions() as session:
            store = SQLAlchemyRecordStore(session)
            await store.write_by_key("pieces", "P-1", {"description": "a"})
            await session.rollback()

        async with sessions() as session:
            assert await SQLAlchemyRecordStore(session).list_all("pieces") == []
