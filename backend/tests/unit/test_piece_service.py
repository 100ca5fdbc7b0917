"""Unit tests for the PieceService."""

from datetime import datetime, timezone

import pytest

from piecetrack.application.interfaces import PIECES
from piecetrack.application.services import PieceService
from piecetrack.domain.entities import PieceDraft, PieceFilter
from piecetrack.domain.exceptions import EntityValidationError
from tests.fakes import FailingRecordStore, InMemoryRecordStore, StepClock


@pytest.fixture
def store() -> InMemoryRecordStore:
    return InMemoryRecordStore()


@pytest.fixture
def service(store: InMemoryRecordStore) -> PieceService:
    return PieceService(store, clock=StepClock())


@pytest.mark.asyncio
async def test_first_save_registers_piece(service: PieceService, store: InMemoryRecordStore):
    piece = await service.save_piece(PieceDraft(code=" P-1 ", description="Bracket"))

    assert piece.code == "P-1"
    assert piece.registered_at == piece.modified_at
    stored = store.raw(PIECES, "P-1")
    assert stored["description"] == "Bracket"
    assert stored["registered_at"] == "2024-01-01T09:00:00+00:00"


@pytest.mark.asyncio
async def test_resave_keeps_registration_time(service: PieceService):
    first = await service.save_piece(PieceDraft(code="P-1", description="Bracket"))
    second = await service.save_piece(
        PieceDraft(code="P-1", description="Bracket v2", status_id="s1")
    )

    assert second.registered_at == first.registered_at
    assert second.modified_at > first.modified_at
    found = await service.find_piece("P-1")
    assert found.description == "Bracket v2"
    assert found.status_id == "s1"
    assert found.registered_at == first.registered_at


@pytest.mark.asyncio
async def test_save_does_not_modify_callers_draft(service: PieceService):
    draft = PieceDraft(code=" P-9 ", description="Bracket")
    piece = await service.save_piece(draft)
    assert piece.code == "P-9"
    assert draft.code == " P-9 "


@pytest.mark.asyncio
async def test_save_rejects_blank_code(service: PieceService, store: InMemoryRecordStore):
    with pytest.raises(EntityValidationError):
        await service.save_piece(PieceDraft(code="   "))
    assert store.writes == []


@pytest.mark.asyncio
async def test_find_missing_or_blank_code_gives_none(service: PieceService):
    assert await service.find_piece("nope") is None
    assert await service.find_piece("  ") is None


@pytest.mark.asyncio
async def test_record_without_modified_at_reads_registration_time(
    service: PieceService, store: InMemoryRecordStore
):
    store.seed(PIECES, "OLD-1", {"description": "legacy", "registered_at": "2020-02-03T10:00:00Z"})
    piece = await service.find_piece("OLD-1")
    expected = datetime(2020, 2, 3, 10, 0, tzinfo=timezone.utc)
    assert piece.registered_at == expected
    assert piece.modified_at == expected
    assert piece.assigned_user_id is None


@pytest.mark.asyncio
async def test_list_pieces_filters_and_orders_by_modification(service: PieceService):
    await service.save_piece(PieceDraft(code="A", assigned_user_id="u1"))
    await service.save_piece(PieceDraft(code="B", assigned_user_id="u2"))
    await service.save_piece(PieceDraft(code="C", assigned_user_id="u1"))
    await service.save_piece(PieceDraft(code="A", assigned_user_id="u1", description="touched"))

    listed = await service.list_pieces()
    assert [p.code for p in listed] == ["A", "C", "B"]

    mine = await service.list_pieces(PieceFilter(user_id="u1", order_by="code", order_descending=False))
    assert [p.code for p in mine] == ["A", "C"]


@pytest.mark.asyncio
async def test_failed_write_propagates_and_keeps_prior_record():
    store = FailingRecordStore()
    store.seed(PIECES, "P-1", {"description": "before", "registered_at": "2024-01-01T00:00:00+00:00"})
    service = PieceService(store, clock=StepClock())

    with pytest.raises(ConnectionError):
        await service.save_piece(PieceDraft(code="P-1", description="after"))

    assert store.raw(PIECES, "P-1")["description"] == "before"
