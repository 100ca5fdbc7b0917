"""API tests for the piece report and its PDF export."""

import pytest
from httpx import ASGITransport, AsyncClient

from piecetrack.application.interfaces import PIECES, STATUSES, USERS
from piecetrack.infrastructure.dependencies import get_record_store
from piecetrack.main import app
from tests.fakes import InMemoryRecordStore


@pytest.fixture
def store():
    store = InMemoryRecordStore()
    store.seed(USERS, "u1", {"display_name": "Ana", "login_name": "ana"})
    store.seed(STATUSES, "s1", {"name": "Finalizado"})
    store.seed(PIECES, "A-1", {
        "description": "Motor bracket",
        "assigned_user_id": "u1",
        "status_id": "s1",
        "registered_at": "2024-03-01T10:00:00+00:00",
    })
    store.seed(PIECES, "B-2", {
        "description": "Gear",
        "assigned_user_id": "gone",
        "registered_at": "2024-03-05T10:00:00+00:00",
    })
    app.dependency_overrides[get_record_store] = lambda: store
    yield store
    app.dependency_overrides.clear()


def _client() -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest.mark.asyncio
async def test_report_page_with_names(store):
    async with _client() as client:
        response = await client.get(
            "/api/v1/reports/pieces", params={"order_by": "code", "order_desc": "false"}
        )

    assert response.status_code == 200
    body = response.json()
    assert body["total_items"] == 2
    assert (body["first_index"], body["last_index"]) == (1, 2)
    rows = body["rows"]
    assert [r["code"] for r in rows] == ["A-1", "B-2"]
    assert rows[0]["user_name"] == "Ana"
    assert rows[0]["status_finalized"] is True
    assert rows[1]["user_name"] == "-"
    assert rows[1]["status_name"] == "-"


@pytest.mark.asyncio
async def test_report_date_range_and_summary(store):
    async with _client() as client:
        response = await client.get(
            "/api/v1/reports/pieces",
            params={"registered_from": "2024-03-05", "registered_to": "2024-03-05"},
        )

    body = response.json()
    assert [r["code"] for r in body["rows"]] == ["B-2"]
    assert body["filter_summary"] == "From: 2024-03-05 | To: 2024-03-05"


@pytest.mark.asyncio
async def test_pdf_export_downloads_document(store):
    async with _client() as client:
        response = await client.get("/api/v1/reports/pieces/pdf", params={"user_id": "u1"})

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert response.headers["content-disposition"].startswith(
        'attachment; filename="pieces_report_'
    )
    assert response.content.startswith(b"%PDF")


@pytest.mark.asyncio
async def test_pdf_export_with_no_rows_is_422(store):
    async with _client() as client:
        response = await client.get("/api/v1/reports/pieces/pdf", params={"code": "ZZZ"})

    assert response.status_code == 422
    assert "No pieces match" in response.json()["detail"]
