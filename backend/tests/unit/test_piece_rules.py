"""Unit tests for the pure piece rules: upsert merge, pagination, drive links, finalized statuses."""

from datetime import datetime, timedelta, timezone

import pytest

from piecetrack.domain.drive_links import normalize_drive_url
from piecetrack.domain.entities import Piece, PieceDraft, Status, is_finalized_status_name, upsert_piece
from piecetrack.domain.pagination import paginate

T0 = datetime(2024, 3, 1, 8, 30, tzinfo=timezone.utc)


# ── Upsert merge ─────────────────────────────────────────────────────


def test_first_save_sets_both_timestamps_to_now():
    piece = upsert_piece(None, PieceDraft(code="P1", description="d"), now=T0)
    assert piece.code == "P1"
    assert piece.registered_at == T0
    assert piece.modified_at == T0


def test_second_save_keeps_registration_and_moves_modification():
    first = upsert_piece(None, PieceDraft(code="P1", description="d"), now=T0)
    later = T0 + timedelta(minutes=5)
    second = upsert_piece(first, PieceDraft(code="P1", description="d2"), now=later)

    assert second.registered_at == first.registered_at
    assert second.modified_at > first.modified_at
    assert second.description == "d2"


def test_update_replaces_every_mutable_field():
    existing = Piece(
        code="P1",
        description="old",
        assigned_user_id="u1",
        status_id="s1",
        image_url="https://example.com/a.png",
        registered_at=T0,
        modified_at=T0,
    )
    merged = upsert_piece(existing, PieceDraft(code="P1"), now=T0 + timedelta(days=1))
    assert merged.description == ""
    assert merged.assigned_user_id is None
    assert merged.status_id is None
    assert merged.image_url is None
    assert merged.registered_at == T0


def test_merge_does_not_mutate_existing():
    existing = Piece(code="P1", description="old", registered_at=T0, modified_at=T0)
    upsert_piece(existing, PieceDraft(code="P1", description="new"), now=T0 + timedelta(hours=1))
    assert existing.description == "old"
    assert existing.modified_at == T0


# ── Pagination ───────────────────────────────────────────────────────


def test_empty_sequence_has_one_empty_page():
    page = paginate([], page_size=10, page_number=1)
    assert page.items == []
    assert page.total_pages == 1
    assert page.page_number == 1
    assert page.first_index == 0
    assert page.last_index == 0


def test_last_partial_page():
    page = paginate(list(range(25)), page_size=10, page_number=3)
    assert page.items == list(range(20, 25))
    assert page.total_pages == 3
    assert page.first_index == 21
    assert page.last_index == 25


def test_page_beyond_end_is_clamped_to_last():
    page = paginate(list(range(25)), page_size=10, page_number=99)
    assert page.page_number == 3
    assert page.items == list(range(20, 25))


def test_page_below_one_is_clamped_to_first():
    page = paginate(list(range(25)), page_size=10, page_number=0)
    assert page.page_number == 1
    assert page.items == list(range(10))


def test_exact_multiple_has_no_trailing_empty_page():
    page = paginate(list(range(20)), page_size=10, page_number=2)
    assert page.total_pages == 2
    assert page.items == list(range(10, 20))


def test_non_positive_page_size_is_rejected():
    with pytest.raises(ValueError):
        paginate([1, 2, 3], page_size=0, page_number=1)


# ── Drive links ──────────────────────────────────────────────────────


def test_file_path_share_link_is_normalized():
    url = "https://drive.google.com/file/d/ABC123/view?usp=sharing"
    assert normalize_drive_url(url) == "https://drive.google.com/uc?export=view&id=ABC123"


def test_open_id_share_link_is_normalized():
    url = "https://drive.google.com/open?id=1a_B-c2"
    assert normalize_drive_url(url) == "https://drive.google.com/uc?export=view&id=1a_B-c2"


def test_path_pattern_wins_over_query_pattern():
    url = "https://drive.google.com/file/d/FROMPATH/view?resourcekey=x&id=FROMQUERY"
    assert normalize_drive_url(url) == "https://drive.google.com/uc?export=view&id=FROMPATH"


@pytest.mark.parametrize("empty", [None, ""])
def test_empty_link_gives_none(empty):
    assert normalize_drive_url(empty) is None


def test_non_drive_link_is_returned_unchanged():
    url = "https://example.com/img.png"
    assert normalize_drive_url(url) == url


def test_normalizing_twice_is_stable():
    once = normalize_drive_url("https://drive.google.com/file/d/ABC123/view")
    assert normalize_drive_url(once) == once


# ── Finalized statuses ───────────────────────────────────────────────


@pytest.mark.parametrize("name", ["Finalizado", "pre-final", "FINAL"])
def test_names_containing_final_are_finalized(name):
    assert is_finalized_status_name(name)
    assert Status(name=name).is_finalized


@pytest.mark.parametrize("name", ["Pendiente", "", None])
def test_other_names_are_not_finalized(name):
    assert not is_finalized_status_name(name)


def test_marker_can_be_changed():
    assert is_finalized_status_name("Terminado", marker="termin")
    assert not is_finalized_status_name("Finalizado", marker="termin")
