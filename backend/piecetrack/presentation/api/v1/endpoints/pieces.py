"""Piece endpoints — listing, lookup by code and create-or-update."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from piecetrack.application.schemas.piece import (
    ImagePreviewResponse,
    PiecePageResponse,
    PieceResponse,
    PieceSave,
)
from piecetrack.application.services import PieceService
from piecetrack.config import get_settings
from piecetrack.domain.drive_links import normalize_drive_url
from piecetrack.domain.entities import PieceDraft, PieceFilter
from piecetrack.domain.exceptions import EntityValidationError
from piecetrack.domain.pagination import paginate
from piecetrack.infrastructure.dependencies import get_piece_service

router = APIRouter(prefix="/pieces", tags=["Pieces"])

# Kept outside /pieces so that no piece code is shadowed.
preview_router = APIRouter(tags=["Pieces"])


@router.get("", response_model=PiecePageResponse)
async def list_pieces(
    code: str | None = Query(None, description="Case-insensitive substring of the code"),
    user_id: str | None = Query(None, description="Filter by assigned user ID"),
    status_id: str | None = Query(None, description="Filter by status ID"),
    page: int = Query(1, description="1-based page number, clamped to the last page"),
    page_size: int | None = Query(None, ge=1),
    service: PieceService = Depends(get_piece_service),
) -> PiecePageResponse:
    """Default listing — most recently modified pieces first."""
    settings = get_settings()
    size = min(page_size or settings.default_page_size, settings.max_page_size)

    pieces = await service.list_pieces(
        PieceFilter(code_contains=code, user_id=user_id, status_id=status_id)
    )
    result = paginate(pieces, size, page)
    return PiecePageResponse(
        items=[PieceResponse.from_entity(p) for p in result.items],
        page=result.page_number,
        page_size=result.page_size,
        total_pages=result.total_pages,
        total_items=result.total_items,
    )


@preview_router.get("/image-preview", response_model=ImagePreviewResponse)
async def image_preview(
    url: str | None = Query(None, description="Image link as typed in the form"),
) -> ImagePreviewResponse:
    """Turn a Drive share link into a directly renderable image URL."""
    return ImagePreviewResponse(url=url, preview_url=normalize_drive_url(url))


@router.get("/{code:path}", response_model=PieceResponse)
async def get_piece(
    code: str,
    service: PieceService = Depends(get_piece_service),
) -> PieceResponse:
    """Retrieve a single piece by its code."""
    piece = await service.find_piece(code)
    if piece is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Piece with code '{code}' not found",
        )
    return PieceResponse.from_entity(piece)


@router.put("/{code:path}", response_model=PieceResponse)
async def save_piece(
    code: str,
    data: PieceSave,
    service: PieceService = Depends(get_piece_service),
) -> PieceResponse:
    """Create the piece, or replace its fields while keeping its registration date."""
    draft = PieceDraft(
        code=code,
        description=data.description,
        assigned_user_id=data.assigned_user_id,
        status_id=data.status_id,
        image_url=data.image_url,
    )
    try:
        piece = await service.save_piece(draft)
    except EntityValidationError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    return PieceResponse.from_entity(piece)
