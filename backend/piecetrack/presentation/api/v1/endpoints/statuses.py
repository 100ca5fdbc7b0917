"""Status endpoints — list and create only."""

from fastapi import APIRouter, Depends, HTTPException, status

from piecetrack.application.schemas.status import StatusCreate, StatusResponse
from piecetrack.application.services import StatusService
from piecetrack.domain.entities import Status
from piecetrack.domain.exceptions import EntityValidationError
from piecetrack.infrastructure.dependencies import get_status_service

router = APIRouter(prefix="/statuses", tags=["Statuses"])


def _to_response(item: Status, service: StatusService) -> StatusResponse:
    return StatusResponse(id=item.id, name=item.name, is_finalized=service.is_finalized(item))


@router.get("", response_model=list[StatusResponse])
async def list_statuses(
    service: StatusService = Depends(get_status_service),
) -> list[StatusResponse]:
    """List all statuses ordered by name, flagging finalized ones."""
    return [_to_response(s, service) for s in await service.list_statuses()]


@router.post("", response_model=StatusResponse, status_code=status.HTTP_201_CREATED)
async def create_status(
    data: StatusCreate,
    service: StatusService = Depends(get_status_service),
) -> StatusResponse:
    """Create a new status."""
    try:
        created = await service.create_status(data)
    except EntityValidationError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    return _to_response(created, service)
