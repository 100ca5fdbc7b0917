"""User CRUD endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status

from piecetrack.application.schemas.user import UserCreate, UserResponse, UserUpdate
from piecetrack.application.services import UserService
from piecetrack.domain.exceptions import EntityNotFoundError, EntityValidationError
from piecetrack.infrastructure.dependencies import get_user_service

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("", response_model=list[UserResponse])
async def list_users(
    service: UserService = Depends(get_user_service),
) -> list[UserResponse]:
    """List all users ordered by display name."""
    users = await service.list_users()
    return [UserResponse.model_validate(u, from_attributes=True) for u in users]


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Retrieve a single user by ID."""
    try:
        user = await service.get_user(user_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return UserResponse.model_validate(user, from_attributes=True)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    data: UserCreate,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Create a new user."""
    try:
        user = await service.create_user(data)
    except EntityValidationError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    return UserResponse.model_validate(user, from_attributes=True)


@router.patch("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: str,
    data: UserUpdate,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Update the given fields of an existing user."""
    try:
        user = await service.update_user(user_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except EntityValidationError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    return UserResponse.model_validate(user, from_attributes=True)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
) -> None:
    """Delete a user by ID. Pieces still pointing at it show a placeholder."""
    try:
        await service.delete_user(user_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
