"""
User endpoints for API v1.

``GET`` routes answer the ``users`` and ``user(id)`` queries; ``POST``,
``PUT`` and ``DELETE`` routes perform the ``createUser``,
``updateUser``, ``deleteUser`` and ``deleteAllUsers`` mutations.
Users are always returned together with their events.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from event_board_api.app.core.deps import get_user_service
from event_board_api.app.core.store import RecordNotFoundError
from event_board_api.app.schemas.common import DeleteAllOutput
from event_board_api.app.schemas.nested import UserWithEvents
from event_board_api.app.schemas.user import UserCreate, UserUpdate
from event_board_api.app.services.user_service import UserService


router = APIRouter()


@router.get("/", response_model=List[UserWithEvents])
async def users(service: UserService = Depends(get_user_service)) -> List[UserWithEvents]:
    """List every user in creation order."""
    return await service.list_users()


@router.get("/{user_id}", response_model=UserWithEvents)
async def user(user_id: str, service: UserService = Depends(get_user_service)) -> UserWithEvents:
    """Retrieve a single user by its ID.  Raises 404 if it does not exist."""
    try:
        return await service.get_user(user_id)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.post("/", response_model=UserWithEvents, status_code=status.HTTP_201_CREATED)
async def create_user(
    data: UserCreate,
    service: UserService = Depends(get_user_service),
) -> UserWithEvents:
    """Create a new user and notify ``userCreated`` subscribers."""
    return await service.create_user(data)


@router.put("/{user_id}", response_model=UserWithEvents)
async def update_user(
    user_id: str,
    data: UserUpdate,
    service: UserService = Depends(get_user_service),
) -> UserWithEvents:
    """Update an existing user.

    Partial updates are supported; any unspecified fields remain
    unchanged.  Subscribers of ``userUpdated`` receive the merged user.
    """
    try:
        return await service.update_user(user_id, data)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.delete("/{user_id}", response_model=UserWithEvents)
async def delete_user(user_id: str, service: UserService = Depends(get_user_service)) -> UserWithEvents:
    """Delete a user and return it as it was before removal.

    Events owned by the user are not deleted.
    """
    try:
        return await service.delete_user(user_id)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.delete("/", response_model=DeleteAllOutput)
async def delete_all_users(service: UserService = Depends(get_user_service)) -> DeleteAllOutput:
    """Remove every user.  No ``userDeleted`` notifications are sent."""
    return await service.delete_all_users()
