"""
Participant endpoints for API v1.

Provide the ``participants``/``participant(id)`` queries and the
``createParticipant``, ``updateParticipant``, ``deleteParticipant`` and
``deleteAllParticipants`` mutations.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from event_board_api.app.core.deps import get_participant_service
from event_board_api.app.core.store import RecordNotFoundError
from event_board_api.app.schemas.common import DeleteAllOutput
from event_board_api.app.schemas.participant import ParticipantCreate, ParticipantRead, ParticipantUpdate
from event_board_api.app.services.participant_service import ParticipantService


router = APIRouter()


@router.get("/", response_model=List[ParticipantRead])
async def participants(service: ParticipantService = Depends(get_participant_service)) -> List[ParticipantRead]:
    return await service.list_participants()


@router.get("/{participant_id}", response_model=ParticipantRead)
async def participant(
    participant_id: str,
    service: ParticipantService = Depends(get_participant_service),
) -> ParticipantRead:
    try:
        return await service.get_participant(participant_id)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.post("/", response_model=ParticipantRead, status_code=status.HTTP_201_CREATED)
async def create_participant(
    data: ParticipantCreate,
    service: ParticipantService = Depends(get_participant_service),
) -> ParticipantRead:
    return await service.create_participant(data)


@router.put("/{participant_id}", response_model=ParticipantRead)
async def update_participant(
    participant_id: str,
    data: ParticipantUpdate,
    service: ParticipantService = Depends(get_participant_service),
) -> ParticipantRead:
    try:
        return await service.update_participant(participant_id, data)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.delete("/{participant_id}", response_model=ParticipantRead)
async def delete_participant(
    participant_id: str,
    service: ParticipantService = Depends(get_participant_service),
) -> ParticipantRead:
    try:
        return await service.delete_participant(participant_id)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.delete("/", response_model=DeleteAllOutput)
async def delete_all_participants(
    service: ParticipantService = Depends(get_participant_service),
) -> DeleteAllOutput:
    """Remove every participant and report how many there were."""
    return await service.delete_all_participants()
