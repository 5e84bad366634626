"""
Event endpoints for API v1.

These routes provide the ``events``/``event(id)`` queries and the
``addEvent``, ``updateEvent``, ``deleteEvent`` and ``deleteAllEvents``
mutations.  Every event is returned with its ``user``, ``location`` and
``participant`` fields resolved against the current store.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from event_board_api.app.core.deps import get_event_service
from event_board_api.app.core.store import RecordNotFoundError
from event_board_api.app.schemas.common import DeleteAllOutput
from event_board_api.app.schemas.event import EventCreate, EventUpdate
from event_board_api.app.schemas.nested import EventWithRelations
from event_board_api.app.services.event_service import EventService


router = APIRouter()


@router.get("/", response_model=List[EventWithRelations])
async def events(service: EventService = Depends(get_event_service)) -> List[EventWithRelations]:
    """List every event in creation order."""
    return await service.list_events()


@router.get("/{event_id}", response_model=EventWithRelations)
async def event(event_id: str, service: EventService = Depends(get_event_service)) -> EventWithRelations:
    """Retrieve a single event by its ID.

    Raises 404 if the event is not found.  A missing owner or location
    is returned as ``null``.
    """
    try:
        return await service.get_event(event_id)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.post("/", response_model=EventWithRelations, status_code=status.HTTP_201_CREATED)
async def add_event(
    data: EventCreate,
    service: EventService = Depends(get_event_service),
) -> EventWithRelations:
    """Create a new event.

    ``user_id`` and ``location_id`` are stored as given; they are not
    required to reference existing records.
    """
    return await service.add_event(data)


@router.put("/{event_id}", response_model=EventWithRelations)
async def update_event(
    event_id: str,
    data: EventUpdate,
    service: EventService = Depends(get_event_service),
) -> EventWithRelations:
    """Update an existing event.

    Partial updates are supported; any unspecified fields remain
    unchanged.
    """
    try:
        return await service.update_event(event_id, data)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.delete("/{event_id}", response_model=EventWithRelations)
async def delete_event(event_id: str, service: EventService = Depends(get_event_service)) -> EventWithRelations:
    """Delete an event.

    Related participants and locations are left untouched and keep
    pointing at the removed event.
    """
    try:
        return await service.delete_event(event_id)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.delete("/", response_model=DeleteAllOutput)
async def delete_all_events(service: EventService = Depends(get_event_service)) -> DeleteAllOutput:
    return await service.delete_all_events()
