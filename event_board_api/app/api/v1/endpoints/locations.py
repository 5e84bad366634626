"""
Location endpoints for API v1.

Provide the ``locations``/``location(id)`` queries and the
``createLocation``, ``updateLocation``, ``deleteLocation`` and
``deleteAllLocations`` mutations.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from event_board_api.app.core.deps import get_location_service
from event_board_api.app.core.store import RecordNotFoundError
from event_board_api.app.schemas.common import DeleteAllOutput
from event_board_api.app.schemas.location import LocationCreate, LocationRead, LocationUpdate
from event_board_api.app.services.location_service import LocationService


router = APIRouter()


@router.get("/", response_model=List[LocationRead])
async def locations(service: LocationService = Depends(get_location_service)) -> List[LocationRead]:
    return await service.list_locations()


@router.get("/{location_id}", response_model=LocationRead)
async def location(location_id: str, service: LocationService = Depends(get_location_service)) -> LocationRead:
    try:
        return await service.get_location(location_id)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.post("/", response_model=LocationRead, status_code=status.HTTP_201_CREATED)
async def create_location(
    data: LocationCreate,
    service: LocationService = Depends(get_location_service),
) -> LocationRead:
    """Create a new location.

    Subscribers of ``locationCreated`` filtered by ``name`` only receive
    locations with exactly that name.
    """
    return await service.create_location(data)


@router.put("/{location_id}", response_model=LocationRead)
async def update_location(
    location_id: str,
    data: LocationUpdate,
    service: LocationService = Depends(get_location_service),
) -> LocationRead:
    try:
        return await service.update_location(location_id, data)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.delete("/{location_id}", response_model=LocationRead)
async def delete_location(location_id: str, service: LocationService = Depends(get_location_service)) -> LocationRead:
    try:
        return await service.delete_location(location_id)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.delete("/", response_model=DeleteAllOutput)
async def delete_all_locations(service: LocationService = Depends(get_location_service)) -> DeleteAllOutput:
    return await service.delete_all_locations()
