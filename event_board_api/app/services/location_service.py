"""Business logic for locations."""

from typing import Any, List

from ..schemas.common import DeleteAllOutput
from ..schemas.location import LocationCreate, LocationRead, LocationUpdate
from .base import RecordService, changed_fields


class LocationService(RecordService):
    """Service for managing event locations."""

    entity = "location"
    collection_name = "locations"

    async def list_locations(self) -> List[LocationRead]:
        return self._list()

    async def get_location(self, location_id: Any) -> LocationRead:
        return self.render(self._fetch(location_id))

    async def create_location(self, data: LocationCreate) -> LocationRead:
        return self.render(self._create(data.model_dump()))

    async def update_location(self, location_id: Any, data: LocationUpdate) -> LocationRead:
        return self.render(self._update(location_id, changed_fields(data)))

    async def delete_location(self, location_id: Any) -> LocationRead:
        return self.render(self._delete(location_id))

    async def delete_all_locations(self) -> DeleteAllOutput:
        return self._delete_all()
