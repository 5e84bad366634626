"""
Business logic for events.

Events reference their owner (``user_id``) and their venue
(``location_id``).  Neither reference is checked when an event is
created or updated; dangling references simply resolve to ``null``.
"""

from typing import Any, List

from ..schemas.common import DeleteAllOutput
from ..schemas.event import EventCreate, EventUpdate
from ..schemas.nested import EventWithRelations
from .base import RecordService, changed_fields


class EventService(RecordService):
    """Service for managing events."""

    entity = "event"
    collection_name = "events"

    async def list_events(self) -> List[EventWithRelations]:
        return self._list()

    async def get_event(self, event_id: Any) -> EventWithRelations:
        """Retrieve a single event by ID.

        Raises ``RecordNotFoundError`` if the event does not exist.
        """
        return self.render(self._fetch(event_id))

    async def add_event(self, data: EventCreate) -> EventWithRelations:
        """Create an event and publish ``eventCreated``."""
        return self.render(self._create(data.model_dump(by_alias=True)))

    async def update_event(self, event_id: Any, data: EventUpdate) -> EventWithRelations:
        """Update fields of an existing event.

        Only fields present in the payload are changed.  Publishes
        ``eventUpdated`` with the merged event.
        """
        return self.render(self._update(event_id, changed_fields(data)))

    async def delete_event(self, event_id: Any) -> EventWithRelations:
        """Delete an event and publish ``eventDeleted``.

        Participants and locations pointing at the event are not
        removed.
        """
        return self.render(self._delete(event_id))

    async def delete_all_events(self) -> DeleteAllOutput:
        return self._delete_all()
