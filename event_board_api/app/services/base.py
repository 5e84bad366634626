"""
Shared mechanics for the entity services.

A service wraps one collection of the store together with the
notification bus.  Both are passed in explicitly when the service is
constructed, so every mutation publishes through the same bus the
subscribers listen on.
"""

import logging
from typing import Any, Dict, List

from pydantic import BaseModel

from ..core.pubsub import PubSub
from ..core.store import Collection, InMemoryStore, RecordNotFoundError
from ..schemas.common import DeleteAllOutput
from .relations import RESOLVERS

logger = logging.getLogger(__name__)


def changed_fields(data: BaseModel) -> Dict[str, Any]:
    """Return the fields a client actually supplied in an update payload.

    Explicit ``null`` values are dropped so that required fields cannot
    be cleared through an update.
    """
    return {k: v for k, v in data.model_dump(by_alias=True, exclude_unset=True).items() if v is not None}


class RecordService:
    """Base class for the user, event, location and participant services."""

    #: Entity name used as topic prefix, e.g. ``"user"`` -> ``userCreated``.
    entity: str = ""
    #: Attribute of ``InMemoryStore`` holding the records.
    collection_name: str = ""

    def __init__(self, store: InMemoryStore, bus: PubSub) -> None:
        self.store = store
        self.bus = bus

    @property
    def collection(self) -> Collection:
        return getattr(self.store, self.collection_name)

    def render(self, record: Dict[str, Any]) -> BaseModel:
        return RESOLVERS[self.entity](self.store, record)

    def _list(self) -> List[BaseModel]:
        return [self.render(record) for record in self.collection.list()]

    def _fetch(self, record_id: Any) -> Dict[str, Any]:
        record = self.collection.get(record_id)
        if record is None:
            logger.warning("%s %s not found", self.collection.entity, record_id)
            raise RecordNotFoundError(self.collection.entity, record_id)
        return record

    def _create(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        record = self.collection.create(fields)
        logger.info("Created %s %s", self.entity, record["id"])
        self.bus.publish(f"{self.entity}Created", record)
        return record

    def _update(self, record_id: Any, fields: Dict[str, Any]) -> Dict[str, Any]:
        try:
            record = self.collection.update(record_id, fields)
        except RecordNotFoundError:
            logger.warning("Cannot update %s %s: not found", self.entity, record_id)
            raise
        logger.info("Updated %s %s (%s)", self.entity, record["id"], ", ".join(sorted(fields)) or "no changes")
        self.bus.publish(f"{self.entity}Updated", record)
        return record

    def _delete(self, record_id: Any) -> Dict[str, Any]:
        try:
            record = self.collection.delete(record_id)
        except RecordNotFoundError:
            logger.warning("Cannot delete %s %s: not found", self.entity, record_id)
            raise
        logger.info("Deleted %s %s", self.entity, record["id"])
        self.bus.publish(f"{self.entity}Deleted", record)
        return record

    def _delete_all(self) -> DeleteAllOutput:
        # Bulk deletes are not announced to subscribers.
        count = self.collection.delete_all()
        logger.info("Deleted all %s records (%d)", self.entity, count)
        return DeleteAllOutput(count=count)
