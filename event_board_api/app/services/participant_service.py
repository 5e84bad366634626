"""
Business logic for participants.

A participant links a user to an event.  Neither side is verified to
exist, and the same user may join the same event more than once.
"""

from typing import Any, List

from ..schemas.common import DeleteAllOutput
from ..schemas.participant import ParticipantCreate, ParticipantRead, ParticipantUpdate
from .base import RecordService, changed_fields


class ParticipantService(RecordService):
    """Service for managing event participants."""

    entity = "participant"
    collection_name = "participants"

    async def list_participants(self) -> List[ParticipantRead]:
        return self._list()

    async def get_participant(self, participant_id: Any) -> ParticipantRead:
        return self.render(self._fetch(participant_id))

    async def create_participant(self, data: ParticipantCreate) -> ParticipantRead:
        return self.render(self._create(data.model_dump()))

    async def update_participant(self, participant_id: Any, data: ParticipantUpdate) -> ParticipantRead:
        return self.render(self._update(participant_id, changed_fields(data)))

    async def delete_participant(self, participant_id: Any) -> ParticipantRead:
        return self.render(self._delete(participant_id))

    async def delete_all_participants(self) -> DeleteAllOutput:
        return self._delete_all()
