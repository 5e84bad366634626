"""
Response models with related records resolved.

Relationships are computed when a response is built and are only one
level deep: a user's events do not carry their own user, location or
participants.
"""

from typing import List, Optional

from .event import EventRead
from .location import LocationRead
from .participant import ParticipantRead
from .user import UserRead


class UserWithEvents(UserRead):
    """A user together with every event it owns."""

    events: List[EventRead] = []


class EventWithRelations(EventRead):
    """An event with its owner, location and participants.

    ``user`` and ``location`` are ``None`` when the referenced record
    does not exist.
    """

    user: Optional[UserRead] = None
    location: Optional[LocationRead] = None
    participant: List[ParticipantRead] = []
