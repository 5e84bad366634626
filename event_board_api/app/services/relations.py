"""
Resolution of related records.

Relationships are never stored on write.  Each helper scans the
related collection for records whose foreign‑key field points at the
given record, so results always reflect the current state of the
store.  Dangling references resolve to ``None`` or an empty list.
"""

from typing import Any, Dict, List, Optional

from ..core.store import InMemoryStore
from ..schemas.event import EventRead
from ..schemas.location import LocationRead
from ..schemas.nested import EventWithRelations, UserWithEvents
from ..schemas.participant import ParticipantRead
from ..schemas.user import UserRead

Record = Dict[str, Any]


def user_events(store: InMemoryStore, user: Record) -> List[EventRead]:
    return [EventRead(**event) for event in store.events.find("user_id", user.get("id"))]


def event_user(store: InMemoryStore, event: Record) -> Optional[UserRead]:
    user = store.users.get(event.get("user_id"))
    return UserRead(**user) if user else None


def event_location(store: InMemoryStore, event: Record) -> Optional[LocationRead]:
    location = store.locations.get(event.get("location_id"))
    return LocationRead(**location) if location else None


def event_participants(store: InMemoryStore, event: Record) -> List[ParticipantRead]:
    return [
        ParticipantRead(**participant)
        for participant in store.participants.find("event_id", event.get("id"))
    ]


def resolve_user(store: InMemoryStore, user: Record) -> UserWithEvents:
    """Build the API representation of a user with its events."""
    return UserWithEvents(**user, events=user_events(store, user))


def resolve_event(store: InMemoryStore, event: Record) -> EventWithRelations:
    """Build the API representation of an event with its relations."""
    return EventWithRelations(
        **event,
        user=event_user(store, event),
        location=event_location(store, event),
        participant=event_participants(store, event),
    )


def resolve_location(store: InMemoryStore, location: Record) -> LocationRead:
    return LocationRead(**location)


def resolve_participant(store: InMemoryStore, participant: Record) -> ParticipantRead:
    return ParticipantRead(**participant)


# Renderer per entity name, as used in topic names.
RESOLVERS = {
    "user": resolve_user,
    "event": resolve_event,
    "location": resolve_location,
    "participant": resolve_participant,
}
