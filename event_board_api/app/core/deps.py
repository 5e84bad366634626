"""
FastAPI dependencies giving handlers access to shared state.

The store and the notification bus are created by ``create_app`` and
attached to ``app.state``.  Endpoints obtain ready‑made services
through the ``get_*_service`` dependencies, which always hand the same
bus to the service that publishes and to the WebSocket that listens.
"""

from fastapi import Depends, Request

from .pubsub import PubSub
from .store import InMemoryStore
from ..services.event_service import EventService
from ..services.location_service import LocationService
from ..services.participant_service import ParticipantService
from ..services.user_service import UserService


def get_store(request: Request) -> InMemoryStore:
    return request.app.state.store


def get_bus(request: Request) -> PubSub:
    return request.app.state.bus


def get_user_service(
    store: InMemoryStore = Depends(get_store),
    bus: PubSub = Depends(get_bus),
) -> UserService:
    return UserService(store, bus)


def get_event_service(
    store: InMemoryStore = Depends(get_store),
    bus: PubSub = Depends(get_bus),
) -> EventService:
    return EventService(store, bus)


def get_location_service(
    store: InMemoryStore = Depends(get_store),
    bus: PubSub = Depends(get_bus),
) -> LocationService:
    return LocationService(store, bus)


def get_participant_service(
    store: InMemoryStore = Depends(get_store),
    bus: PubSub = Depends(get_bus),
) -> ParticipantService:
    return ParticipantService(store, bus)
