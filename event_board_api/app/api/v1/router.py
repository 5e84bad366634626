"""
Top‑level router for version 1 of the API.

This router aggregates the entity routers (users, events, locations,
participants), the subscription WebSocket and the info endpoint under
a unified prefix.  When new entities are introduced, update this file
to include their routers.
"""

from fastapi import APIRouter

from .endpoints import (
    events,
    info,
    locations,
    participants,
    subscriptions,
    users,
)

router = APIRouter()

router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(events.router, prefix="/events", tags=["events"])
router.include_router(locations.router, prefix="/locations", tags=["locations"])
router.include_router(participants.router, prefix="/participants", tags=["participants"])
router.include_router(subscriptions.router, prefix="/subscriptions", tags=["subscriptions"])
router.include_router(info.router, prefix="/info", tags=["info"])
