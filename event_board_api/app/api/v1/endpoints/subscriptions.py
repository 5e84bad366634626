"""
Subscription endpoint for API v1.

Clients open a WebSocket on ``/subscriptions/{topic}`` (for example
``/subscriptions/userCreated``) and receive one JSON text frame per
record published to that topic while the connection is open.  Creation
topics accept an optional filter as query parameter: ``id`` for users,
events and participants, ``name`` for locations.  Payloads are rendered
the same way the matching query renders them, with relations resolved
at delivery time.

The client never needs to send anything; the connection stays open
until either side closes it.
"""

import asyncio
import logging
from typing import Optional

from fastapi import APIRouter, WebSocket, WebSocketDisconnect, status

from event_board_api.app.core.pubsub import (
    TOPIC_FILTERS,
    PubSub,
    UnknownTopicError,
    field_equals,
    topic_entity,
)
from event_board_api.app.core.store import InMemoryStore
from event_board_api.app.services.relations import RESOLVERS


router = APIRouter()
logger = logging.getLogger(__name__)


async def _wait_for_disconnect(websocket: WebSocket) -> None:
    """Consume incoming frames until the client goes away."""
    while True:
        message = await websocket.receive()
        if message["type"] == "websocket.disconnect":
            return


@router.websocket("/{topic}")
async def subscribe(
    websocket: WebSocket,
    topic: str,
    id: Optional[str] = None,
    name: Optional[str] = None,
) -> None:
    """Stream notifications published to ``topic``.

    Unknown topics are rejected with close code 1008 (policy
    violation).  Filters given for topics that do not support them, and
    empty filter values, are ignored.
    """
    store: InMemoryStore = websocket.app.state.store
    bus: PubSub = websocket.app.state.bus

    predicate = None
    filter_field = TOPIC_FILTERS.get(topic)
    filter_value = {"id": id, "name": name}.get(filter_field) if filter_field else None
    # An empty filter value means no filter.
    if filter_value:
        predicate = field_equals(filter_field, filter_value)

    # Register before accepting so nothing published after the
    # handshake completes can be missed.
    try:
        subscription = bus.subscribe(topic, predicate)
    except UnknownTopicError as e:
        logger.warning("Rejected subscription: %s", e)
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION, reason=str(e))
        return

    render = RESOLVERS[topic_entity(topic)]
    await websocket.accept()
    logger.info("Client subscribed to %s (filter: %s=%s)", topic, filter_field, filter_value)

    watcher = asyncio.create_task(_wait_for_disconnect(websocket))
    watcher.add_done_callback(lambda _: subscription.close())
    try:
        async for payload in subscription:
            model = render(store, payload)
            await websocket.send_json(model.model_dump(mode="json", by_alias=True))
    except WebSocketDisconnect:
        logger.debug("Client left %s while a payload was being sent", topic)
    finally:
        subscription.close()
        watcher.cancel()
        logger.info("Client unsubscribed from %s", topic)
