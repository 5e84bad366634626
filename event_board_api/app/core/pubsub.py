"""
In‑process publish/subscribe bus for change notifications.

Mutation handlers publish the affected record to a named topic such as
``userCreated`` or ``eventDeleted``.  Every live ``Subscription`` on
that topic whose predicate accepts the payload receives it through an
unbounded ``asyncio.Queue``.  Publishing never blocks and never waits
for subscribers; payloads published while nobody is listening are
dropped (there is no replay or persistence).

A single ``PubSub`` instance is created per application and handed to
services and the WebSocket endpoint explicitly.
"""

import asyncio
import logging
from typing import Any, Callable, Dict, List, Optional, Set

logger = logging.getLogger(__name__)

ENTITIES = ("user", "location", "event", "participant")
ACTIONS = ("Created", "Updated", "Deleted")

TOPICS = frozenset(f"{entity}{action}" for entity in ENTITIES for action in ACTIONS)

# Field each creation topic may be filtered on.  Update and delete
# topics accept no filter.
TOPIC_FILTERS: Dict[str, str] = {
    "userCreated": "id",
    "locationCreated": "name",
    "eventCreated": "id",
    "participantCreated": "id",
}

Predicate = Callable[[Dict[str, Any]], bool]

_CLOSED = object()


class UnknownTopicError(KeyError):
    """Raised when subscribing or publishing to a topic that does not exist."""

    def __init__(self, topic: str) -> None:
        self.topic = topic
        super().__init__(topic)

    def __str__(self) -> str:
        return f"Unknown topic '{self.topic}'"


def topic_entity(topic: str) -> str:
    """Return the entity name (``user``, ``event``...) a topic belongs to."""
    for action in ACTIONS:
        if topic.endswith(action):
            return topic[: -len(action)]
    raise UnknownTopicError(topic)


def field_equals(field: str, value: Any) -> Predicate:
    """Build a predicate matching payloads whose ``field`` equals ``value``.

    Values are compared as strings so an id given as a query parameter
    matches the stored identifier.
    """
    wanted = str(value)

    def predicate(payload: Dict[str, Any]) -> bool:
        return str(payload.get(field)) == wanted

    return predicate


class Subscription:
    """A live stream of payloads published to one topic.

    Iterate with ``async for``; the iteration ends once ``close`` is
    called.  Closing only detaches the subscription from the bus.
    """

    def __init__(self, bus: "PubSub", topic: str, predicate: Optional[Predicate] = None) -> None:
        self.bus = bus
        self.topic = topic
        self.predicate = predicate
        self.closed = False
        self._queue: asyncio.Queue = asyncio.Queue()
        # Loop the consumer runs on; payloads published from other
        # threads are handed over through it.
        try:
            self._loop: Optional[asyncio.AbstractEventLoop] = asyncio.get_running_loop()
        except RuntimeError:
            self._loop = None

    def accepts(self, payload: Dict[str, Any]) -> bool:
        return self.predicate is None or self.predicate(payload)

    def _put(self, item: Any) -> None:
        if self._loop is not None and not self._loop.is_closed():
            try:
                current = asyncio.get_running_loop()
            except RuntimeError:
                current = None
            if current is not self._loop:
                self._loop.call_soon_threadsafe(self._queue.put_nowait, item)
                return
        self._queue.put_nowait(item)

    def deliver(self, payload: Dict[str, Any]) -> None:
        self._put(payload)

    def pending(self) -> int:
        """Number of payloads delivered but not yet consumed."""
        return self._queue.qsize()

    async def get(self) -> Dict[str, Any]:
        item = await self._queue.get()
        if item is _CLOSED:
            raise StopAsyncIteration
        return item

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        self.bus.unsubscribe(self)
        # Wake up a consumer blocked in ``get``.
        self._put(_CLOSED)

    def __aiter__(self) -> "Subscription":
        return self

    async def __anext__(self) -> Dict[str, Any]:
        if self.closed and self._queue.empty():
            raise StopAsyncIteration
        return await self.get()

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


class PubSub:
    """Named‑topic publish/subscribe bus."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, Set[Subscription]] = {topic: set() for topic in TOPICS}

    def _check_topic(self, topic: str) -> None:
        if topic not in self._subscribers:
            raise UnknownTopicError(topic)

    def subscribe(self, topic: str, predicate: Optional[Predicate] = None) -> Subscription:
        """Register a new subscription on ``topic``.

        Only payloads published after this call are delivered.
        """
        self._check_topic(topic)
        subscription = Subscription(self, topic, predicate)
        self._subscribers[topic].add(subscription)
        logger.debug("Subscribed to %s (%d listeners)", topic, len(self._subscribers[topic]))
        return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        self._subscribers.get(subscription.topic, set()).discard(subscription)
        logger.debug("Unsubscribed from %s", subscription.topic)

    def publish(self, topic: str, payload: Dict[str, Any]) -> int:
        """Hand ``payload`` to every matching subscriber of ``topic``.

        Each subscriber gets its own copy of the payload.  Returns the
        number of subscribers the payload was delivered to.
        """
        self._check_topic(topic)
        delivered = 0
        for subscription in list(self._subscribers[topic]):
            if subscription.accepts(payload):
                subscription.deliver(dict(payload))
                delivered += 1
        logger.debug("Published %s to %d subscriber(s)", topic, delivered)
        return delivered

    def listeners(self, topic: str) -> List[Subscription]:
        self._check_topic(topic)
        return list(self._subscribers[topic])
