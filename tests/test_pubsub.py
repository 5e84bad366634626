"""
Test the notification bus.
"""
import asyncio

import pytest

from event_board_api.app.core.pubsub import (
    TOPIC_FILTERS,
    TOPICS,
    PubSub,
    UnknownTopicError,
    field_equals,
    topic_entity,
)


def test_topics_cover_every_entity_and_action():
    assert len(TOPICS) == 12
    assert {"userCreated", "userUpdated", "userDeleted", "locationCreated", "eventDeleted", "participantUpdated"} <= TOPICS
    assert TOPIC_FILTERS["locationCreated"] == "name"


def test_topic_entity():
    assert topic_entity("participantDeleted") == "participant"
    with pytest.raises(UnknownTopicError):
        topic_entity("userRenamed")


class TestPubSub:
    """Test publish/subscribe delivery."""

    def test_publish_reaches_live_subscriber(self):
        async def scenario():
            bus = PubSub()
            subscription = bus.subscribe("userCreated")
            delivered = bus.publish("userCreated", {"id": "u1", "username": "ann"})
            payload = await asyncio.wait_for(subscription.get(), timeout=1)
            return delivered, payload

        delivered, payload = asyncio.run(scenario())
        assert delivered == 1
        assert payload == {"id": "u1", "username": "ann"}

    def test_every_subscriber_gets_its_own_copy(self):
        async def scenario():
            bus = PubSub()
            first = bus.subscribe("eventUpdated")
            second = bus.subscribe("eventUpdated")
            bus.publish("eventUpdated", {"id": "e1"})
            a = await first.get()
            a["id"] = "changed"
            b = await second.get()
            return b

        assert asyncio.run(scenario()) == {"id": "e1"}

    def test_filter_skips_non_matching_payloads(self):
        async def scenario():
            bus = PubSub()
            subscription = bus.subscribe("userCreated", field_equals("id", "X"))
            skipped = bus.publish("userCreated", {"id": "Y"})
            matched = bus.publish("userCreated", {"id": "X"})
            return skipped, matched, subscription.pending(), await subscription.get()

        skipped, matched, pending, payload = asyncio.run(scenario())
        assert (skipped, matched, pending) == (0, 1, 1)
        assert payload == {"id": "X"}

    def test_no_replay_for_late_subscribers(self):
        async def scenario():
            bus = PubSub()
            bus.publish("locationCreated", {"id": "l1", "name": "HQ"})
            subscription = bus.subscribe("locationCreated")
            return subscription.pending()

        assert asyncio.run(scenario()) == 0

    def test_topics_are_isolated(self):
        async def scenario():
            bus = PubSub()
            created = bus.subscribe("userCreated")
            bus.publish("userDeleted", {"id": "u1"})
            return created.pending()

        assert asyncio.run(scenario()) == 0

    def test_close_ends_iteration_and_detaches(self):
        async def scenario():
            bus = PubSub()
            subscription = bus.subscribe("participantCreated")
            received = []

            async def consume():
                async for payload in subscription:
                    received.append(payload)

            consumer = asyncio.create_task(consume())
            bus.publish("participantCreated", {"id": "p1"})
            await asyncio.sleep(0)
            subscription.close()
            await asyncio.wait_for(consumer, timeout=1)
            return received, bus.listeners("participantCreated"), bus.publish("participantCreated", {"id": "p2"})

        received, listeners, delivered = asyncio.run(scenario())
        assert received == [{"id": "p1"}]
        assert listeners == []
        assert delivered == 0

    def test_context_manager_closes(self):
        async def scenario():
            bus = PubSub()
            with bus.subscribe("userUpdated") as subscription:
                assert bus.listeners("userUpdated") == [subscription]
            return subscription.closed, bus.listeners("userUpdated")

        closed, listeners = asyncio.run(scenario())
        assert closed is True
        assert listeners == []

    def test_unknown_topic(self):
        bus = PubSub()
        with pytest.raises(UnknownTopicError, match="userUpadated"):
            bus.subscribe("userUpadated")
        with pytest.raises(UnknownTopicError):
            bus.publish("nothing", {})
