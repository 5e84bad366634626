"""
Test the HTTP client against the application.
"""
import pytest
from fastapi.testclient import TestClient

from event_board_client import EventBoardAPI


@pytest.fixture
def api(client: TestClient) -> EventBoardAPI:
    return EventBoardAPI(base_url="http://testserver", session=client)


class TestEventBoardAPI:
    """Test client round trips through the API."""

    def test_user_lifecycle(self, api: EventBoardAPI):
        user, error = api.create_user({"username": "ann", "email": "a@x.com"})
        assert error is None
        assert user["username"] == "ann"

        users, error = api.list_users()
        assert error is None
        assert [u["id"] for u in users] == [user["id"]]

        updated, error = api.update_user(user["id"], {"email": "ann@x.com"})
        assert error is None
        assert updated["email"] == "ann@x.com"

        deleted, error = api.delete_user(user["id"])
        assert error is None
        assert deleted["id"] == user["id"]

    def test_not_found_is_reported(self, api: EventBoardAPI):
        user, error = api.get_user("missing")
        assert user is None
        assert error == {"status_code": 404, "message": "User missing not found"}

    def test_validation_error_is_reported(self, api: EventBoardAPI):
        location, error = api.create_location({"name": "HQ"})
        assert location is None
        assert error["status_code"] == 422

    def test_event_with_relations(self, api: EventBoardAPI):
        user, _ = api.create_user({"username": "ann", "email": "a@x.com"})
        location, _ = api.create_location({"name": "HQ", "desc": "d", "lat": 1.0, "lng": 2.0, "event_id": "e1"})
        event, error = api.add_event(
            {
                "title": "Launch",
                "desc": "Release party",
                "date": "2025-10-01",
                "from": "18:00",
                "to": "22:00",
                "user_id": user["id"],
                "location_id": location["id"],
            }
        )
        assert error is None
        participant, _ = api.create_participant({"user_id": user["id"], "event_id": event["id"]})

        fetched, error = api.get_event(event["id"])
        assert error is None
        assert fetched["user"]["id"] == user["id"]
        assert fetched["location"] == location
        assert fetched["participant"] == [participant]

    def test_delete_all_returns_count(self, api: EventBoardAPI):
        for i in range(3):
            api.create_participant({"user_id": f"u{i}", "event_id": "e1"})

        count, error = api.delete_all_participants()

        assert error is None
        assert count == 3
        assert api.list_participants() == ([], None)


def test_subscription_url():
    api = EventBoardAPI(base_url="https://example.com/board/")
    assert api.subscription_url("userCreated", id="abc") == "wss://example.com/board/api/v1/subscriptions/userCreated?id=abc"
    assert api.subscription_url("eventDeleted", id=None) == "wss://example.com/board/api/v1/subscriptions/eventDeleted"
    plain = EventBoardAPI(base_url="http://localhost:4000")
    assert plain.subscription_url("locationCreated", name="HQ") == "ws://localhost:4000/api/v1/subscriptions/locationCreated?name=HQ"
