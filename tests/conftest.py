import pytest
from fastapi.testclient import TestClient

from event_board_api.app.core.pubsub import PubSub
from event_board_api.app.core.store import InMemoryStore
from event_board_api.app.main import create_app


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def bus() -> PubSub:
    return PubSub()


@pytest.fixture
def app(store: InMemoryStore, bus: PubSub):
    return create_app(store=store, bus=bus)


# Entering the client shares one event loop between HTTP requests and
# WebSocket sessions, which the subscription tests rely on.
@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def create_user(client: TestClient):
    def _create(username: str = "ann", email: str = "a@x.com") -> dict:
        response = client.post("/api/v1/users/", json={"username": username, "email": email})
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def create_location(client: TestClient):
    def _create(name: str = "HQ", event_id: str = "e1", **fields) -> dict:
        payload = {"name": name, "desc": "d", "lat": 1.0, "lng": 2.0, "event_id": event_id, **fields}
        response = client.post("/api/v1/locations/", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture
def add_event(client: TestClient):
    def _add(user_id: str = "u1", location_id: str = "l1", **fields) -> dict:
        payload = {
            "title": "Standup",
            "desc": "Daily sync",
            "date": "2025-09-01",
            "from": "09:00",
            "to": "09:15",
            "user_id": user_id,
            "location_id": location_id,
            **fields,
        }
        response = client.post("/api/v1/events/", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _add


@pytest.fixture
def create_participant(client: TestClient):
    def _create(user_id: str = "u1", event_id: str = "e1") -> dict:
        response = client.post("/api/v1/participants/", json={"user_id": user_id, "event_id": event_id})
        assert response.status_code == 201, response.text
        return response.json()

    return _create
