"""
Test API endpoints.
"""
from fastapi.testclient import TestClient

API = "/api/v1"


class TestUserEndpoints:
    """Test user queries and mutations."""

    def test_create_user(self, client: TestClient, store):
        response = client.post(f"{API}/users/", json={"username": "ann", "email": "a@x.com"})

        assert response.status_code == 201
        data = response.json()
        assert data["username"] == "ann"
        assert data["email"] == "a@x.com"
        assert data["events"] == []
        assert data["id"]
        assert store.users.list()[-1]["id"] == data["id"]

    def test_create_user_validation(self, client: TestClient):
        response = client.post(f"{API}/users/", json={"username": "ann"})  # Missing email
        assert response.status_code == 422

    def test_list_users_in_creation_order(self, client: TestClient, create_user):
        ids = [create_user(f"user{i}", f"{i}@x.com")["id"] for i in range(3)]

        response = client.get(f"{API}/users/")

        assert response.status_code == 200
        assert [u["id"] for u in response.json()] == ids

    def test_get_user(self, client: TestClient, create_user):
        user = create_user()
        response = client.get(f"{API}/users/{user['id']}")
        assert response.status_code == 200
        assert response.json() == user

    def test_get_user_not_found(self, client: TestClient):
        response = client.get(f"{API}/users/missing")
        assert response.status_code == 404
        assert response.json()["detail"] == "User missing not found"

    def test_update_user_merges_fields(self, client: TestClient, create_user):
        user = create_user("ann", "a@x.com")

        response = client.put(f"{API}/users/{user['id']}", json={"email": "ann@x.com"})

        assert response.status_code == 200
        assert response.json() == {**user, "email": "ann@x.com"}
        assert client.get(f"{API}/users/{user['id']}").json()["username"] == "ann"

    def test_update_first_user(self, client: TestClient, create_user):
        first = create_user("ann", "a@x.com")
        create_user("bob", "b@x.com")

        response = client.put(f"{API}/users/{first['id']}", json={"username": "anne"})

        assert response.status_code == 200
        assert response.json()["username"] == "anne"

    def test_update_user_ignores_null(self, client: TestClient, create_user):
        user = create_user()
        response = client.put(f"{API}/users/{user['id']}", json={"username": None})
        assert response.json()["username"] == "ann"

    def test_update_user_not_found(self, client: TestClient):
        response = client.put(f"{API}/users/missing", json={"username": "x"})
        assert response.status_code == 404

    def test_delete_user(self, client: TestClient, create_user):
        first = create_user("ann", "a@x.com")
        second = create_user("bob", "b@x.com")

        response = client.delete(f"{API}/users/{first['id']}")

        assert response.status_code == 200
        assert response.json() == first
        assert [u["id"] for u in client.get(f"{API}/users/").json()] == [second["id"]]

    def test_delete_user_not_found(self, client: TestClient):
        assert client.delete(f"{API}/users/missing").status_code == 404

    def test_delete_all_users(self, client: TestClient, create_user):
        for i in range(2):
            create_user(f"user{i}", f"{i}@x.com")

        response = client.delete(f"{API}/users/")

        assert response.status_code == 200
        assert response.json() == {"count": 2}
        assert client.get(f"{API}/users/").json() == []

    def test_user_events(self, client: TestClient, create_user, add_event):
        u1 = create_user("ann", "a@x.com")
        e1 = add_event(user_id=u1["id"], title="Mine")
        add_event(user_id="other", title="Not mine")

        events = client.get(f"{API}/users/{u1['id']}").json()["events"]

        assert [e["id"] for e in events] == [e1["id"]]
        assert events[0]["title"] == "Mine"
        assert "user" not in events[0]


class TestEventEndpoints:
    """Test event queries, mutations and relations."""

    def test_add_event(self, client: TestClient):
        payload = {
            "title": "Yoga",
            "desc": "Relaxing",
            "date": "2025-09-01",
            "from": "10:00",
            "to": "11:00",
            "user_id": "u1",
            "location_id": "l1",
        }
        response = client.post(f"{API}/events/", json=payload)

        assert response.status_code == 201
        data = response.json()
        for key, value in payload.items():
            assert data[key] == value
        assert "from_" not in data
        # Dangling references resolve to null / empty.
        assert data["user"] is None
        assert data["location"] is None
        assert data["participant"] == []

    def test_add_event_validation(self, client: TestClient):
        response = client.post(f"{API}/events/", json={"title": "Incomplete"})
        assert response.status_code == 422

    def test_event_location(self, client: TestClient, create_location, add_event):
        location = create_location(name="HQ", desc="d", lat=1.0, lng=2.0, event_id="e1")
        event = add_event(location_id=location["id"])

        response = client.get(f"{API}/events/{event['id']}")

        assert response.status_code == 200
        assert response.json()["location"] == location

    def test_event_user_and_participants(self, client: TestClient, create_user, add_event, create_participant):
        user = create_user()
        event = add_event(user_id=user["id"])
        p1 = create_participant(user_id=user["id"], event_id=event["id"])
        create_participant(user_id=user["id"], event_id="elsewhere")

        data = client.get(f"{API}/events/{event['id']}").json()

        assert data["user"] == {"id": user["id"], "username": "ann", "email": "a@x.com"}
        assert data["participant"] == [p1]

    def test_relations_follow_updates(self, client: TestClient, create_user, add_event):
        ann = create_user("ann", "a@x.com")
        bob = create_user("bob", "b@x.com")
        event = add_event(user_id=ann["id"])

        response = client.put(f"{API}/events/{event['id']}", json={"user_id": bob["id"]})

        assert response.json()["user"]["username"] == "bob"
        assert client.get(f"{API}/users/{ann['id']}").json()["events"] == []
        assert len(client.get(f"{API}/users/{bob['id']}").json()["events"]) == 1

    def test_update_event_from_field(self, client: TestClient, add_event):
        event = add_event()
        response = client.put(f"{API}/events/{event['id']}", json={"from": "12:00"})
        data = response.json()
        assert data["from"] == "12:00"
        assert data["to"] == event["to"]
        assert data["title"] == event["title"]

    def test_delete_event_leaves_dependents(self, client: TestClient, add_event, create_participant):
        event = add_event()
        create_participant(event_id=event["id"])

        response = client.delete(f"{API}/events/{event['id']}")

        assert response.status_code == 200
        assert response.json()["id"] == event["id"]
        assert client.get(f"{API}/events/").json() == []
        assert len(client.get(f"{API}/participants/").json()) == 1

    def test_event_not_found(self, client: TestClient):
        assert client.get(f"{API}/events/missing").status_code == 404
        assert client.put(f"{API}/events/missing", json={}).status_code == 404
        assert client.delete(f"{API}/events/missing").status_code == 404

    def test_delete_all_events(self, client: TestClient, add_event):
        add_event()
        add_event()
        assert client.delete(f"{API}/events/").json() == {"count": 2}


class TestLocationEndpoints:
    """Test location queries and mutations."""

    def test_create_and_get_location(self, client: TestClient, create_location):
        location = create_location(name="HQ", lat=52.5, lng=13.4)

        assert location["lat"] == 52.5
        assert client.get(f"{API}/locations/{location['id']}").json() == location

    def test_create_location_validation(self, client: TestClient):
        payload = {"name": "HQ", "desc": "d", "lat": "north", "lng": 2.0, "event_id": "e1"}
        assert client.post(f"{API}/locations/", json=payload).status_code == 422

    def test_update_location(self, client: TestClient, create_location):
        location = create_location()
        response = client.put(f"{API}/locations/{location['id']}", json={"lat": 5.5})
        assert response.json() == {**location, "lat": 5.5}

    def test_delete_location(self, client: TestClient, create_location):
        location = create_location()
        assert client.delete(f"{API}/locations/{location['id']}").json() == location
        assert client.get(f"{API}/locations/{location['id']}").status_code == 404

    def test_delete_all_locations(self, client: TestClient, create_location):
        create_location()
        assert client.delete(f"{API}/locations/").json() == {"count": 1}
        assert client.get(f"{API}/locations/").json() == []


class TestParticipantEndpoints:
    """Test participant queries and mutations."""

    def test_create_and_list(self, client: TestClient, create_participant):
        participant = create_participant(user_id="u1", event_id="e1")
        assert client.get(f"{API}/participants/").json() == [participant]

    def test_update_participant(self, client: TestClient, create_participant):
        participant = create_participant()
        response = client.put(f"{API}/participants/{participant['id']}", json={"event_id": "e2"})
        assert response.json() == {**participant, "event_id": "e2"}

    def test_delete_participant_not_found(self, client: TestClient):
        response = client.delete(f"{API}/participants/missing")
        assert response.status_code == 404
        assert response.json()["detail"] == "Participant missing not found"

    def test_delete_all_participants(self, client: TestClient, create_participant):
        for _ in range(3):
            create_participant()

        assert client.delete(f"{API}/participants/").json() == {"count": 3}
        assert client.get(f"{API}/participants/").json() == []


def test_info_reports_counts(client: TestClient, create_user, add_event):
    create_user()
    add_event()

    data = client.get(f"{API}/info/").json()

    assert data["status"] == "ok"
    assert data["counts"] == {"users": 1, "events": 1, "locations": 0, "participants": 0}


def test_seed_file_loaded_on_startup(tmp_path):
    import json

    from event_board_api.app.main import create_app

    seed = {
        "users": [{"id": "u1", "username": "ann", "email": "a@x.com"}],
        "events": [
            {
                "id": "e1",
                "title": "Seeded",
                "desc": "From file",
                "date": "2025-01-01",
                "from": "08:00",
                "to": "09:00",
                "user_id": "u1",
                "location_id": "l1",
            }
        ],
    }
    path = tmp_path / "seed.json"
    path.write_text(json.dumps(seed), encoding="utf-8")

    with TestClient(create_app(seed_file=str(path))) as seeded:
        data = seeded.get(f"{API}/users/u1").json()

    assert [e["id"] for e in data["events"]] == ["e1"]


def test_invalid_seed_file_fails_startup(tmp_path):
    import json

    import pytest

    from event_board_api.app.main import create_app

    path = tmp_path / "seed.json"
    path.write_text(json.dumps({"users": [{"id": "u1", "username": "ann"}]}), encoding="utf-8")

    with pytest.raises(ValueError, match="seed.json"):
        with TestClient(create_app(seed_file=str(path))):
            pass
