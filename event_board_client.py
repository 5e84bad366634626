"""Event Board API client.

This module defines a small client wrapper around the REST routes of
the Event Board API.  It uses the ``requests`` library internally to
make HTTP calls and exposes one method per query and mutation:

* users: :meth:`list_users`, :meth:`get_user`, :meth:`create_user`,
  :meth:`update_user`, :meth:`delete_user`, :meth:`delete_all_users`
* events: :meth:`list_events`, :meth:`get_event`, :meth:`add_event`,
  :meth:`update_event`, :meth:`delete_event`, :meth:`delete_all_events`
* locations and participants follow the same pattern.

Every method returns a tuple ``(data, error)``.  On success ``error``
is ``None``; on failure ``data`` is ``None`` (or an empty list for
listings) and ``error`` is a dictionary with the keys ``status_code``
and ``message``.

Subscriptions are served over WebSocket; :meth:`subscription_url`
builds the URL to connect to with any WebSocket client.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import urlencode, urlsplit, urlunsplit

import requests


logger = logging.getLogger(__name__)

Result = Tuple[Optional[Any], Optional[Dict[str, Any]]]


@dataclass
class Resource:
    """A collection exposed by the API.

    Attributes:
        name: Collection name, e.g. ``users``.
        path: Path of the collection relative to the API prefix.
    """

    name: str
    path: str

    def item(self, record_id: Any) -> str:
        return f"{self.path}/{record_id}"


class EventBoardAPI:
    """Client for interacting with the Event Board API."""

    USERS = Resource("users", "/users")
    EVENTS = Resource("events", "/events")
    LOCATIONS = Resource("locations", "/locations")
    PARTICIPANTS = Resource("participants", "/participants")

    def __init__(
        self,
        *,
        base_url: str,
        prefix: str = "/api/v1",
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the server, e.g. ``http://localhost:4000``.
            prefix: Path prefix of the versioned API.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Timeout in seconds applied to every request.
        """
        self.base_url = base_url.rstrip("/")
        self.prefix = prefix.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(self, method: str, path: str, *, json_body: Any | None = None) -> Result:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to the API prefix (e.g. ``/users/``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.
        """
        url = f"{self.base_url}{self.prefix}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(method, url, json=json_body, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}
        if response.status_code >= 400:
            try:
                err_json = response.json()
                detail = err_json.get("detail") if isinstance(err_json, dict) else None
                # Validation errors carry a list of problems in ``detail``.
                message = detail if isinstance(detail, str) else str(detail or err_json)
            except ValueError:
                message = response.text
            logger.error("API request failed (%s): %s", response.status_code, message)
            return None, {"status_code": response.status_code, "message": message}
        if response.content:
            return response.json(), None
        return None, None

    def _list(self, resource: Resource) -> Tuple[List[Dict[str, Any]], Optional[Dict[str, Any]]]:
        logger.debug("Listing %s", resource.name)
        data, error = self._request("GET", f"{resource.path}/")
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def _get(self, resource: Resource, record_id: Any) -> Result:
        return self._request("GET", resource.item(record_id))

    def _create(self, resource: Resource, payload: Dict[str, Any]) -> Result:
        return self._request("POST", f"{resource.path}/", json_body=payload)

    def _update(self, resource: Resource, record_id: Any, payload: Dict[str, Any]) -> Result:
        return self._request("PUT", resource.item(record_id), json_body=payload)

    def _delete(self, resource: Resource, record_id: Any) -> Result:
        return self._request("DELETE", resource.item(record_id))

    def _delete_all(self, resource: Resource) -> Tuple[Optional[int], Optional[Dict[str, Any]]]:
        data, error = self._request("DELETE", f"{resource.path}/")
        if error:
            return None, error
        return data.get("count"), None

    # ------------------------------------------------------------------
    # User operations
    # ------------------------------------------------------------------
    def list_users(self):
        """Retrieve all users with their events."""
        return self._list(self.USERS)

    def get_user(self, user_id: Any) -> Result:
        return self._get(self.USERS, user_id)

    def create_user(self, payload: Dict[str, Any]) -> Result:
        """Create a user from ``username`` and ``email``."""
        return self._create(self.USERS, payload)

    def update_user(self, user_id: Any, payload: Dict[str, Any]) -> Result:
        return self._update(self.USERS, user_id, payload)

    def delete_user(self, user_id: Any) -> Result:
        return self._delete(self.USERS, user_id)

    def delete_all_users(self):
        """Remove every user.  Returns ``(count, error)``."""
        return self._delete_all(self.USERS)

    # ------------------------------------------------------------------
    # Event operations
    # ------------------------------------------------------------------
    def list_events(self):
        """Retrieve all events with their user, location and participants."""
        return self._list(self.EVENTS)

    def get_event(self, event_id: Any) -> Result:
        return self._get(self.EVENTS, event_id)

    def add_event(self, payload: Dict[str, Any]) -> Result:
        """Create an event.

        The payload uses the wire field names, including ``from``.
        """
        return self._create(self.EVENTS, payload)

    def update_event(self, event_id: Any, payload: Dict[str, Any]) -> Result:
        return self._update(self.EVENTS, event_id, payload)

    def delete_event(self, event_id: Any) -> Result:
        return self._delete(self.EVENTS, event_id)

    def delete_all_events(self):
        return self._delete_all(self.EVENTS)

    # ------------------------------------------------------------------
    # Location operations
    # ------------------------------------------------------------------
    def list_locations(self):
        return self._list(self.LOCATIONS)

    def get_location(self, location_id: Any) -> Result:
        return self._get(self.LOCATIONS, location_id)

    def create_location(self, payload: Dict[str, Any]) -> Result:
        return self._create(self.LOCATIONS, payload)

    def update_location(self, location_id: Any, payload: Dict[str, Any]) -> Result:
        return self._update(self.LOCATIONS, location_id, payload)

    def delete_location(self, location_id: Any) -> Result:
        return self._delete(self.LOCATIONS, location_id)

    def delete_all_locations(self):
        return self._delete_all(self.LOCATIONS)

    # ------------------------------------------------------------------
    # Participant operations
    # ------------------------------------------------------------------
    def list_participants(self):
        return self._list(self.PARTICIPANTS)

    def get_participant(self, participant_id: Any) -> Result:
        return self._get(self.PARTICIPANTS, participant_id)

    def create_participant(self, payload: Dict[str, Any]) -> Result:
        return self._create(self.PARTICIPANTS, payload)

    def update_participant(self, participant_id: Any, payload: Dict[str, Any]) -> Result:
        return self._update(self.PARTICIPANTS, participant_id, payload)

    def delete_participant(self, participant_id: Any) -> Result:
        return self._delete(self.PARTICIPANTS, participant_id)

    def delete_all_participants(self):
        return self._delete_all(self.PARTICIPANTS)

    # ------------------------------------------------------------------
    # Subscriptions
    # ------------------------------------------------------------------
    def subscription_url(self, topic: str, **filters: Any) -> str:
        """Return the WebSocket URL streaming notifications for ``topic``.

        Keyword arguments become query parameters, e.g.
        ``subscription_url("userCreated", id="abc")``.  ``None`` values
        are skipped.
        """
        parts = urlsplit(self.base_url)
        scheme = "wss" if parts.scheme == "https" else "ws"
        query = urlencode({k: v for k, v in filters.items() if v is not None})
        path = f"{parts.path}{self.prefix}/subscriptions/{topic}"
        return urlunsplit((scheme, parts.netloc, path, query, ""))
