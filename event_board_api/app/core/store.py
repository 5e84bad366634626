"""
In‑memory storage for users, events, locations and participants.

The ``InMemoryStore`` owns one ``Collection`` per entity.  Records are
plain dictionaries kept in insertion order and keyed by their
identifier, so lookups by id are O(1) while listing still returns
records in creation order.  Nothing is persisted: the dataset lives as
long as the process and can optionally be seeded from a JSON file at
startup (see ``load_seed``).

Identifiers are opaque strings.  Every id crossing this module's
boundary is normalised with ``str`` so that ``1`` and ``"1"`` address
the same record.
"""

import json
import logging
import secrets
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from pydantic import BaseModel, ValidationError

from ..schemas.event import EventCreate
from ..schemas.location import LocationCreate
from ..schemas.participant import ParticipantCreate
from ..schemas.user import UserCreate

logger = logging.getLogger(__name__)

# URL‑safe alphabet and length used for generated identifiers.
ID_ALPHABET = "useandom-26T198340PX75pxJACKVERYMINDBUSHWOLF_GQZbfghjklqvwyzrict"
ID_LENGTH = 21


def generate_id(size: int = ID_LENGTH) -> str:
    """Return a random URL‑safe identifier."""
    return "".join(secrets.choice(ID_ALPHABET) for _ in range(size))


def canonical_id(value: Any) -> Optional[str]:
    """Normalise an identifier to its canonical string form."""
    if value is None:
        return None
    return str(value)


class RecordNotFoundError(LookupError):
    """Raised when an update, delete or lookup targets a missing id."""

    def __init__(self, entity: str, record_id: Any) -> None:
        self.entity = entity
        self.record_id = record_id
        super().__init__(f"{entity} {record_id} not found")


class Collection:
    """Ordered collection of records for a single entity type."""

    def __init__(self, entity: str) -> None:
        self.entity = entity
        self._records: Dict[str, Dict[str, Any]] = {}

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: Any) -> bool:
        return canonical_id(record_id) in self._records

    def list(self) -> List[Dict[str, Any]]:
        """Return copies of all records in insertion order."""
        return [dict(record) for record in self._records.values()]

    def get(self, record_id: Any) -> Optional[Dict[str, Any]]:
        """Return a copy of the record with ``record_id`` or ``None``."""
        record = self._records.get(canonical_id(record_id))
        return dict(record) if record is not None else None

    def find(self, field: str, value: Any) -> List[Dict[str, Any]]:
        """Return every record whose ``field`` equals ``value``.

        Both sides are compared in canonical string form.  A ``None``
        value never matches.
        """
        wanted = canonical_id(value)
        if wanted is None:
            return []
        return [
            dict(record)
            for record in self._records.values()
            if canonical_id(record.get(field)) == wanted
        ]

    def create(self, fields: Dict[str, Any]) -> Dict[str, Any]:
        """Append a new record with a freshly generated id and return it."""
        record_id = generate_id()
        while record_id in self._records:
            record_id = generate_id()
        record = {"id": record_id, **fields}
        self._records[record_id] = record
        return dict(record)

    def update(self, record_id: Any, fields: Dict[str, Any]) -> Dict[str, Any]:
        """Shallow‑merge ``fields`` over an existing record.

        The merged record replaces the old one in the same position.
        The id itself cannot be changed.  Raises ``RecordNotFoundError``
        when the id is unknown.
        """
        key = canonical_id(record_id)
        if key not in self._records:
            raise RecordNotFoundError(self.entity, record_id)
        merged = {**self._records[key], **fields, "id": key}
        self._records[key] = merged
        return dict(merged)

    def delete(self, record_id: Any) -> Dict[str, Any]:
        """Remove a record and return its last values."""
        key = canonical_id(record_id)
        if key not in self._records:
            raise RecordNotFoundError(self.entity, record_id)
        return self._records.pop(key)

    def delete_all(self) -> int:
        """Remove every record and return how many there were."""
        count = len(self._records)
        self._records.clear()
        return count

    def load(self, records: Iterable[Dict[str, Any]]) -> int:
        """Append pre‑built records, generating ids where missing."""
        loaded = 0
        for raw in records:
            record = dict(raw)
            record_id = canonical_id(record.get("id")) or generate_id()
            record["id"] = record_id
            self._records[record_id] = record
            loaded += 1
        return loaded


class InMemoryStore:
    """Container owning the four entity collections."""

    COLLECTIONS = ("users", "events", "locations", "participants")

    # Schema every seed record must satisfy, per collection.
    SEED_SCHEMAS: Dict[str, type] = {
        "users": UserCreate,
        "events": EventCreate,
        "locations": LocationCreate,
        "participants": ParticipantCreate,
    }

    def __init__(self) -> None:
        self.users = Collection("User")
        self.events = Collection("Event")
        self.locations = Collection("Location")
        self.participants = Collection("Participant")

    def counts(self) -> Dict[str, int]:
        """Return the number of records held per collection."""
        return {name: len(getattr(self, name)) for name in self.COLLECTIONS}

    def clear(self) -> None:
        for name in self.COLLECTIONS:
            getattr(self, name).delete_all()

    def load_seed(self, path: str) -> Dict[str, int]:
        """Populate collections from a JSON document.

        The file must contain an object whose keys are collection names
        (``users``, ``events``, ``locations``, ``participants``) and
        whose values are lists of records.  Unknown keys are ignored.
        Every record is checked against the entity's create schema
        before anything is stored; a malformed record raises
        ``ValueError`` naming the file and the offending record.
        Returns the number of records loaded per collection.
        """
        seed_path = Path(path).resolve()
        with open(seed_path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Seed file {seed_path} must contain a JSON object")
        validated = {
            name: [
                self._validate_seed_record(seed_path, name, index, raw)
                for index, raw in enumerate(data.get(name) or [])
            ]
            for name in self.COLLECTIONS
        }
        loaded: Dict[str, int] = {}
        for name, records in validated.items():
            loaded[name] = getattr(self, name).load(records)
        logger.info("Loaded seed data from %s: %s", seed_path, loaded)
        return loaded

    def _validate_seed_record(self, seed_path: Path, name: str, index: int, raw: Any) -> Dict[str, Any]:
        schema = self.SEED_SCHEMAS[name]
        if not isinstance(raw, dict):
            raise ValueError(f"Seed file {seed_path}: {name}[{index}] must be an object")
        try:
            model: BaseModel = schema.model_validate(raw)
        except ValidationError as e:
            raise ValueError(f"Seed file {seed_path}: invalid record {name}[{index}]: {e}") from e
        record = model.model_dump(by_alias=True)
        if raw.get("id") is not None:
            record["id"] = raw["id"]
        return record
