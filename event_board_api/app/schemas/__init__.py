"""
Pydantic schema definitions for API payloads.

Each entity (users, events, locations, participants) defines its own
models for request and response bodies.  Schemas are kept apart from
the in‑memory records so the stored representation can change without
affecting the API.
"""
