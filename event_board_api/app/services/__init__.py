"""
Service layer abstraction.

Each service encapsulates the operations for one entity.  Services
receive the store and the notification bus explicitly, so API handlers
never touch module‑level state.
"""
