"""
Business logic for users.

The ``UserService`` stores users in the in‑memory store and announces
every change on the notification bus.  Users are returned with their
events resolved.
"""

from typing import Any, List

from ..schemas.common import DeleteAllOutput
from ..schemas.nested import UserWithEvents
from ..schemas.user import UserCreate, UserUpdate
from .base import RecordService, changed_fields


class UserService(RecordService):
    """Service for managing users."""

    entity = "user"
    collection_name = "users"

    async def list_users(self) -> List[UserWithEvents]:
        return self._list()

    async def get_user(self, user_id: Any) -> UserWithEvents:
        """Retrieve a single user by ID.

        Raises ``RecordNotFoundError`` if the user does not exist.
        """
        return self.render(self._fetch(user_id))

    async def create_user(self, data: UserCreate) -> UserWithEvents:
        """Create a user and publish ``userCreated``."""
        return self.render(self._create(data.model_dump()))

    async def update_user(self, user_id: Any, data: UserUpdate) -> UserWithEvents:
        """Merge the supplied fields into a user and publish ``userUpdated``."""
        return self.render(self._update(user_id, changed_fields(data)))

    async def delete_user(self, user_id: Any) -> UserWithEvents:
        """Remove a user and publish ``userDeleted``.

        Events and participants referencing the user are left in
        place; the returned user therefore still lists its events.
        """
        return self.render(self._delete(user_id))

    async def delete_all_users(self) -> DeleteAllOutput:
        return self._delete_all()
