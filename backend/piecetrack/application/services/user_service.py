"""Application service (use case) for User operations."""

import logging

from piecetrack.application.interfaces import USERS, RecordStore
from piecetrack.application.schemas.user import UserCreate, UserUpdate
from piecetrack.application.services.record_codec import user_from_record, user_to_record
from piecetrack.domain.entities import User
from piecetrack.domain.exceptions import EntityNotFoundError, EntityValidationError

logger = logging.getLogger(__name__)


class UserService:
    """Orchestrates user CRUD logic. Depends on the record store port (DI)."""

    def __init__(self, store: RecordStore):
        self._store = store

    async def list_users(self) -> list[User]:
        rows = await self._store.list_all(USERS)
        users = [user_from_record(key, record) for key, record in rows]
        return sorted(users, key=lambda u: u.display_name.casefold())

    async def get_user(self, user_id: str) -> User:
        record = await self._store.get_by_key(USERS, user_id)
        if record is None:
            raise EntityNotFoundError("User", user_id)
        return user_from_record(user_id, record)

    async def create_user(self, data: UserCreate) -> User:
        display_name = _required_name(data.display_name)
        user = User(display_name=display_name, login_name=data.login_name.strip())
        user.id = await self._store.append(USERS, user_to_record(user))
        logger.info("Created user %s (%s)", user.id, user.display_name)
        return user

    async def update_user(self, user_id: str, data: UserUpdate) -> User:
        user = await self.get_user(user_id)

        changes: dict[str, str] = {}
        if data.display_name is not None:
            changes["display_name"] = _required_name(data.display_name)
        if data.login_name is not None:
            changes["login_name"] = data.login_name.strip()

        user.update(**changes)
        if changes:
            await self._store.write_by_key(USERS, user_id, changes, merge=True)
            logger.info("Updated user %s: %s", user_id, ", ".join(sorted(changes)))
        return user

    async def delete_user(self, user_id: str) -> bool:
        deleted = await self._store.remove_by_key(USERS, user_id)
        if not deleted:
            raise EntityNotFoundError("User", user_id)
        logger.info("Deleted user %s", user_id)
        return deleted


def _required_name(value: str) -> str:
    name = value.strip()
    if not name:
        raise EntityValidationError("User", "display_name", "display name is required")
    return name
