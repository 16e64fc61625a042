"""User repository - accounts, roles and role-derived permissions."""

from typing import Optional, Union

from ulid import ULID

from estate_admin.data.users import initial_users
from estate_admin.models.common import parse_model, utc_now
from estate_admin.models.stats import StatsData
from estate_admin.models.user import (
    ALL_PERMISSIONS,
    User,
    UserCreate,
    UserRole,
    UserStatus,
    UserUpdate,
    permissions_for,
)
from estate_admin.services.entity_store import EntityStore, KeyValueBackend
from estate_admin.services.statistics import build_stats, window_bounds
from estate_admin.utils.logging import get_structured_logger
from estate_admin.utils.store_config import StoreConfig

logger = get_structured_logger(__name__, collection=StoreConfig.USERS_KEY)


def generate_user_id() -> str:
    """Generate a text-based user ID (ULID format)."""
    return str(ULID())


class UserRepository:
    """CRUD over user accounts. Permissions are always recomputed from the role."""

    def __init__(self, store: EntityStore[User]):
        self.store = store

    @classmethod
    def from_backend(cls, backend: KeyValueBackend, seed=initial_users) -> "UserRepository":
        return cls(EntityStore(backend, StoreConfig.USERS_KEY, User, seed))

    async def get_all(self) -> list[User]:
        return await self.store.load()

    async def get_by_id(self, user_id: str) -> Optional[User]:
        for user in await self.store.load():
            if user.id == user_id:
                return user
        return None

    async def get_by_role(self, role: Union[UserRole, str]) -> list[User]:
        return [u for u in await self.store.load() if u.role == role]

    async def create(self, data: Union[UserCreate, dict]) -> User:
        data = parse_model(UserCreate, data)
        users = await self.store.load()

        user = User(
            id=generate_user_id(),
            **data.model_dump(),
            permissions=permissions_for(data.role),
            created_at=utc_now(),
        )
        users.append(user)
        await self.store.save(users)

        logger.info("User created", user_id=user.id, role=user.role.value)
        return user

    async def update(self, user_id: str, patch: Union[UserUpdate, dict]) -> Optional[User]:
        """Apply a partial update; a role change recomputes permissions in the same write."""
        patch = parse_model(UserUpdate, patch)
        changes = patch.model_dump(exclude_unset=True, exclude_none=True)
        users = await self.store.load()

        for index, user in enumerate(users):
            if user.id != user_id:
                continue
            if "role" in changes:
                changes["permissions"] = permissions_for(changes["role"])
            users[index] = user.model_copy(update=changes)
            await self.store.save(users)
            logger.info("User updated", user_id=user_id, fields=sorted(changes))
            return users[index]

        logger.debug("User not found for update", user_id=user_id)
        return None

    async def update_status(self, user_id: str, status: Union[UserStatus, str]) -> Optional[User]:
        return await self.update(user_id, {"status": status})

    async def record_login(self, user_id: str) -> Optional[User]:
        """Stamp last_login with the current time."""
        users = await self.store.load()
        for user in users:
            if user.id == user_id:
                user.last_login = utc_now()
                await self.store.save(users)
                return user
        return None

    async def delete(self, user_id: str) -> bool:
        users = await self.store.load()
        remaining = [u for u in users if u.id != user_id]
        if len(remaining) == len(users):
            logger.debug("User not found for delete", user_id=user_id)
            return False

        await self.store.save(remaining)
        logger.info("User deleted", user_id=user_id)
        return True

    async def has_permission(self, user_id: str, permission: str) -> bool:
        user = await self.get_by_id(user_id)
        if user is None:
            return False
        return ALL_PERMISSIONS in user.permissions or permission in user.permissions

    async def get_stats(self) -> StatsData:
        """
        Active users now versus active users that already existed a window ago.

        ``total`` counts only Active users.
        """
        users = await self.store.load()
        current_start, _ = window_bounds()

        active = [u for u in users if u.status == UserStatus.ACTIVE]
        previously_active = [u for u in active if u.created_at < current_start]
        return build_stats(len(active), len(active), len(previously_active))
