"""Developer repository - the developers listings are attributed to."""

import re
from typing import Optional, Union

from estate_admin.data.developers import initial_developers
from estate_admin.models.common import parse_model, utc_now
from estate_admin.models.developer import (
    Developer,
    DeveloperCreate,
    DeveloperStatus,
    DeveloperUpdate,
)
from estate_admin.services.entity_store import EntityStore, KeyValueBackend
from estate_admin.utils.logging import get_structured_logger
from estate_admin.utils.store_config import StoreConfig

logger = get_structured_logger(__name__, collection=StoreConfig.DEVELOPERS_KEY)

_SLUG_DROP = re.compile(r"[^\w\s-]")
_SLUG_SEPARATORS = re.compile(r"[\s_-]+")


def generate_slug(name: str) -> str:
    """URL slug for a developer name: 'Emaar Properties' -> 'emaar-properties'."""
    slug = _SLUG_DROP.sub("", name.lower())
    return _SLUG_SEPARATORS.sub("-", slug).strip("-")


def _unique_slug(base: str, taken: set[str]) -> str:
    slug = base or "developer"
    suffix = 2
    while slug in taken:
        slug = f"{base}-{suffix}"
        suffix += 1
    return slug


def _next_id(developers: list[Developer]) -> str:
    numeric = [int(d.id) for d in developers if d.id.isdigit()]
    return str(max(numeric, default=0) + 1)


class DeveloperRepository:
    """CRUD over developers, addressable by id or slug."""

    def __init__(self, store: EntityStore[Developer]):
        self.store = store

    @classmethod
    def from_backend(cls, backend: KeyValueBackend, seed=initial_developers) -> "DeveloperRepository":
        return cls(EntityStore(backend, StoreConfig.DEVELOPERS_KEY, Developer, seed))

    async def get_all(self) -> list[Developer]:
        return await self.store.load()

    async def get_active(self) -> list[Developer]:
        return [d for d in await self.store.load() if d.status == DeveloperStatus.ACTIVE]

    async def get_featured(self) -> list[Developer]:
        return [d for d in await self.store.load() if d.featured]

    async def get_by_id(self, developer_id: str) -> Optional[Developer]:
        for developer in await self.store.load():
            if developer.id == str(developer_id):
                return developer
        return None

    async def get_by_slug(self, slug: str) -> Optional[Developer]:
        for developer in await self.store.load():
            if developer.slug == slug:
                return developer
        return None

    async def add(self, data: Union[DeveloperCreate, dict]) -> Developer:
        """Add a developer with the next numeric id and a slug unique in the collection."""
        data = parse_model(DeveloperCreate, data)
        developers = await self.store.load()

        now = utc_now()
        developer = Developer(
            **data.model_dump(),
            id=_next_id(developers),
            slug=_unique_slug(generate_slug(data.name), {d.slug for d in developers}),
            created_at=now,
            updated_at=now,
        )
        developers.append(developer)
        await self.store.save(developers)

        logger.info("Developer added", developer_id=developer.id, slug=developer.slug)
        return developer

    async def update(self, developer_id: str, patch: Union[DeveloperUpdate, dict]) -> Optional[Developer]:
        """Apply a partial update; renaming regenerates the slug."""
        patch = parse_model(DeveloperUpdate, patch)
        changes = patch.model_dump(exclude_unset=True, exclude_none=True)
        developers = await self.store.load()

        for index, developer in enumerate(developers):
            if developer.id != str(developer_id):
                continue
            if "name" in changes:
                taken = {d.slug for d in developers if d.id != developer.id}
                changes["slug"] = _unique_slug(generate_slug(changes["name"]), taken)
            changes["updated_at"] = utc_now()
            developers[index] = developer.model_copy(update=changes)
            await self.store.save(developers)
            logger.info("Developer updated", developer_id=developer.id, fields=sorted(changes))
            return developers[index]

        logger.debug("Developer not found for update", developer_id=str(developer_id))
        return None

    async def delete(self, developer_id: str) -> bool:
        developers = await self.store.load()
        remaining = [d for d in developers if d.id != str(developer_id)]
        if len(remaining) == len(developers):
            logger.debug("Developer not found for delete", developer_id=str(developer_id))
            return False

        await self.store.save(remaining)
        logger.info("Developer deleted", developer_id=str(developer_id))
        return True

    async def add_project(self, developer_id: str, project_id: str) -> Optional[Developer]:
        """Link a project id; linking one that is already present changes nothing."""
        developers = await self.store.load()
        for developer in developers:
            if developer.id != str(developer_id):
                continue
            if project_id not in developer.projects:
                developer.projects.append(project_id)
                developer.updated_at = utc_now()
                await self.store.save(developers)
            return developer
        return None

    async def remove_project(self, developer_id: str, project_id: str) -> Optional[Developer]:
        developers = await self.store.load()
        for developer in developers:
            if developer.id != str(developer_id):
                continue
            if project_id in developer.projects:
                developer.projects.remove(project_id)
                developer.updated_at = utc_now()
                await self.store.save(developers)
            return developer
        return None

    async def reset_all(self) -> list[Developer]:
        developers = await self.store.reseed()
        logger.info("Developers reset to defaults", record_count=len(developers))
        return developers
