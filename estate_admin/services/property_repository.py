"""Property repository - listings, section queries, view tracking and stats."""

from datetime import timedelta
from typing import Any, Optional, Union

from estate_admin.data.properties import initial_properties
from estate_admin.models.common import parse_model, utc_now
from estate_admin.models.property import (
    Property,
    PropertyCategory,
    PropertyCreate,
    PropertyFilters,
    PropertyPage,
    PropertyStatus,
    PropertyUpdate,
)
from estate_admin.models.stats import PropertyStats, ViewsData, ViewsSnapshot
from estate_admin.services.entity_store import EntityStore, KeyValueBackend, SnapshotStore
from estate_admin.services.statistics import created_window_stats, percentage_change, round_half_up
from estate_admin.utils.errors import EntityValidationError
from estate_admin.utils.logging import get_structured_logger
from estate_admin.utils.store_config import StoreConfig

logger = get_structured_logger(__name__, collection=StoreConfig.PROPERTIES_KEY)

PropertyId = Union[int, str]

# Site sections are a fixed grouping of categories
SECTION_CATEGORIES: dict[str, frozenset[PropertyCategory]] = {
    "villas": frozenset({PropertyCategory.VILLA, PropertyCategory.SEMI, PropertyCategory.TOWNHOUSE}),
    "apartments": frozenset({PropertyCategory.APARTMENT, PropertyCategory.PENTHOUSE}),
}

BASE_PROPERTY_ID = 1


def normalize_property_id(value: Any) -> Optional[int]:
    """Coerce an int or numeric string id; anything else cannot match a listing."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def _new_views_snapshot() -> ViewsSnapshot:
    return ViewsSnapshot(period_start=utc_now())


class PropertyRepository:
    """CRUD and analytics over the property collection."""

    def __init__(self, store: EntityStore[Property], views_store: SnapshotStore[ViewsSnapshot]):
        self.store = store
        self.views_store = views_store

    @classmethod
    def from_backend(cls, backend: KeyValueBackend, seed=initial_properties) -> "PropertyRepository":
        return cls(
            EntityStore(backend, StoreConfig.PROPERTIES_KEY, Property, seed),
            SnapshotStore(backend, StoreConfig.VIEWS_KEY, ViewsSnapshot, _new_views_snapshot),
        )

    async def get_all(self) -> list[Property]:
        return await self.store.load()

    async def get_by_id(self, property_id: PropertyId) -> Optional[Property]:
        target = normalize_property_id(property_id)
        if target is None:
            return None
        for prop in await self.store.load():
            if prop.id == target:
                return prop
        return None

    async def get_by_category(self, category: Union[PropertyCategory, str]) -> list[Property]:
        return [p for p in await self.store.load() if p.category == category]

    async def get_by_section(self, section: str) -> list[Property]:
        """Listings in the 'villas' or 'apartments' section."""
        categories = SECTION_CATEGORIES.get(section)
        if categories is None:
            raise EntityValidationError(f"Unknown section: {section}")
        return [p for p in await self.store.load() if p.category in categories]

    async def get_featured(self) -> list[Property]:
        return [p for p in await self.store.load() if p.is_featured]

    async def get_by_status(self, status: Union[PropertyStatus, str]) -> list[Property]:
        return [p for p in await self.store.load() if p.status == status]

    async def get_by_location(self, location: str) -> list[Property]:
        needle = location.lower()
        return [
            p for p in await self.store.load()
            if needle in p.location.lower() or needle in p.city.lower()
        ]

    async def search(self, filters: Union[PropertyFilters, dict, None] = None) -> list[Property]:
        """Filter listings, newest first."""
        filters = parse_model(PropertyFilters, filters or {})
        results = []
        for p in await self.store.load():
            if filters.type and p.type.lower() != filters.type.lower():
                continue
            if filters.category and p.category != filters.category:
                continue
            if filters.min_price is not None and p.price < filters.min_price:
                continue
            if filters.max_price is not None and p.price > filters.max_price:
                continue
            if filters.bedrooms is not None and p.bedrooms != filters.bedrooms:
                continue
            if filters.location and filters.location.lower() not in p.location.lower():
                continue
            if filters.featured is not None and p.is_featured != filters.featured:
                continue
            if filters.developer and p.developer != filters.developer:
                continue
            if filters.agent_name and (p.agent is None or p.agent.name.lower() != filters.agent_name.lower()):
                continue
            results.append(p)
        return sorted(results, key=lambda p: p.created_at, reverse=True)

    async def search_page(
        self,
        filters: Union[PropertyFilters, dict, None] = None,
        page_size: int = 10,
        after_id: Optional[PropertyId] = None,
    ) -> PropertyPage:
        """
        One page of ``search`` results.

        Pass the previous page's ``last_visible`` as ``after_id`` to get the
        next page. An ``after_id`` that is not among the results starts from
        the first listing.
        """
        if page_size < 1:
            raise EntityValidationError(f"page_size must be positive, got {page_size}")
        results = await self.search(filters)

        start = 0
        cursor = normalize_property_id(after_id)
        if cursor is not None:
            for index, prop in enumerate(results):
                if prop.id == cursor:
                    start = index + 1
                    break

        page = results[start:start + page_size]
        return PropertyPage(properties=page, last_visible=page[-1].id if page else None)

    async def add(self, data: Union[PropertyCreate, dict]) -> Property:
        """Add a listing with the next numeric id."""
        data = parse_model(PropertyCreate, data)
        properties = await self.store.load()

        new_id = max((p.id for p in properties), default=BASE_PROPERTY_ID - 1) + 1
        prop = Property(
            **data.model_dump(),
            id=new_id,
            created_at=utc_now(),
            view_count=0,
        )
        properties.append(prop)
        await self.store.save(properties)

        logger.info("Property added", property_id=prop.id, category=prop.category.value)
        return prop

    async def update(self, property_id: PropertyId, patch: Union[PropertyUpdate, dict]) -> Optional[Property]:
        patch = parse_model(PropertyUpdate, patch)
        target = normalize_property_id(property_id)
        properties = await self.store.load()

        for index, prop in enumerate(properties):
            if prop.id == target:
                merged = {**prop.model_dump(), **patch.model_dump(exclude_unset=True)}
                properties[index] = parse_model(Property, merged)
                await self.store.save(properties)
                logger.info(
                    "Property updated",
                    property_id=prop.id,
                    fields=sorted(patch.model_fields_set)
                )
                return properties[index]

        logger.debug("Property not found for update", property_id=str(property_id))
        return None

    async def delete(self, property_id: PropertyId) -> bool:
        target = normalize_property_id(property_id)
        properties = await self.store.load()
        remaining = [p for p in properties if p.id != target]

        if len(remaining) == len(properties):
            logger.debug("Property not found for delete", property_id=str(property_id))
            return False

        await self.store.save(remaining)
        logger.info("Property deleted", property_id=target)
        return True

    async def track_view(self, property_id: PropertyId) -> Optional[Property]:
        """Count one view of a listing; None if the listing does not exist."""
        target = normalize_property_id(property_id)
        properties = await self.store.load()

        for prop in properties:
            if prop.id == target:
                prop.view_count += 1
                prop.last_viewed = utc_now()
                await self.store.save(properties)
                await self.update_views_data(properties)
                return prop

        logger.debug("Property not found for view tracking", property_id=str(property_id))
        return None

    async def update_views_data(self, properties: Optional[list[Property]] = None) -> ViewsSnapshot:
        """
        Refresh the aggregate views snapshot.

        Once a full window has passed since ``period_start`` the views counted
        in that window become last month's views and a new window opens at the
        aggregate recorded by the previous refresh. If more than one window has
        passed, the window before the current one saw no refresh, so last
        month's views are 0.
        """
        if properties is None:
            properties = await self.store.load()
        total = sum(p.view_count for p in properties)

        snapshot = await self.views_store.load()
        now = utc_now()
        span = timedelta(days=StoreConfig.STATS_WINDOW_DAYS)
        elapsed = now - snapshot.period_start

        windows_passed = elapsed // span
        if windows_passed >= 1:
            # Views recorded up to the previous refresh belong to the oldest closed window
            if windows_passed == 1:
                snapshot.last_month_views = max(snapshot.total_views - snapshot.baseline_views, 0)
            else:
                snapshot.last_month_views = 0
            snapshot.baseline_views = snapshot.total_views
            snapshot.period_start = snapshot.period_start + span * windows_passed
            logger.info(
                "Views window rolled over",
                last_month_views=snapshot.last_month_views,
                windows_passed=windows_passed
            )

        snapshot.total_views = total
        snapshot.this_month_views = max(total - snapshot.baseline_views, 0)
        snapshot.updated_at = now
        await self.views_store.save(snapshot)
        return snapshot

    async def get_views_data(self) -> ViewsData:
        snapshot = await self.update_views_data()
        return ViewsData(
            total_views=snapshot.total_views,
            last_month_views=snapshot.last_month_views,
            this_month_views=snapshot.this_month_views,
        )

    async def get_stats(self) -> PropertyStats:
        properties = await self.store.load()
        base = created_window_stats([p.created_at for p in properties])

        snapshot = await self.update_views_data(properties)
        views_change = percentage_change(snapshot.this_month_views, snapshot.last_month_views)

        return PropertyStats(
            **base.model_dump(),
            total_views=snapshot.total_views,
            views_change=abs(round_half_up(views_change)),
            is_views_change_positive=views_change >= 0,
        )

    async def reset_all(self) -> list[Property]:
        """Replace every listing with the default collection."""
        properties = await self.store.reseed()
        logger.info("Properties reset to defaults", record_count=len(properties))
        return properties
