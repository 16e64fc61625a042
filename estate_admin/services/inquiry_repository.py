"""Inquiry repository - buyer inquiries with append-only notes and status history."""

from datetime import datetime, timedelta
from typing import Optional, Union

from ulid import ULID

from estate_admin.data.inquiries import default_inquiry_inputs
from estate_admin.models.common import parse_model, utc_now
from estate_admin.models.inquiry import (
    Inquiry,
    InquiryCreate,
    InquiryNote,
    InquiryStatus,
    StatusHistoryEntry,
)
from estate_admin.models.stats import StatsData
from estate_admin.services.entity_store import EntityStore, KeyValueBackend
from estate_admin.services.statistics import created_window_stats
from estate_admin.utils.errors import EntityValidationError
from estate_admin.utils.logging import get_structured_logger, mask_sensitive_data
from estate_admin.utils.store_config import StoreConfig

logger = get_structured_logger(__name__, collection=StoreConfig.INQUIRIES_KEY)

SYSTEM_ACTOR = "system"


def generate_inquiry_id() -> str:
    """Generate a text-based inquiry ID (ULID format)."""
    return str(ULID())


def build_inquiry(data: InquiryCreate, now: Optional[datetime] = None) -> Inquiry:
    """New inquiry in status New with its opening history entry."""
    now = now or utc_now()
    return Inquiry(
        id=generate_inquiry_id(),
        **data.model_dump(),
        status=InquiryStatus.NEW,
        notes=[],
        status_history=[
            StatusHistoryEntry(status=InquiryStatus.NEW, changed_at=now, changed_by=SYSTEM_ACTOR)
        ],
        created_at=now,
        updated_at=now,
    )


def initial_inquiries() -> list[Inquiry]:
    """Default inquiries, dated one day back."""
    submitted = utc_now() - timedelta(days=1)
    return [build_inquiry(data, submitted) for data in default_inquiry_inputs()]


class InquiryRepository:
    """CRUD over inquiries. Notes and status history are only ever appended to."""

    def __init__(self, store: EntityStore[Inquiry]):
        self.store = store

    @classmethod
    def from_backend(cls, backend: KeyValueBackend, seed=initial_inquiries) -> "InquiryRepository":
        return cls(EntityStore(backend, StoreConfig.INQUIRIES_KEY, Inquiry, seed))

    async def get_all(self) -> list[Inquiry]:
        return await self.store.load()

    async def get_by_id(self, inquiry_id: str) -> Optional[Inquiry]:
        for inquiry in await self.store.load():
            if inquiry.id == inquiry_id:
                return inquiry
        return None

    async def get_by_property_id(self, property_id: Union[int, str]) -> list[Inquiry]:
        property_id = str(property_id)
        return [i for i in await self.store.load() if i.property_id == property_id]

    async def get_by_status(self, status: Union[InquiryStatus, str]) -> list[Inquiry]:
        return [i for i in await self.store.load() if i.status == status]

    async def create(self, data: Union[InquiryCreate, dict]) -> Inquiry:
        data = parse_model(InquiryCreate, data)
        inquiries = await self.store.load()

        inquiry = build_inquiry(data)
        inquiries.append(inquiry)
        await self.store.save(inquiries)

        logger.info(
            "Inquiry created",
            inquiry_id=inquiry.id,
            property_id=inquiry.property_id,
            requester_email=mask_sensitive_data(inquiry.email)
        )
        return inquiry

    async def update_status(
        self,
        inquiry_id: str,
        new_status: Union[InquiryStatus, str],
        actor: str,
    ) -> Optional[Inquiry]:
        """Set the status and append a history entry, even when the status is unchanged."""
        try:
            new_status = InquiryStatus(new_status)
        except ValueError as e:
            raise EntityValidationError(f"Unknown inquiry status: {new_status}") from e
        inquiries = await self.store.load()

        for inquiry in inquiries:
            if inquiry.id != inquiry_id:
                continue
            now = utc_now()
            inquiry.status = new_status
            inquiry.updated_at = now
            inquiry.status_history.append(
                StatusHistoryEntry(status=new_status, changed_at=now, changed_by=actor)
            )
            await self.store.save(inquiries)
            logger.info(
                "Inquiry status changed",
                inquiry_id=inquiry_id,
                status=new_status.value,
                changed_by=actor
            )
            return inquiry

        logger.debug("Inquiry not found for status change", inquiry_id=inquiry_id)
        return None

    async def add_note(self, inquiry_id: str, content: str, author: str) -> Optional[Inquiry]:
        inquiries = await self.store.load()

        for inquiry in inquiries:
            if inquiry.id != inquiry_id:
                continue
            now = utc_now()
            inquiry.notes.append(
                InquiryNote(id=str(ULID()), content=content, created_at=now, created_by=author)
            )
            inquiry.updated_at = now
            await self.store.save(inquiries)
            logger.info("Inquiry note added", inquiry_id=inquiry_id, created_by=author)
            return inquiry

        logger.debug("Inquiry not found for note", inquiry_id=inquiry_id)
        return None

    async def delete(self, inquiry_id: str) -> bool:
        inquiries = await self.store.load()
        remaining = [i for i in inquiries if i.id != inquiry_id]
        if len(remaining) == len(inquiries):
            return False

        await self.store.save(remaining)
        logger.info("Inquiry deleted", inquiry_id=inquiry_id)
        return True

    async def seed_defaults(self) -> list[Inquiry]:
        """Create the default inquiries, but only into an empty collection."""
        inquiries = await self.store.load()
        if inquiries:
            return inquiries

        for data in default_inquiry_inputs():
            await self.create(data)
        return await self.store.load()

    async def get_stats(self) -> StatsData:
        inquiries = await self.store.load()
        return created_window_stats([i.created_at for i in inquiries])
