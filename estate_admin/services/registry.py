"""Wiring of one repository per entity type over a shared backend."""

from typing import Optional

from estate_admin.services.agent_repository import AgentRepository
from estate_admin.services.developer_repository import DeveloperRepository
from estate_admin.services.entity_store import KeyValueBackend, build_backend
from estate_admin.services.inquiry_repository import InquiryRepository
from estate_admin.services.property_repository import PropertyRepository
from estate_admin.services.report_service import ReportAssembler
from estate_admin.services.user_repository import UserRepository
from estate_admin.utils.logging import get_structured_logger

logger = get_structured_logger(__name__)


class Repositories:
    """The repositories of one deployment, constructed once and passed to callers."""

    def __init__(self, backend: KeyValueBackend):
        self.backend = backend
        self.properties = PropertyRepository.from_backend(backend)
        self.users = UserRepository.from_backend(backend)
        self.agents = AgentRepository.from_backend(backend, self.users)
        self.inquiries = InquiryRepository.from_backend(backend)
        self.developers = DeveloperRepository.from_backend(backend)
        self.reports = ReportAssembler(self.properties, self.users, self.inquiries)


_repositories: Optional[Repositories] = None


def get_repositories() -> Repositories:
    """Get or create the process-wide repositories from STORE_BACKEND."""
    global _repositories

    if _repositories is None:
        backend = build_backend()
        _repositories = Repositories(backend)
        logger.info("Repositories initialized", backend=type(backend).__name__)

    return _repositories


def reset_repositories() -> None:
    """Drop the cached repositories (tests, backend switches)."""
    global _repositories
    _repositories = None
