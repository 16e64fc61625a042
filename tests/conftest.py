"""Shared pytest fixtures and configuration."""

import os
import pytest
from freezegun import freeze_time

# Set test environment variables
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("STORE_BACKEND", "memory")
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test-key")

from estate_admin.services.agent_repository import AgentRepository
from estate_admin.services.developer_repository import DeveloperRepository
from estate_admin.services.entity_store import InMemoryBackend
from estate_admin.services.inquiry_repository import InquiryRepository
from estate_admin.services.property_repository import PropertyRepository
from estate_admin.services.registry import Repositories, reset_repositories
from estate_admin.services.user_repository import UserRepository


@pytest.fixture
def backend():
    """Fresh in-memory key-value backend."""
    return InMemoryBackend()


@pytest.fixture
def property_repo(backend):
    """Property repository seeded with the default listings."""
    return PropertyRepository.from_backend(backend)


@pytest.fixture
def empty_property_repo(backend):
    """Property repository whose store seeds to an empty collection."""
    return PropertyRepository.from_backend(backend, seed=list)


@pytest.fixture
def user_repo(backend):
    """User repository seeded with the default accounts."""
    return UserRepository.from_backend(backend)


@pytest.fixture
def empty_user_repo(backend):
    return UserRepository.from_backend(backend, seed=list)


@pytest.fixture
def agent_repo(backend, user_repo):
    """Agent repository with no agents, backed by the default users."""
    return AgentRepository.from_backend(backend, user_repo, seed=list)


@pytest.fixture
def developer_repo(backend):
    """Developer repository seeded with the default developers."""
    return DeveloperRepository.from_backend(backend)


@pytest.fixture
def inquiry_repo(backend):
    """Inquiry repository with no inquiries."""
    return InquiryRepository.from_backend(backend, seed=list)


@pytest.fixture
def repositories(backend):
    """All repositories over one backend, default seeds."""
    return Repositories(backend)


@pytest.fixture
def frozen_time():
    """Freeze the clock; tests move it explicitly."""
    with freeze_time("2024-12-09 12:00:00") as frozen:
        yield frozen


@pytest.fixture(autouse=True)
def clear_registry():
    """Drop process-wide repositories between tests."""
    reset_repositories()
    yield
    reset_repositories()
