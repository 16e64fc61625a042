"""Tests for AgentRepository."""

import pytest
import pytest_asyncio
from datetime import date, timedelta
from estate_admin.services.agent_repository import AgentRepository, month_key
from estate_admin.utils.errors import AgentValidationError, EntityValidationError
from estate_admin.utils.store_config import StoreConfig
from tests.utils.factories import create_agent_data


@pytest_asyncio.fixture
async def agent(agent_repo):
    """An agent profile for seeded user "2" (Agent role)."""
    return await agent_repo.create(create_agent_data("2", name="John Smith"))


@pytest.mark.unit
def test_month_key():
    assert month_key(date(2024, 3, 15)) == "2024-03"


@pytest.mark.unit
@pytest.mark.asyncio
async def test_default_agents_seeded(backend, user_repo):
    repo = AgentRepository.from_backend(backend, user_repo)

    agents = await repo.get_all()

    assert [a.id for a in agents] == ["1", "2", "3"]
    assert [a.user_id for a in agents] == ["2", "3", "4"]


@pytest.mark.unit
@pytest.mark.asyncio
async def test_create_agent(agent_repo, frozen_time):
    """Test that a new profile starts with zeroed counters."""
    agent = await agent_repo.create(create_agent_data("2"))

    assert agent.id
    assert agent.user_id == "2"
    assert agent.performance.total_listings == 0
    assert agent.performance.sold_properties == 0
    assert agent.created_at == agent.updated_at
    assert await agent_repo.get_by_user_id("2") == agent


@pytest.mark.unit
@pytest.mark.asyncio
async def test_create_requires_agent_role(agent_repo, backend):
    """Test that non-Agent users are rejected before anything is written."""
    with pytest.raises(AgentValidationError, match="Editor"):
        await agent_repo.create(create_agent_data("5"))

    assert StoreConfig.AGENTS_KEY not in backend.data


@pytest.mark.unit
@pytest.mark.asyncio
async def test_create_requires_existing_user(agent_repo):
    with pytest.raises(AgentValidationError, match="not found"):
        await agent_repo.create(create_agent_data("missing"))

    assert await agent_repo.get_all() == []


@pytest.mark.unit
@pytest.mark.asyncio
async def test_agent_validation_error_is_entity_validation_error(agent_repo):
    with pytest.raises(EntityValidationError):
        await agent_repo.create(create_agent_data("6"))


@pytest.mark.unit
@pytest.mark.asyncio
async def test_update_bumps_updated_at(frozen_time, agent_repo, agent):
    frozen_time.tick(timedelta(hours=1))

    updated = await agent_repo.update(agent.id, {"bio": "Top closer", "status": "On Leave"})

    assert updated.bio == "Top closer"
    assert updated.status.value == "On Leave"
    assert updated.updated_at > agent.updated_at
    assert updated.name == "John Smith"


@pytest.mark.unit
@pytest.mark.asyncio
async def test_update_rejects_performance(agent_repo, agent):
    with pytest.raises(EntityValidationError):
        await agent_repo.update(agent.id, {"performance": {"sold_properties": 10}})


@pytest.mark.unit
@pytest.mark.asyncio
async def test_update_missing_agent(agent_repo):
    assert await agent_repo.update("nope", {"bio": "x"}) is None


@pytest.mark.unit
@pytest.mark.asyncio
async def test_assign_property_idempotent(agent_repo, agent):
    """Test that re-assigning a listing does not double count."""
    await agent_repo.assign_property(agent.id, "P1")
    updated = await agent_repo.assign_property(agent.id, "P1")

    assert updated.assigned_properties == ["P1"]
    assert updated.performance.active_listings == 1
    assert updated.performance.total_listings == 1


@pytest.mark.unit
@pytest.mark.asyncio
async def test_unassign_property(agent_repo, agent):
    await agent_repo.assign_property(agent.id, "P1")
    await agent_repo.assign_property(agent.id, 2)

    updated = await agent_repo.unassign_property(agent.id, "P1")

    assert updated.assigned_properties == ["2"]
    assert updated.performance.active_listings == 1
    assert updated.performance.total_listings == 2


@pytest.mark.unit
@pytest.mark.asyncio
async def test_unassign_unknown_property_is_noop(agent_repo, agent):
    updated = await agent_repo.unassign_property(agent.id, "P9")

    assert updated.assigned_properties == []
    assert updated.performance.active_listings == 0


@pytest.mark.unit
@pytest.mark.asyncio
async def test_add_transaction(agent_repo, agent):
    """Test a sale updates counters, portfolio and the monthly bucket."""
    await agent_repo.assign_property(agent.id, "P1")

    updated = await agent_repo.add_transaction(
        agent.id,
        {"property_id": "P1", "transaction_date": "2024-03-15", "value": 500000},
    )

    assert updated.performance.sold_properties == 1
    assert updated.performance.total_sales_value == 500000
    assert len(updated.portfolio.past_transactions) == 1
    [bucket] = updated.performance.monthly_stats
    assert bucket.month == "2024-03"
    assert bucket.sales_count == 1
    assert bucket.sales_value == 500000


@pytest.mark.unit
@pytest.mark.asyncio
async def test_add_transaction_buckets_sorted(agent_repo, agent):
    await agent_repo.add_transaction(agent.id, {"property_id": "A", "transaction_date": "2024-05-01", "value": 1})
    await agent_repo.add_transaction(agent.id, {"property_id": "B", "transaction_date": "2024-03-02", "value": 2})
    updated = await agent_repo.add_transaction(
        agent.id, {"property_id": "C", "transaction_date": "2024-05-20", "value": 3}
    )

    months = [(s.month, s.sales_count, s.sales_value) for s in updated.performance.monthly_stats]
    assert months == [("2024-03", 1, 2), ("2024-05", 2, 4)]
    assert updated.performance.sold_properties == 3


@pytest.mark.unit
@pytest.mark.asyncio
async def test_update_performance_rejects_counters(agent_repo, agent):
    with pytest.raises(EntityValidationError):
        await agent_repo.update_performance(agent.id, {"sold_properties": 99})

    updated = await agent_repo.update_performance(agent.id, {"average_rating": 4.6})
    assert updated.performance.average_rating == 4.6
    assert updated.performance.sold_properties == 0


@pytest.mark.unit
@pytest.mark.asyncio
async def test_add_certification_dedupes_by_name(agent_repo, agent):
    cert = {"name": "RERA", "issuer": "Dubai Land Department", "date_obtained": "2023-01-01T00:00:00Z"}

    await agent_repo.add_certification(agent.id, cert)
    updated = await agent_repo.add_certification(agent.id, cert)

    assert [c.name for c in updated.certifications] == ["RERA"]


@pytest.mark.unit
@pytest.mark.asyncio
async def test_add_document(agent_repo, agent):
    updated = await agent_repo.add_document(agent.id, {
        "type": "License",
        "name": "brn.pdf",
        "url": "https://files.example.com/brn.pdf",
        "upload_date": "2024-01-01T00:00:00Z",
    })

    assert [d.name for d in updated.documents] == ["brn.pdf"]


@pytest.mark.unit
@pytest.mark.asyncio
async def test_update_schedule_keeps_other_fields(agent_repo, agent):
    updated = await agent_repo.update_schedule(agent.id, {"available_days": ["Saturday", "Sunday"]})

    assert updated.schedule.available_days == ["Saturday", "Sunday"]
    assert updated.schedule.available_hours.start == "09:00"


@pytest.mark.unit
@pytest.mark.asyncio
async def test_top_performers(agent_repo):
    first = await agent_repo.create(create_agent_data("2"))
    second = await agent_repo.create(create_agent_data("3"))
    third = await agent_repo.create(create_agent_data("4"))
    await agent_repo.add_transaction(second.id, {"property_id": "X", "transaction_date": "2024-01-05", "value": 900})

    top = await agent_repo.get_top_performers(limit=2)

    assert [a.id for a in top] == [second.id, first.id]
    assert third.id not in [a.id for a in top]


@pytest.mark.unit
@pytest.mark.asyncio
async def test_queries_by_specialization_and_status(agent_repo, agent):
    assert [a.id for a in await agent_repo.get_by_specialization("Residential")] == [agent.id]
    assert await agent_repo.get_by_specialization("Commercial") == []

    await agent_repo.update_status(agent.id, "Inactive")
    assert [a.id for a in await agent_repo.get_by_status("Inactive")] == [agent.id]


@pytest.mark.unit
@pytest.mark.asyncio
async def test_delete_agent(agent_repo, agent):
    assert await agent_repo.delete(agent.id) is True
    assert await agent_repo.get_by_id(agent.id) is None
    assert await agent_repo.delete(agent.id) is False
