"""Tests for Agent models."""

import pytest
from datetime import date
from pydantic import ValidationError
from estate_admin.models.agent import (
    Agent,
    AgentStatus,
    MonthlyStat,
    PerformanceUpdate,
    Transaction,
)


@pytest.mark.unit
def test_agent_defaults():
    """Test zeroed performance and default schedule."""
    agent = Agent(
        id="a1",
        user_id="2",
        name="John Smith",
        title="Consultant",
        email="john@example.com",
        phone="+971 50 000 0000",
        license_number="BRN-1",
        license_expiry="2026-01-01T00:00:00Z",
        created_at="2024-01-01T00:00:00Z",
        updated_at="2024-01-01T00:00:00Z",
    )

    assert agent.status == AgentStatus.ACTIVE
    assert agent.performance.total_listings == 0
    assert agent.performance.active_listings == 0
    assert agent.performance.sold_properties == 0
    assert agent.performance.total_sales_value == 0
    assert agent.performance.monthly_stats == []
    assert agent.schedule.available_days == ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]
    assert agent.schedule.available_hours.start == "09:00"
    assert agent.schedule.available_hours.end == "18:00"
    assert agent.certifications == []
    assert agent.documents == []
    assert agent.assigned_properties == []
    assert agent.portfolio.past_transactions == []


@pytest.mark.unit
def test_agent_schedule_default_is_not_shared():
    """Test that each agent gets its own day list."""
    kwargs = dict(
        user_id="2", name="A", title="T", email="a@example.com", phone="1",
        license_number="L", license_expiry="2026-01-01T00:00:00Z",
        created_at="2024-01-01T00:00:00Z", updated_at="2024-01-01T00:00:00Z",
    )
    first = Agent(id="a1", **kwargs)
    second = Agent(id="a2", **kwargs)

    first.schedule.available_days.append("Saturday")

    assert "Saturday" not in second.schedule.available_days


@pytest.mark.unit
def test_monthly_stat_month_format():
    assert MonthlyStat(month="2024-03").sales_count == 0

    with pytest.raises(ValidationError):
        MonthlyStat(month="March 2024")


@pytest.mark.unit
def test_performance_update_rejects_counters():
    """Test that listing and sales counters are not directly settable."""
    for field in ["total_listings", "active_listings", "sold_properties", "total_sales_value"]:
        with pytest.raises(ValidationError):
            PerformanceUpdate(**{field: 3})


@pytest.mark.unit
def test_performance_update_rating_bounds():
    assert PerformanceUpdate(average_rating=4.5).average_rating == 4.5

    with pytest.raises(ValidationError):
        PerformanceUpdate(average_rating=7)


@pytest.mark.unit
def test_transaction_parses_date_string():
    txn = Transaction(property_id="P1", transaction_date="2024-03-15", value=500000)

    assert txn.transaction_date == date(2024, 3, 15)
    assert txn.transaction_type == "Sale"
