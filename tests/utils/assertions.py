"""Custom assertion helpers."""

from typing import Any


def assert_valid_stats(stats: Any) -> None:
    """Assert that a stats object is well formed."""
    assert stats is not None
    assert stats.total >= 0
    assert stats.monthly_change >= 0
    assert isinstance(stats.is_positive, bool)


def assert_history_ordered(inquiry: Any) -> None:
    """Assert status history timestamps never go backwards."""
    changed = [entry.changed_at for entry in inquiry.status_history]
    assert changed == sorted(changed)


def assert_permissions_match_role(user: Any) -> None:
    from estate_admin.models.user import permissions_for

    assert user.permissions == permissions_for(user.role)
