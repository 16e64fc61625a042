"""Month-over-month statistics shared by every repository.

Windows are rolling: the current window is ``[now - 30d, now]`` and the
previous window is ``[now - 60d, now - 30d)``. A previous count of zero is
reported as a 100% increase instead of a division error.
"""

import math
from datetime import datetime, timedelta
from typing import Iterable, Optional

from estate_admin.models.common import utc_now
from estate_admin.models.stats import StatsData
from estate_admin.utils.store_config import StoreConfig


def window_bounds(now: Optional[datetime] = None, days: Optional[int] = None) -> tuple[datetime, datetime]:
    """Return (current_window_start, previous_window_start)."""
    now = now or utc_now()
    span = timedelta(days=days or StoreConfig.STATS_WINDOW_DAYS)
    current_start = now - span
    return current_start, current_start - span


def count_between(
    timestamps: Iterable[Optional[datetime]],
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
) -> int:
    """Count timestamps with start <= ts < end; open bounds are unbounded."""
    count = 0
    for ts in timestamps:
        if ts is None:
            continue
        if start is not None and ts < start:
            continue
        if end is not None and ts >= end:
            continue
        count += 1
    return count


def percentage_change(current: float, previous: float) -> float:
    """Signed percentage change from previous to current."""
    if previous == 0:
        return 100.0
    return (current / previous - 1) * 100


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def build_stats(total: int, current: float, previous: float) -> StatsData:
    """StatsData for a collection given the two window measurements."""
    change = percentage_change(current, previous)
    return StatsData(
        total=total,
        monthly_change=abs(round_half_up(change)),
        is_positive=change >= 0,
    )


def created_window_stats(timestamps: list[datetime], now: Optional[datetime] = None) -> StatsData:
    """Compare records created in the current window against the previous window."""
    current_start, previous_start = window_bounds(now)
    current = count_between(timestamps, start=current_start)
    previous = count_between(timestamps, start=previous_start, end=current_start)
    return build_stats(len(timestamps), current, previous)
