"""Dashboard report assembly and CSV export."""

import csv
import io
from collections import Counter
from pathlib import Path
from typing import Optional

from estate_admin.models.common import utc_now
from estate_admin.models.stats import PopularProperty, ReportData, StatsData
from estate_admin.services.inquiry_repository import InquiryRepository
from estate_admin.services.property_repository import PropertyRepository
from estate_admin.services.user_repository import UserRepository
from estate_admin.utils.logging import correlation_context, generate_correlation_id, get_structured_logger, timed
from estate_admin.utils.store_config import StoreConfig

logger = get_structured_logger(__name__)

REPORT_TITLE = "Real Estate Dashboard Report"
DEFAULT_FILENAME = "real-estate-report.csv"

PROPERTY_SECTION = "PROPERTY STATISTICS"
USER_SECTION = "USER STATISTICS"
INQUIRY_SECTION = "INQUIRY STATISTICS"
VIEWS_SECTION = "VIEWS BREAKDOWN"
POPULAR_SECTION = "POPULAR PROPERTIES"
POPULAR_HEADER = "Property Title,Views,Favorites,Inquiries"


def _direction(is_positive: bool) -> str:
    return "Increase" if is_positive else "Decrease"


def _change_row(stats: StatsData) -> str:
    return f"Monthly Change,{stats.monthly_change}%,{_direction(stats.is_positive)}"


def _quote(text: str) -> str:
    return '"' + text.replace('"', '""') + '"'


class ReportAssembler:
    """Builds the dashboard report from the live repositories."""

    def __init__(
        self,
        properties: PropertyRepository,
        users: UserRepository,
        inquiries: InquiryRepository,
        top_n: Optional[int] = None,
    ):
        self.properties = properties
        self.users = users
        self.inquiries = inquiries
        self.top_n = top_n or StoreConfig.REPORT_TOP_N

    @timed("report.generate")
    async def generate_report(self) -> ReportData:
        with correlation_context(generate_correlation_id("report")) as report_id:
            property_stats = await self.properties.get_stats()
            user_stats = await self.users.get_stats()
            inquiry_stats = await self.inquiries.get_stats()
            views_data = await self.properties.get_views_data()

            listings = await self.properties.get_all()
            inquiry_counts = Counter(i.property_id for i in await self.inquiries.get_all())

            # sorted() is stable, so equal view counts keep collection order
            ranked = sorted(listings, key=lambda p: p.view_count, reverse=True)[:self.top_n]
            popular = [
                PopularProperty(
                    title=p.title,
                    views=p.view_count,
                    favorites=0,
                    inquiries=inquiry_counts.get(str(p.id), 0),
                )
                for p in ranked
            ]

            report = ReportData(
                date=utc_now(),
                property_stats=property_stats,
                user_stats=user_stats,
                inquiry_stats=inquiry_stats,
                views_data=views_data,
                popular_properties=popular,
            )
            logger.info(
                "Report generated",
                report_id=report_id,
                total_properties=property_stats.total,
                popular_count=len(popular)
            )
            return report


def to_csv(report: ReportData) -> str:
    """
    Serialize a report.

    Layout: banner, generation timestamp, blank line, then the property,
    user, inquiry, views and popular-properties sections separated by blank
    lines. Section and row order is fixed; ``parse_csv`` reads it back.
    """
    ps = report.property_stats
    lines = [
        REPORT_TITLE,
        f"Generated on: {report.date.isoformat()}",
        "",
        PROPERTY_SECTION,
        f"Total Properties,{ps.total}",
        _change_row(ps),
        f"Total Views,{ps.total_views}",
        f"Views Change,{ps.views_change}%,{_direction(ps.is_views_change_positive)}",
        "",
        USER_SECTION,
        f"Total Active Users,{report.user_stats.total}",
        _change_row(report.user_stats),
        "",
        INQUIRY_SECTION,
        f"Total Inquiries,{report.inquiry_stats.total}",
        _change_row(report.inquiry_stats),
        "",
        VIEWS_SECTION,
        f"Total Views,{report.views_data.total_views}",
        f"Last Month Views,{report.views_data.last_month_views}",
        f"This Month Views,{report.views_data.this_month_views}",
        "",
        POPULAR_SECTION,
        POPULAR_HEADER,
    ]
    for prop in report.popular_properties:
        lines.append(f"{_quote(prop.title)},{prop.views},{prop.favorites},{prop.inquiries}")

    return "\n".join(lines) + "\n"


def parse_csv(text: str) -> dict[str, list[list[str]]]:
    """Read an exported report back into ``{section: rows}``.

    Lines before the first section (banner and timestamp) are returned under
    the empty-string key.
    """
    sections: dict[str, list[list[str]]] = {"": []}
    current = ""
    for row in csv.reader(io.StringIO(text)):
        if not row:
            continue
        if len(row) == 1 and row[0].isupper():
            current = row[0]
            sections[current] = []
            continue
        sections[current].append(row)
    return sections


def write_csv(text: str, path: str | Path = DEFAULT_FILENAME) -> Path:
    """Write an exported report to disk as UTF-8."""
    path = Path(path)
    path.write_text(text, encoding="utf-8", newline="")
    logger.info("Report written", path=str(path), size_bytes=len(text.encode("utf-8")))
    return path
