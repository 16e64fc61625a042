"""Dashboard report download endpoint for Vercel."""

from http.server import BaseHTTPRequestHandler
import asyncio
import json
import logging

from estate_admin.services.registry import get_repositories
from estate_admin.services.report_service import DEFAULT_FILENAME, to_csv
from estate_admin.utils.logging_config import LoggingConfig

LoggingConfig.setup_logging()
logger = logging.getLogger(__name__)


async def build_report_csv() -> str:
    """Generate a fresh report and serialize it."""
    repositories = get_repositories()
    report = await repositories.reports.generate_report()
    return to_csv(report)


class handler(BaseHTTPRequestHandler):
    """Serves the dashboard report as a CSV attachment."""

    def do_GET(self):
        try:
            csv_text = asyncio.run(build_report_csv())
        except Exception as e:
            logger.error(f"Error exporting report: {e}", exc_info=True)
            self.send_response(500)
            self.send_header('Content-Type', 'application/json')
            self.end_headers()
            self.wfile.write(json.dumps({"error": str(e)}).encode('utf-8'))
            return

        body = csv_text.encode('utf-8')
        self.send_response(200)
        self.send_header('Content-Type', 'text/csv; charset=utf-8')
        self.send_header('Content-Disposition', f'attachment; filename="{DEFAULT_FILENAME}"')
        self.send_header('Content-Length', str(len(body)))
        self.end_headers()
        self.wfile.write(body)
