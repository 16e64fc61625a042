"""Liveness endpoint for the back office deployment."""

from http.server import BaseHTTPRequestHandler
import json

from estate_admin.models.common import utc_now
from estate_admin.utils.logging_config import LoggingConfig
from estate_admin.utils.store_config import StoreConfig

SERVICE_NAME = "estate-admin-backend"

LoggingConfig.setup_logging()


def health_payload() -> dict:
    """Service identity and configured backend. The store itself is not touched."""
    return {
        "status": "ok",
        "service": SERVICE_NAME,
        "store_backend": StoreConfig.STORE_BACKEND,
        "checked_at": utc_now().isoformat(),
    }


class handler(BaseHTTPRequestHandler):
    """Answers GET and POST alike so any health checker works."""

    def _write_json(self, status: int, payload: dict) -> None:
        body = json.dumps(payload).encode('utf-8')
        self.send_response(status)
        self.send_header('Content-Type', 'application/json')
        self.send_header('Content-Length', str(len(body)))
        self.end_headers()
        self.wfile.write(body)

    def do_GET(self):
        self._write_json(200, health_payload())

    def do_POST(self):
        self.do_GET()
