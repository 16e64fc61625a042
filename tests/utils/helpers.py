"""Test helper functions."""

import json
from io import BytesIO
from typing import Any, Dict, List
from unittest.mock import Mock


def make_request_handler(handler_cls, path: str = "/", method: str = "GET"):
    """Build a BaseHTTPRequestHandler without a real socket, capturing the response."""

    class MockSocket:
        def makefile(self, *args, **kwargs):
            return BytesIO(f"{method} {path} HTTP/1.1\r\n\r\n".encode())

        def sendall(self, data):
            pass

        def close(self):
            pass

    h = handler_cls(MockSocket(), ("127.0.0.1", 8000), None)
    h.wfile = BytesIO()
    h.send_response = Mock()
    h.send_header = Mock()
    h.end_headers = Mock()
    return h


def sent_headers(h) -> Dict[str, str]:
    """Headers passed to send_header on a handler built by make_request_handler."""
    return {call.args[0]: call.args[1] for call in h.send_header.call_args_list}


def response_body(h) -> str:
    h.wfile.seek(0)
    return h.wfile.read().decode("utf-8")


def raw_payload(records: List[Dict[str, Any]]) -> str:
    """Serialize records the way the entity store writes them."""
    return json.dumps(records)
