"""Shared fixtures: a local HTTP server standing in for the API."""

from __future__ import annotations

import json
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from pathlib import Path
from typing import Any, Dict, List, Tuple

import pytest

from pyopenai import OpenAIConfig

TEST_DATA = Path(__file__).parent / "test_data"


def json_response(name: str) -> Dict[str, Any]:
    with open(TEST_DATA / f"{name}.json", encoding="utf-8") as fh:
        return json.load(fh)


class MockServer:
    """Answers canned responses keyed by (method, path) and records requests."""

    def __init__(self) -> None:
        self.routes: Dict[Tuple[str, str], Tuple[int, bytes]] = {}
        self.requests: List[Dict[str, Any]] = []
        self._server = ThreadingHTTPServer(("127.0.0.1", 0), self._handler())
        self._thread = threading.Thread(target=self._server.serve_forever, daemon=True)

    @property
    def uri(self) -> str:
        host, port = self._server.server_address[:2]
        return f"http://{host}:{port}"

    def mount(self, method: str, path: str, status: int = 200, body: Any = None) -> None:
        if body is None:
            raw = b""
        elif isinstance(body, (bytes, str)):
            raw = body.encode("utf-8") if isinstance(body, str) else body
        else:
            raw = json.dumps(body).encode("utf-8")
        self.routes[(method, path)] = (status, raw)

    def start(self) -> None:
        self._thread.start()

    def stop(self) -> None:
        self._server.shutdown()
        self._server.server_close()

    def _handler(self):
        server = self

        class Handler(BaseHTTPRequestHandler):
            def _respond(self) -> None:
                length = int(self.headers.get("Content-Length") or 0)
                body = self.rfile.read(length) if length else b""
                server.requests.append(
                    {
                        "method": self.command,
                        "path": self.path,
                        "headers": dict(self.headers),
                        "body": json.loads(body) if body else None,
                    }
                )
                status, raw = server.routes.get((self.command, self.path), (404, b""))
                self.send_response(status)
                self.send_header("Content-Type", "application/json")
                self.send_header("Content-Length", str(len(raw)))
                self.end_headers()
                self.wfile.write(raw)

            do_GET = _respond
            do_POST = _respond

            def log_message(self, format, *args):  # noqa: A002
                pass

        return Handler


@pytest.fixture
def server():
    mock = MockServer()
    mock.start()
    yield mock
    mock.stop()


@pytest.fixture
def config(server) -> OpenAIConfig:
    return OpenAIConfig.default().with_base_url(server.uri).with_access_token("mock_token")


@pytest.fixture
def load_json():
    return json_response
