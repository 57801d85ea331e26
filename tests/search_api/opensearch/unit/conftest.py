"""Pytest fixtures for endpoint and transport unit tests."""

import threading
from collections.abc import Callable, Generator
from dataclasses import dataclass, field
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from unittest.mock import MagicMock

import pytest

from search_api.interfaces import ITransportClient
from search_api.opensearch.client import TransportClient
from search_api.result import Ok, Result
from search_api.types import JSON, HttpVerb

BASE_URL = "http://localhost:9200"


@dataclass
class RecordedRequest:
    """A request captured by RecordingTransport."""

    verb: HttpVerb
    url: str
    body: JSON
    timeout: float | None


class RecordingTransport(ITransportClient):
    """Transport stub that records requests and answers through ``respond``."""

    def __init__(self) -> None:
        self.requests: list[RecordedRequest] = []
        self.respond: Callable[[RecordedRequest], Result] = lambda _: Ok({"acknowledged": True})

    def request(
        self,
        verb: HttpVerb,
        url: str,
        body: JSON = None,
        *,
        timeout: float | None = None,
    ) -> Result:
        recorded = RecordedRequest(verb=verb, url=url, body=body, timeout=timeout)
        self.requests.append(recorded)
        return self.respond(recorded)

    @property
    def last(self) -> RecordedRequest:
        return self.requests[-1]


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture
def transport() -> RecordingTransport:
    """Create a recording transport stub."""
    return RecordingTransport()


@pytest.fixture
def mock_connection_class() -> MagicMock:
    """Mock opensearch-py connection class answering 200 with an acknowledgement."""
    connection_class = MagicMock()
    connection_class.return_value.perform_request.return_value = (
        200,
        {"content-type": "application/json"},
        '{"acknowledged":true}',
    )
    return connection_class


@pytest.fixture
def mock_connection(mock_connection_class: MagicMock) -> MagicMock:
    """The connection instance handed out by the mock connection class."""
    return mock_connection_class.return_value


@pytest.fixture
def transport_client(mock_connection_class: MagicMock) -> TransportClient:
    """Create a TransportClient backed by the mock connection class."""
    return TransportClient(connection_class=mock_connection_class)


@dataclass
class ReceivedRequest:
    """A request as it arrived at LocalServer."""

    method: str
    path: str
    content_type: str | None
    body: bytes


@dataclass
class LocalServer:
    """Plain HTTP server answering every request with ``reply``."""

    url: str
    received: list[ReceivedRequest] = field(default_factory=list)
    reply: tuple[int, str, bytes] = (200, "application/json", b'{"acknowledged":true}')


class _RecordingHandler(BaseHTTPRequestHandler):
    server_state: LocalServer

    def _handle(self) -> None:
        length = int(self.headers.get("Content-Length") or 0)
        self.server_state.received.append(
            ReceivedRequest(
                method=self.command,
                path=self.path,
                content_type=self.headers.get("Content-Type"),
                body=self.rfile.read(length) if length else b"",
            )
        )
        status, content_type, payload = self.server_state.reply
        self.send_response(status)
        self.send_header("Content-Type", content_type)
        self.send_header("Content-Length", str(len(payload)))
        self.end_headers()
        self.wfile.write(payload)

    do_GET = do_PUT = do_POST = do_DELETE = _handle

    def log_message(self, *_: object) -> None:
        """Keep test output quiet."""


@pytest.fixture
def local_server() -> Generator[LocalServer, None, None]:
    """Serve on an ephemeral localhost port for the duration of a test."""
    state = LocalServer(url="")
    handler = type("Handler", (_RecordingHandler,), {"server_state": state})
    server = ThreadingHTTPServer(("127.0.0.1", 0), handler)
    state.url = f"http://127.0.0.1:{server.server_address[1]}"
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()

    yield state

    server.shutdown()
    server.server_close()
    thread.join()
