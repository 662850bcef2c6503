import sys
from concurrent.futures import Future
from pathlib import Path
from typing import AsyncGenerator, Callable, Generator

import pytest

# Ensure local source package (src/apikit) is importable before tests collect
_PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
_SRC_PATH: Path = _PROJECT_ROOT / "src"
if _SRC_PATH.exists():
    sys.path.insert(0, str(_SRC_PATH))

from apikit import ApiClient, ClientConfig, TransportResponse, WireRequest  # noqa: E402


class FakeTransport:
    """In-memory transport returning a canned response for every call."""

    def __init__(self, response: TransportResponse) -> None:
        self.response = response
        self.requests: list[WireRequest] = []

    def send(self, request: WireRequest) -> TransportResponse:
        self.requests.append(request)
        return self.response

    def send_with_callback(self, request, callback) -> "Future[None]":
        future: Future[None] = Future()
        callback(self.send(request))
        future.set_result(None)
        return future

    async def stream(self, request: WireRequest) -> AsyncGenerator[TransportResponse, None]:
        yield self.send(request)

    async def send_async(self, request: WireRequest) -> TransportResponse:
        return self.send(request)


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Clean environment variables before each test."""
    for name in (
        "APIKIT_TIMEOUT",
        "APIKIT_FOLLOW_REDIRECTS",
        "APIKIT_VERIFY_SSL",
        "APIKIT_MAX_WORKERS",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def base_url() -> str:
    return "https://api.x.com/"


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(timeout=5.0, max_workers=2)


@pytest.fixture
def client(config: ClientConfig) -> Generator[ApiClient, None, None]:
    api_client = ApiClient(config)
    yield api_client
    api_client.close()


@pytest.fixture
def fake_client() -> Callable[[TransportResponse], tuple[ApiClient, FakeTransport]]:
    def factory(response: TransportResponse) -> tuple[ApiClient, FakeTransport]:
        transport = FakeTransport(response)
        return ApiClient(transport=transport), transport

    return factory
