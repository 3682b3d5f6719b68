"""Pytest configuration and fixtures."""

import asyncio
import inspect
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from yahoo_finance_mcp.data.auth import CredentialCache
from yahoo_finance_mcp.data.yahoo_client import YahooClient, create_http_client

CRUMB_PATH = "/v1/test/getcrumb"


class FakeClock:
    """Controllable epoch-seconds clock."""

    def __init__(self, now: float = 1_700_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeUpstream:
    """
    Scriptable stand-in for the upstream, used as an httpx.MockTransport handler.

    Serves the cookie endpoints, the crumb endpoint, and data requests
    (``data_status`` / ``data_json`` / ``data_text``, or ``data_handler``).
    Every request is recorded.
    """

    def __init__(self) -> None:
        self.cookie_headers: list[str] = ["A=1; Expires=Wed, 21 Oct 2026 07:28:00 GMT; Path=/; Domain=.yahoo.com"]
        self.fallback_cookie_headers: list[str] = []
        self.crumb: str = "AbCdEf123"
        self.crumb_status: int = 200
        self.data_status: int = 200
        self.data_json: Any = {}
        self.data_text: str | None = None
        self.data_handler: Callable[[httpx.Request], Any] | None = None
        self.fail_handshake: bool = False
        self.delay: float = 0.0
        self.requests: list[httpx.Request] = []

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.delay:
            await asyncio.sleep(self.delay)

        host = request.url.host
        if host in ("fc.yahoo.com", "finance.yahoo.com") or request.url.path == CRUMB_PATH:
            if self.fail_handshake:
                raise httpx.ConnectError("connection refused", request=request)

        if host == "fc.yahoo.com":
            return httpx.Response(404, headers=[("set-cookie", v) for v in self.cookie_headers])
        if host == "finance.yahoo.com":
            return httpx.Response(
                200,
                headers=[("set-cookie", v) for v in self.fallback_cookie_headers],
                text="<html></html>",
            )
        if request.url.path == CRUMB_PATH:
            return httpx.Response(self.crumb_status, text=self.crumb)

        if self.data_handler is not None:
            response = self.data_handler(request)
            if inspect.isawaitable(response):
                response = await response
            return response
        if self.data_text is not None:
            return httpx.Response(self.data_status, text=self.data_text)
        return httpx.Response(self.data_status, json=self.data_json)

    def count(self, *, host: str | None = None, path: str | None = None) -> int:
        """Number of recorded requests matching host and/or path."""
        return sum(
            1
            for r in self.requests
            if (host is None or r.url.host == host) and (path is None or r.url.path == path)
        )

    @property
    def handshakes(self) -> int:
        return self.count(path=CRUMB_PATH)

    @property
    def data_requests(self) -> list[httpx.Request]:
        return [
            r for r in self.requests
            if r.url.host not in ("fc.yahoo.com", "finance.yahoo.com") and r.url.path != CRUMB_PATH
        ]


@pytest.fixture
def clock() -> FakeClock:
    """Fake clock starting at a fixed epoch."""
    return FakeClock()


@pytest.fixture
def upstream() -> FakeUpstream:
    """Controllable upstream with a working cookie/crumb handshake."""
    return FakeUpstream()


@pytest.fixture
def http(upstream: FakeUpstream) -> httpx.AsyncClient:
    """Shared HTTP client routed to the fake upstream."""
    return create_http_client(transport=httpx.MockTransport(upstream))


@pytest.fixture
def credentials(http: httpx.AsyncClient, clock: FakeClock) -> CredentialCache:
    """Credential cache driven by the fake clock."""
    return CredentialCache(http, clock=clock, ttl=1800)


@pytest.fixture
def client(http: httpx.AsyncClient, credentials: CredentialCache) -> YahooClient:
    """Yahoo client wired to the fake upstream."""
    return YahooClient(http=http, credentials=credentials)


@pytest.fixture
def sample_chart() -> dict[str, Any]:
    """Chart response with three daily bars (one with gaps)."""
    return {
        "chart": {
            "result": [
                {
                    "meta": {"symbol": "AAPL", "currency": "USD"},
                    "timestamp": [1704205800, 1704292200, 1704378600],
                    "indicators": {
                        "quote": [
                            {
                                "open": [187.15, 184.22, 182.15],
                                "high": [188.44, 185.88, 183.09],
                                "low": [183.89, 183.43, None],
                                "close": [185.64, 184.25, 181.91],
                                "volume": [82488700, 58414500, 71983600],
                            }
                        ],
                        "adjclose": [{"adjclose": [184.73, None, 181.02]}],
                    },
                }
            ],
            "error": None,
        }
    }
