from pathlib import Path

import httpx
import pytest

import javkit
from javkit import http


@pytest.fixture
def fixture_dir() -> Path:
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def load_fixture(fixture_dir):
    def _loader(name: str) -> str:
        with open(fixture_dir / name, "r", encoding="utf-8") as f:
            return f.read()
    return _loader


@pytest.fixture
def search_html(load_fixture):
    return load_fixture("search_results.html")


@pytest.fixture
def detail_html(load_fixture):
    return load_fixture("detail_full.html")


@pytest.fixture
def parse_fixture(load_fixture):
    def _parse(name: str) -> javkit.Document:
        return javkit.parse(load_fixture(name))
    return _parse


class MockHTTPXClient:
    """Stands in for httpx.Client / httpx.AsyncClient; records every call."""

    def __init__(self, routes: dict[str, object] | None = None, headers=None, **kwargs):
        self.routes = routes or {}
        self.headers = dict(headers or {})
        self.kwargs = kwargs
        self.calls: list[str] = []
        self.closed = False

    def _respond(self, url: str) -> httpx.Response:
        self.calls.append(url)
        request = httpx.Request("GET", url, headers=self.headers)
        route = self.routes.get(url)
        if isinstance(route, Exception):
            raise route
        if isinstance(route, httpx.Response):
            route.request = request
            return route
        if isinstance(route, str):
            return httpx.Response(200, request=request, text=route)
        return httpx.Response(404, request=request, text="not found")

    def get(self, url: str, **kwargs):
        return self._respond(url)

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False


class MockAsyncHTTPXClient(MockHTTPXClient):
    async def get(self, url: str, **kwargs):
        return self._respond(url)

    async def aclose(self):
        self.closed = True

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        await self.aclose()
        return False


@pytest.fixture
def mock_httpx_client(monkeypatch):
    """Install fake sync and async clients serving `routes` (url -> html | Response | exception).

    Returns a holder whose `calls` lists every URL fetched and `clients` every client built.
    """

    class Holder:
        def __init__(self):
            self.clients: list[MockHTTPXClient] = []

        @property
        def calls(self) -> list[str]:
            return [url for c in self.clients for url in c.calls]

    holder = Holder()

    def _factory(routes=None):
        def _make(cls):
            def _new(*a, **k):
                inst = cls(routes=routes, **k)
                holder.clients.append(inst)
                return inst
            return _new

        monkeypatch.setattr(http.httpx, "Client", _make(MockHTTPXClient))
        monkeypatch.setattr(http.httpx, "AsyncClient", _make(MockAsyncHTTPXClient))
        return holder

    return _factory


@pytest.fixture
def anyio_backend():
    return "asyncio"
