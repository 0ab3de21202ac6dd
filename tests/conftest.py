"""Shared fixtures: settings and a fake Trello API behind httpx.MockTransport."""

import httpx
import pytest

from config import Credentials, Settings


class FakeTrello:
    """Records every request and answers from a (method, path) route table."""

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], httpx.Response] = {}
        self.requests: list[httpx.Request] = []

    def add(self, method: str, path: str, response: httpx.Response) -> None:
        self.routes[(method, f"/1/{path}")] = response

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self.routes.get((request.method, request.url.path))
        if response is None:
            return httpx.Response(404, text="The requested resource was not found.")
        return response

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def settings() -> Settings:
    return Settings(credentials=Credentials(app_key="test-key", token="test-token"))


@pytest.fixture
def trello_api(monkeypatch: pytest.MonkeyPatch) -> FakeTrello:
    """Route every httpx.AsyncClient created during the test to a FakeTrello."""
    api = FakeTrello()
    real_client = httpx.AsyncClient

    def client_factory(**kwargs):
        kwargs["transport"] = httpx.MockTransport(api.handle)
        return real_client(**kwargs)

    monkeypatch.setattr(httpx, "AsyncClient", client_factory)
    return api
