"""Shared fixtures: settings and a scripted Velocity endpoint."""

import json

import httpx
import pytest

from velocity_mcp.config.settings import Settings
from velocity_mcp.services.graphql_client import GraphQLExecutor

GRAPHQL_URL = "https://velocity.example.com/graphql"
ACCESS_KEY = "ak-123456"
TENANT_ID = "tenant-1"


class FakeVelocity:
    """
    Scripted GraphQL endpoint.

    Responses are queued with reply() and served in order; every request is
    recorded. An unscripted request fails the test.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self._responses: list[httpx.Response] = []

    def reply(self, status_code: int = 200, json_body=None, text: str | None = None):
        if text is not None:
            self._responses.append(httpx.Response(status_code, text=text))
        else:
            self._responses.append(httpx.Response(status_code, json=json_body))
        return self

    def reply_data(self, **data):
        return self.reply(json_body={"data": data})

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if not self._responses:
            raise AssertionError(f"Unexpected request: {request.content!r}")
        return self._responses.pop(0)

    @property
    def bodies(self) -> list[dict]:
        return [json.loads(r.content) for r in self.requests]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "VELOCITY_GRAPHQL_URL",
        "VELOCITY_ACCESS_TOKEN",
        "VELOCITY_TENANT_ID",
        "VELOCITY_AUTH_MODE",
        "VELOCITY_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings() -> Settings:
    return Settings(
        graphql_url=GRAPHQL_URL,
        access_token=ACCESS_KEY,
        tenant_id=TENANT_ID,
        _env_file=None,
    )


@pytest.fixture
def velocity() -> FakeVelocity:
    return FakeVelocity()


@pytest.fixture
async def executor(settings, velocity):
    client = httpx.AsyncClient(transport=httpx.MockTransport(velocity.handler))
    executor = GraphQLExecutor(settings, client=client)
    yield executor
    await client.aclose()
