"""HTTP tests for the standalone moderation check."""

from collections.abc import Iterator

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from post_service.application.services import ModerationService
from post_service.config import Settings, get_settings
from post_service.infrastructure.dependencies import get_moderation_service
from post_service.infrastructure.moderation import OpenAIModerationClient
from post_service.main import app


def _upstream(status_code: int, body: dict) -> httpx.AsyncClient:
    transport = httpx.MockTransport(lambda request: httpx.Response(status_code, json=body))
    return httpx.AsyncClient(transport=transport)


@pytest.fixture
def clean_overrides() -> Iterator[None]:
    yield
    app.dependency_overrides.clear()


def _use_upstream(status_code: int, body: dict) -> None:
    client = OpenAIModerationClient(api_key="k", http_client=_upstream(status_code, body))
    app.dependency_overrides[get_moderation_service] = lambda: ModerationService(client)


def _client() -> AsyncClient:
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest.mark.asyncio
async def test_check_returns_flag(clean_overrides):
    _use_upstream(200, {"results": [{"flagged": True}]})
    async with _client() as client:
        response = await client.post("/moderation/check", json={"text": "bad words"})

    assert response.status_code == 200
    assert response.json() == {"flagged": True}


@pytest.mark.asyncio
async def test_upstream_error_is_502_with_message(clean_overrides):
    _use_upstream(429, {"error": {"message": "Rate limit reached"}})
    async with _client() as client:
        response = await client.post("/moderation/check", json={"text": "hello"})

    assert response.status_code == 502
    assert response.json() == {"error": "Rate limit reached"}


@pytest.mark.asyncio
async def test_missing_api_key_is_503(clean_overrides):
    app.dependency_overrides[get_settings] = lambda: Settings(moderation_api_key="")
    async with _client() as client:
        response = await client.post("/moderation/check", json={"text": "hello"})

    assert response.status_code == 503
    assert response.json() == {"error": "Moderation API key is not configured"}


@pytest.mark.asyncio
async def test_creating_a_post_does_not_call_moderation(clean_overrides):
    """Moderation is a separate check; post creation never consults it."""
    from post_service.application.services import PostService
    from post_service.infrastructure.dependencies import get_post_service
    from tests.fakes import FakePostRepository

    calls: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(200, json={"results": [{"flagged": True}]})

    client = OpenAIModerationClient(
        api_key="k", http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler))
    )
    app.dependency_overrides[get_moderation_service] = lambda: ModerationService(client)
    app.dependency_overrides[get_post_service] = lambda: PostService(FakePostRepository())

    async with _client() as http:
        response = await http.post("/posts", json={"title": "anything", "content": "goes"})

    assert response.status_code == 200
    assert calls == []
