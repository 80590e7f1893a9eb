from __future__ import annotations

from collections.abc import Callable
from typing import Any

import httpx
import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings, get_settings
from app.main import create_app
from routers.content import get_content_generator

API_KEY = "test-secret"


class StubGenerator:
    def __init__(self, text: str = "T", error: Exception | None = None) -> None:
        self.text = text
        self.error = error
        self.prompts: list[str] = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.text


def completion_payload(content: str | None) -> dict[str, Any]:
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "created": 1700000000,
        "model": "gpt-4-turbo-preview",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
    }


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        CUSTOM_API_KEY=API_KEY,
        OPENAI_API_KEY="sk-test",
        environment="test",
    )


@pytest.fixture
def openai_transport() -> Callable[..., tuple[httpx.MockTransport, list[httpx.Request]]]:
    """Build a mock OpenAI transport that records every request it serves."""

    def _build(
        content: str | None = "T",
        status_code: int = 200,
    ) -> tuple[httpx.MockTransport, list[httpx.Request]]:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            if status_code != 200:
                return httpx.Response(
                    status_code,
                    json={"error": {"message": "upstream failure", "type": "server_error"}},
                )
            return httpx.Response(200, json=completion_payload(content))

        return httpx.MockTransport(handler), seen

    return _build


@pytest.fixture
def make_client(settings: Settings) -> Callable[..., TestClient]:
    def _make(generator: Any = None, app_settings: Settings | None = None) -> TestClient:
        app = create_app()
        resolved = app_settings or settings
        app.dependency_overrides[get_settings] = lambda: resolved
        if generator is not None:
            app.dependency_overrides[get_content_generator] = lambda: generator
        return TestClient(app)

    return _make


@pytest.fixture
def valid_payload() -> dict[str, Any]:
    return {
        "prompt": "안구건조증 관리법에 대한 블로그 글을 작성해줘",
        "region": "Seoul",
        "ophthalmology_keywords": ["dry eye", "lasik"],
    }


@pytest.fixture
def auth_headers() -> dict[str, str]:
    return {"X-API-Key": API_KEY}


@pytest.fixture
def stub_generator() -> type[StubGenerator]:
    return StubGenerator
