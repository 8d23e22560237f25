"""
Test configuration and fixtures for Prompt Optimizer tests

This module provides:
- FakeProvider, an in-memory LLM provider that records every call
- Settings with fake credentials (no .env files are read)
- A ProviderRegistry wired to fake providers
- FastAPI test client with dependency overrides

Usage:
    def test_endpoint(test_client, gemini_provider):
        gemini_provider.respond_with("Optimized!")
        response = test_client.post("/api/optimize", json={...})
        assert response.status_code == 200
"""

import asyncio
import json
from typing import Callable, Generator, Optional, Sequence

import pytest

from prompt_optimizer_server.config import Settings, get_settings
from prompt_optimizer_server.core.exceptions import ProviderError
from prompt_optimizer_server.core.llm.provider import (
    GenerationResult,
    ProviderInfo,
    TokenUsage,
)
from prompt_optimizer_server.core.llm.registry import (
    ProviderRegistry,
    get_provider_registry,
)
from prompt_optimizer_server.core.model import ProviderName

Responder = Callable[[Sequence[str]], GenerationResult]


ANALYSIS_DOCUMENT = {
    "metrics": [
        {"parameter": "Tokens", "original": "Estimated 120", "optimized": "Estimated 85", "winner": "Original"},
        {"parameter": "Clarity", "original": "6/10", "optimized": "9/10", "winner": "Optimized"},
        {"parameter": "Precision", "original": "5/10", "optimized": "9.5/10", "winner": "Optimized"},
        {"parameter": "Edge Case Handling", "original": "4/10", "optimized": "8/10", "winner": "Optimized"},
        {"parameter": "Format Compliance", "original": "N/A", "optimized": "10/10", "winner": "Optimized"},
    ],
    "benchmark": {
        "originalScore": 45,
        "optimizedScore": 85,
        "winner": "Optimized",
        "reason": "The optimized prompt states the audience and length.",
        "formatAnalysis": "JSON output constrains the response shape best.",
    },
    "summary": "The optimized prompt is clearer and more precise.",
}

ANALYSIS_JSON = json.dumps(ANALYSIS_DOCUMENT, indent=2)


class FakeProvider:
    """In-memory LLM provider for testing.

    Records each call's prompt parts and tracks how many calls are in flight
    at once, so tests can assert on call counts and concurrency.
    """

    def __init__(self, name: ProviderName, model: str = "fake-model"):
        self.name = name
        self.model = model
        self.calls: list[list[str]] = []
        self.delay: float = 0.0
        self.in_flight = 0
        self.max_in_flight = 0
        self._responder: Responder = lambda parts: self.result("Fake response")

    def result(self, text: str, total_tokens: Optional[int] = 10) -> GenerationResult:
        usage = None
        if total_tokens is not None:
            usage = TokenUsage(prompt_tokens=4, completion_tokens=total_tokens - 4, total_tokens=total_tokens)
        return GenerationResult(text=text, usage=usage, provider=self.name.value, model=self.model)

    def respond_with(self, text: str, total_tokens: Optional[int] = 10) -> None:
        """Answer every call with the same text."""
        self._responder = lambda parts: self.result(text, total_tokens)

    def respond(self, responder: Responder) -> None:
        """Answer each call with responder(prompt_parts)."""
        self._responder = responder

    def fail_with(self, message: str = "API Error", status_code: Optional[int] = None) -> None:
        def _raise(parts: Sequence[str]) -> GenerationResult:
            raise ProviderError(message, provider=self.name.value, status_code=status_code)

        self._responder = _raise

    async def generate(self, prompt_parts: Sequence[str]) -> GenerationResult:
        self.calls.append(list(prompt_parts))
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
            return self._responder(prompt_parts)
        finally:
            self.in_flight -= 1

    def describe(self) -> ProviderInfo:
        return ProviderInfo(name=self.name, display_name=f"Fake {self.name.value}", model=self.model)


@pytest.fixture
def settings() -> Settings:
    """Settings with fake credentials for both providers."""
    return Settings(
        _env_file=None,
        google_generative_ai_api_key="test-gemini-key",
        openai_api_key="test-openai-key",
        evaluation_provider=ProviderName.GEMINI,
        provider_timeout_seconds=None,
    )


@pytest.fixture
def gemini_provider() -> FakeProvider:
    return FakeProvider(ProviderName.GEMINI, model="gemini-2.5-flash-lite")


@pytest.fixture
def openai_provider() -> FakeProvider:
    return FakeProvider(ProviderName.OPENAI, model="gpt-4o")


@pytest.fixture
def make_registry(gemini_provider, openai_provider):
    """Build a registry over the fake providers for the given settings."""

    def _make(settings: Settings) -> ProviderRegistry:
        return ProviderRegistry(
            settings,
            factories={
                ProviderName.GEMINI: lambda s: gemini_provider,
                ProviderName.OPENAI: lambda s: openai_provider,
            },
        )

    return _make


@pytest.fixture
def registry(settings, make_registry) -> ProviderRegistry:
    return make_registry(settings)


@pytest.fixture
def test_client(settings, registry) -> Generator:
    """Create a FastAPI test client wired to the fake registry.

    Example:
        def test_endpoint(test_client):
            response = test_client.get("/api/health")
            assert response.status_code == 200
    """
    from fastapi.testclient import TestClient
    from prompt_optimizer_server.main import create_app

    app = create_app(settings)
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_provider_registry] = lambda: registry

    client = TestClient(app)
    try:
        yield client
    finally:
        client.close()
        app.dependency_overrides.clear()
