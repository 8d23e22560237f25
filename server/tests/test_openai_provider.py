"""Tests for OpenAI provider."""

import asyncio
import logging

import httpx
import openai
import pytest
from unittest.mock import AsyncMock, MagicMock, patch

from prompt_optimizer_server.core.exceptions import ProviderError
from prompt_optimizer_server.core.llm.openai_chat import OpenAIProvider
from prompt_optimizer_server.core.llm.provider import TokenUsage
from prompt_optimizer_server.core.model import ProviderName

CHAT_URL = "https://api.openai.com/v1/chat/completions"


def _completion(content="Hello Alice!", usage=(45, 120, 165)):
    mock_response = MagicMock()
    mock_response.usage = (
        MagicMock(prompt_tokens=usage[0], completion_tokens=usage[1], total_tokens=usage[2])
        if usage
        else None
    )
    mock_response.choices = [MagicMock(message=MagicMock(content=content))]
    return mock_response


class TestOpenAIProvider:
    """Tests for OpenAIProvider."""

    @pytest.fixture
    def provider(self):
        """Create provider instance."""
        return OpenAIProvider(api_key="test-key", model="gpt-4o", temperature=0.7)

    @pytest.mark.asyncio
    async def test_generate_success(self, provider):
        """Test successful generation."""
        with patch.object(
            provider.client.chat.completions, "create", new_callable=AsyncMock
        ) as mock_create:
            mock_create.return_value = _completion("  Hello Alice!\n")

            result = await provider.generate(["Say hello"])

            assert result.text == "  Hello Alice!\n"
            assert result.usage == TokenUsage(prompt_tokens=45, completion_tokens=120, total_tokens=165)
            assert result.provider == "openai"
            assert result.model == "gpt-4o"

    @pytest.mark.asyncio
    async def test_generate_message_layout(self, provider):
        """First part is the system message, the rest are user messages."""
        with patch.object(
            provider.client.chat.completions, "create", new_callable=AsyncMock
        ) as mock_create:
            mock_create.return_value = _completion()

            await provider.generate(["You are an expert.", "Original Prompt (TEXT): hi"])

            call_kwargs = mock_create.call_args[1]
            assert call_kwargs["model"] == "gpt-4o"
            assert call_kwargs["temperature"] == 0.7
            assert call_kwargs["messages"] == [
                {"role": "system", "content": "You are an expert."},
                {"role": "user", "content": "Original Prompt (TEXT): hi"},
            ]

    @pytest.mark.asyncio
    async def test_single_part_is_user_message(self, provider):
        with patch.object(
            provider.client.chat.completions, "create", new_callable=AsyncMock
        ) as mock_create:
            mock_create.return_value = _completion()

            await provider.generate(["Execute this prompt"])

            assert mock_create.call_args[1]["messages"] == [
                {"role": "user", "content": "Execute this prompt"}
            ]

    @pytest.mark.asyncio
    async def test_generate_missing_usage_and_content(self, provider):
        with patch.object(
            provider.client.chat.completions, "create", new_callable=AsyncMock
        ) as mock_create:
            mock_create.return_value = _completion(content=None, usage=None)

            result = await provider.generate(["prompt"])

            assert result.text == ""
            assert result.usage is None

    @pytest.mark.asyncio
    async def test_generate_status_error(self, provider):
        """Provider status and message are carried on the error."""
        error = openai.AuthenticationError(
            message="Incorrect API key provided",
            response=httpx.Response(401, request=httpx.Request("POST", CHAT_URL)),
            body=None,
        )
        with patch.object(
            provider.client.chat.completions, "create", new_callable=AsyncMock
        ) as mock_create:
            mock_create.side_effect = error

            with pytest.raises(ProviderError) as exc_info:
                await provider.generate(["prompt"])

        assert exc_info.value.message == "Incorrect API key provided"
        assert exc_info.value.status_code == 401
        assert exc_info.value.provider == ProviderName.OPENAI.value

    @pytest.mark.asyncio
    async def test_generate_failure_is_logged_with_traceback(self, provider, caplog):
        error = openai.RateLimitError(
            message="Rate limited",
            response=httpx.Response(429, request=httpx.Request("POST", CHAT_URL)),
            body=None,
        )
        with patch.object(
            provider.client.chat.completions, "create", new_callable=AsyncMock
        ) as mock_create, caplog.at_level(logging.ERROR, logger="prompt_optimizer_server"):
            mock_create.side_effect = error

            with pytest.raises(ProviderError):
                await provider.generate(["prompt"])

        record = caplog.records[-1]
        assert record.getMessage() == "OpenAI request to gpt-4o failed (429): Rate limited"
        assert record.exc_info is not None

    @pytest.mark.asyncio
    async def test_generate_connection_error(self, provider):
        with patch.object(
            provider.client.chat.completions, "create", new_callable=AsyncMock
        ) as mock_create:
            mock_create.side_effect = openai.APIConnectionError(
                request=httpx.Request("POST", CHAT_URL)
            )

            with pytest.raises(ProviderError) as exc_info:
                await provider.generate(["prompt"])

        assert exc_info.value.status_code == 500
        assert exc_info.value.provider_status is None

    @pytest.mark.asyncio
    async def test_generate_deadline(self):
        provider = OpenAIProvider(api_key="test-key", timeout_seconds=0.01)

        async def _hang(*args, **kwargs):
            await asyncio.sleep(1)

        with patch.object(
            provider.client.chat.completions, "create", new_callable=AsyncMock
        ) as mock_create:
            mock_create.side_effect = _hang

            with pytest.raises(ProviderError, match="timed out") as exc_info:
                await provider.generate(["prompt"])

        assert exc_info.value.status_code == 504

    def test_client_does_not_retry(self, provider):
        assert provider.client.max_retries == 0

    def test_describe(self, provider):
        info = provider.describe()

        assert info.name == ProviderName.OPENAI
        assert info.display_name == "GPT-4o"
