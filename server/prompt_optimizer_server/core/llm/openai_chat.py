"""OpenAI provider implementation."""

import asyncio
import logging
from typing import Any, Optional, Sequence

import openai
from openai import AsyncOpenAI

from ..exceptions import ProviderError
from ..model import ProviderName
from .provider import GenerationResult, ProviderInfo, TokenUsage, with_deadline

logger = logging.getLogger(__name__)


class OpenAIProvider:
    """Provider for OpenAI chat completions."""

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o",
        temperature: float = 0.7,
        timeout_seconds: Optional[float] = None,
    ):
        """Initialize OpenAI provider.

        Args:
            api_key: OpenAI API key
            model: Chat model ID
            temperature: Sampling temperature
            timeout_seconds: Optional per-call deadline
        """
        self.model = model
        self.temperature = temperature
        self.timeout_seconds = timeout_seconds
        # One attempt per call; failures propagate to the caller
        self.client = AsyncOpenAI(api_key=api_key, max_retries=0)

    async def generate(self, prompt_parts: Sequence[str]) -> GenerationResult:
        """Send the prompt parts as one chat completion.

        With several parts, the first is the system message and the rest are
        user messages. A single part is sent as a user message.

        Args:
            prompt_parts: Text segments sent together in one request

        Returns:
            GenerationResult with the raw message content and usage

        Raises:
            ProviderError: If the call fails or times out
        """
        try:
            response = await with_deadline(
                self.client.chat.completions.create(
                    model=self.model,
                    messages=self._build_messages(prompt_parts),
                    temperature=self.temperature,
                ),
                self.timeout_seconds,
            )
        except asyncio.TimeoutError:
            logger.error(f"OpenAI request to {self.model} timed out after {self.timeout_seconds}s")
            raise ProviderError(
                f"OpenAI request timed out after {self.timeout_seconds}s",
                provider=ProviderName.OPENAI.value,
                status_code=504,
            ) from None
        except openai.APIStatusError as e:
            logger.error(
                f"OpenAI request to {self.model} failed ({e.status_code}): {e.message}",
                exc_info=True,
            )
            raise ProviderError(
                e.message,
                provider=ProviderName.OPENAI.value,
                status_code=e.status_code,
            ) from e
        except openai.APIError as e:
            logger.error(f"OpenAI request to {self.model} failed: {e.message}", exc_info=True)
            raise ProviderError(e.message, provider=ProviderName.OPENAI.value) from e

        usage = None
        if response.usage:
            usage = TokenUsage.from_counts(
                prompt_tokens=response.usage.prompt_tokens,
                completion_tokens=response.usage.completion_tokens,
                total_tokens=response.usage.total_tokens,
            )

        content = ""
        if response.choices:
            content = response.choices[0].message.content or ""

        return GenerationResult(
            text=content,
            usage=usage,
            provider=ProviderName.OPENAI.value,
            model=self.model,
        )

    def describe(self) -> ProviderInfo:
        return ProviderInfo(
            name=ProviderName.OPENAI,
            display_name=self._format_model_name(self.model),
            model=self.model,
        )

    @staticmethod
    def _build_messages(prompt_parts: Sequence[str]) -> list[dict[str, Any]]:
        parts = list(prompt_parts)
        if len(parts) == 1:
            return [{"role": "user", "content": parts[0]}]

        messages: list[dict[str, Any]] = [{"role": "system", "content": parts[0]}]
        messages.extend({"role": "user", "content": part} for part in parts[1:])
        return messages

    def _format_model_name(self, model_id: str) -> str:
        """Format model ID into display name."""
        name_map = {
            "gpt-4o": "GPT-4o",
            "gpt-4o-mini": "GPT-4o Mini",
            "gpt-4-turbo": "GPT-4 Turbo",
        }
        return name_map.get(model_id, model_id.upper())
