"""LLM provider protocol and data models."""

import asyncio
from dataclasses import dataclass
from typing import Any, Awaitable, Optional, Protocol, Sequence, TypeVar

from ..model import CamelModel, ProviderName

T = TypeVar("T")


class TokenUsage(CamelModel):
    """Token accounting for a single generation call, normalized across providers.

    Fields the provider did not report stay None.
    """

    prompt_tokens: Optional[int] = None
    completion_tokens: Optional[int] = None
    total_tokens: Optional[int] = None

    @classmethod
    def from_counts(
        cls,
        prompt_tokens: Any = None,
        completion_tokens: Any = None,
        total_tokens: Any = None,
    ) -> Optional["TokenUsage"]:
        """Build usage from raw provider counts; None when nothing was reported."""
        counts = {
            "prompt_tokens": _as_count(prompt_tokens),
            "completion_tokens": _as_count(completion_tokens),
            "total_tokens": _as_count(total_tokens),
        }
        if all(value is None for value in counts.values()):
            return None
        return cls(**counts)


def _as_count(value: Any) -> Optional[int]:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return None
    return value


@dataclass
class GenerationResult:
    """Result from a single generation request."""

    text: str  # raw, untrimmed model output
    usage: Optional[TokenUsage]
    provider: str
    model: str


@dataclass
class ProviderInfo:
    """Information about a configured provider."""

    name: ProviderName
    display_name: str  # "Gemini", "GPT-4o"
    model: str


class LLMProvider(Protocol):
    """Protocol for LLM providers."""

    async def generate(self, prompt_parts: Sequence[str]) -> GenerationResult:
        """Send the prompt parts as one generation request.

        Args:
            prompt_parts: One or more text segments (e.g., an instruction and a user message)

        Returns:
            GenerationResult with raw text and normalized usage

        Raises:
            ProviderError: If the provider rejects or fails the call
        """
        ...

    def describe(self) -> ProviderInfo:
        """Describe the provider and the model it calls."""
        ...


async def with_deadline(call: Awaitable[T], timeout_seconds: Optional[float]) -> T:
    """Await a provider call, bounded by a deadline when one is configured.

    Raises:
        asyncio.TimeoutError: If the deadline expires
    """
    if timeout_seconds is None:
        return await call
    return await asyncio.wait_for(call, timeout=timeout_seconds)
