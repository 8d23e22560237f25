"""API request/response schemas"""

from typing import List

from pydantic import Field, field_validator

from ..core.model import CamelModel, PromptFormat, ProviderName
from ..core.optimizer.types import ProviderOutcome


class PromptFormatRequest(CamelModel):
    """Prompt plus formats; the provider comes from the URL path."""

    prompt: str
    input_format: PromptFormat = PromptFormat.TEXT
    output_format: PromptFormat = PromptFormat.TEXT

    @field_validator("prompt")
    @classmethod
    def prompt_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("prompt cannot be empty")
        return value


class OptimizePromptRequest(PromptFormatRequest):
    provider: ProviderName


class BatchOptimizeRequest(PromptFormatRequest):
    providers: List[ProviderName] = Field(
        min_length=1, description="Providers to optimize with; each runs concurrently"
    )


class BatchOptimizeResponse(CamelModel):
    results: dict[ProviderName, ProviderOutcome]


class EvaluatePromptRequest(CamelModel):
    original_prompt: str
    optimized_prompt: str

    @field_validator("original_prompt", "optimized_prompt")
    @classmethod
    def prompt_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("prompt cannot be empty")
        return value


class ProviderStatus(CamelModel):
    name: ProviderName
    display_name: str
    model: str
    configured: bool


class HealthResponse(CamelModel):
    status: str
    providers: List[ProviderStatus]
    evaluation_provider: ProviderName


class ErrorResponse(CamelModel):
    error: str
