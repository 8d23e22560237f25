"""Data models for prompt optimization and evaluation."""

from typing import Literal, Optional

from pydantic import ConfigDict, Field

from ..llm.provider import TokenUsage
from ..model import CamelModel, PromptFormat, ProviderName

Winner = Literal["Original", "Optimized"]


class OptimizationRequest(CamelModel):
    """Request to optimize one prompt with one provider."""

    model_config = ConfigDict(frozen=True)

    prompt: str
    """The raw user prompt."""

    input_format: PromptFormat = PromptFormat.TEXT
    """Format the prompt is written in."""

    output_format: PromptFormat = PromptFormat.TEXT
    """Format the optimized prompt must be returned in."""

    provider: ProviderName
    """Provider that performs the rewrite."""


class OptimizationResult(CamelModel):
    """Result of a single optimization."""

    optimized_prompt: str
    """The rewritten prompt, trimmed."""

    usage: Optional[TokenUsage] = None
    """Token usage reported by the provider, if any."""


class ProviderOutcome(CamelModel):
    """Per-provider outcome of a batch optimization: a result or an error."""

    optimized_prompt: Optional[str] = None
    usage: Optional[TokenUsage] = None
    error: Optional[str] = None


class EvaluationRequest(CamelModel):
    """Request to compare an original prompt with its optimized rewrite."""

    model_config = ConfigDict(frozen=True)

    original_prompt: str
    optimized_prompt: str


class MetricRow(CamelModel):
    """One row of the comparison table."""

    model_config = ConfigDict(strict=True)

    parameter: str
    original: str
    optimized: str
    winner: Winner


class Benchmark(CamelModel):
    """Scored comparison produced by the scoring model."""

    model_config = ConfigDict(strict=True)

    original_score: int = Field(ge=0, le=100)
    optimized_score: int = Field(ge=0, le=100)
    winner: Winner
    reason: str
    format_analysis: str


class Analysis(CamelModel):
    """The scoring model's JSON document: metrics table, benchmark and summary."""

    model_config = ConfigDict(strict=True)

    metrics: list[MetricRow] = Field(min_length=1)
    benchmark: Benchmark
    summary: str


class EvaluationUsage(CamelModel):
    """Raw usage of the three evaluation calls."""

    original: Optional[TokenUsage] = None
    optimized: Optional[TokenUsage] = None
    analysis: Optional[TokenUsage] = None


class EvaluationResult(CamelModel):
    """Combined result of an evaluation."""

    original_response: str
    """Sample response produced by executing the original prompt."""

    optimized_response: str
    """Sample response produced by executing the optimized prompt."""

    analysis: Analysis
    """Validated comparison, with the Tokens row reconciled against real usage."""

    usage: EvaluationUsage
