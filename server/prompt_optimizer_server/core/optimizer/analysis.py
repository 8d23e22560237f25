"""Parsing and reconciliation of the scoring model's analysis document."""

import math
import re
from typing import Optional

from pydantic import ValidationError

from ..exceptions import MalformedAnalysisError
from ..llm.provider import TokenUsage
from .types import Analysis, Winner

TOKENS_PARAMETER = "Tokens"

_CODE_FENCE = re.compile(r"```(?:json)?")


def strip_code_fences(text: str) -> str:
    """Remove every ```json / ``` marker and surrounding whitespace."""
    return _CODE_FENCE.sub("", text).strip()


def parse_analysis(text: str) -> Analysis:
    """
    Parse the scoring call's output into a validated Analysis.

    Args:
        text: Raw model output, optionally wrapped in Markdown code fences

    Returns:
        Analysis with every required field present and correctly typed

    Raises:
        MalformedAnalysisError: If the text is not JSON or does not match the schema
    """
    cleaned = strip_code_fences(text)
    if not cleaned:
        raise MalformedAnalysisError("empty response", raw_text=text)

    try:
        return Analysis.model_validate_json(cleaned)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"]) or "document"
        raise MalformedAnalysisError(
            f"{location}: {first['msg']}", raw_text=text
        ) from e


def _token_label(usage: Optional[TokenUsage]) -> str:
    if usage is None or usage.total_tokens is None:
        return "N/A"
    return f"{usage.total_tokens} tokens"


def token_winner(
    original_usage: Optional[TokenUsage],
    optimized_usage: Optional[TokenUsage],
) -> Winner:
    """Lower total token count wins; ties go to the original.

    A missing (or zero) original count is treated as infinite and a missing
    (or zero) optimized count as zero, so missing data never penalizes the
    optimized prompt.
    """
    original_total = original_usage.total_tokens if original_usage else None
    optimized_total = optimized_usage.total_tokens if optimized_usage else None

    original_count = original_total or math.inf
    optimized_count = optimized_total or 0
    return "Optimized" if original_count > optimized_count else "Original"


def reconcile_token_metric(
    analysis: Analysis,
    original_usage: Optional[TokenUsage],
    optimized_usage: Optional[TokenUsage],
) -> Analysis:
    """
    Replace the model's Tokens row with figures from actual API usage.

    The row is left untouched when neither execute call reported usage or when
    the analysis has no Tokens row.

    Args:
        analysis: Validated analysis from the scoring call
        original_usage: Usage of the call that executed the original prompt
        optimized_usage: Usage of the call that executed the optimized prompt

    Returns:
        A new Analysis; the input is not modified
    """
    if original_usage is None and optimized_usage is None:
        return analysis

    metrics = list(analysis.metrics)
    for index, row in enumerate(metrics):
        if row.parameter != TOKENS_PARAMETER:
            continue
        metrics[index] = row.model_copy(
            update={
                "original": _token_label(original_usage),
                "optimized": _token_label(optimized_usage),
                "winner": token_winner(original_usage, optimized_usage),
            }
        )
        return analysis.model_copy(update={"metrics": metrics})

    return analysis
