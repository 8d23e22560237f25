"""Evaluate orchestration: execute both prompts and score them side by side."""

import asyncio
import logging

from ..llm.registry import ProviderRegistry
from ..model import ProviderName
from .analysis import parse_analysis, reconcile_token_metric
from .prompts import comparison_prompt, execution_prompt
from .types import EvaluationRequest, EvaluationResult, EvaluationUsage

logger = logging.getLogger(__name__)


class PromptEvaluator:
    """Compares an original prompt with its optimized rewrite."""

    def __init__(
        self,
        registry: ProviderRegistry,
        provider_name: ProviderName = ProviderName.GEMINI,
    ):
        """
        Initialize prompt evaluator.

        Args:
            registry: Registry used to look up the scoring provider
            provider_name: Provider for the execute and compare calls (default: Gemini)
        """
        self.registry = registry
        self.provider_name = provider_name

    async def evaluate(self, request: EvaluationRequest) -> EvaluationResult:
        """
        Evaluate an (original, optimized) prompt pair.

        Process:
        1. Look up the scoring provider (fails fast when its credential is missing)
        2. Run three calls concurrently: execute original, execute optimized, compare
        3. Parse the compare output against the analysis schema
        4. Rewrite the Tokens row from the execute calls' real usage
        5. Return responses, analysis and raw usage

        Args:
            request: The prompt pair

        Returns:
            Evaluation result

        Raises:
            ConfigurationError: If the scoring provider's credential is not configured
            ProviderError: If any of the three calls fails
            MalformedAnalysisError: If the compare output is not a valid analysis
        """
        provider = self.registry.get(self.provider_name)

        logger.info(
            f"Evaluation request: provider={self.provider_name.value} "
            f"original_length={len(request.original_prompt)} "
            f"optimized_length={len(request.optimized_prompt)}"
        )

        # All three run concurrently; the first failure fails the evaluation
        original_run, optimized_run, comparison = await asyncio.gather(
            provider.generate([execution_prompt(request.original_prompt)]),
            provider.generate([execution_prompt(request.optimized_prompt)]),
            provider.generate(
                [comparison_prompt(request.original_prompt, request.optimized_prompt)]
            ),
        )

        logger.debug(
            f"Evaluation calls completed: original_usage={original_run.usage} "
            f"optimized_usage={optimized_run.usage} analysis_usage={comparison.usage}"
        )

        analysis = parse_analysis(comparison.text)
        analysis = reconcile_token_metric(analysis, original_run.usage, optimized_run.usage)

        return EvaluationResult(
            original_response=original_run.text,
            optimized_response=optimized_run.text,
            analysis=analysis,
            usage=EvaluationUsage(
                original=original_run.usage,
                optimized=optimized_run.usage,
                analysis=comparison.usage,
            ),
        )
