"""Optimize orchestration: one prompt rewrite per provider."""

import asyncio
import logging
from typing import Iterable

from ..exceptions import PromptOptimizerError
from ..llm.registry import ProviderRegistry
from ..model import PromptFormat, ProviderName
from .prompts import optimization_instruction, optimization_user_message
from .types import OptimizationRequest, OptimizationResult, ProviderOutcome

logger = logging.getLogger(__name__)


class PromptOptimizer:
    """Rewrites prompts through the selected provider."""

    def __init__(self, registry: ProviderRegistry):
        """
        Initialize prompt optimizer.

        Args:
            registry: Registry used to look up the provider for each request
        """
        self.registry = registry

    async def optimize(self, request: OptimizationRequest) -> OptimizationResult:
        """
        Optimize a prompt with the provider named in the request.

        Process:
        1. Look up the provider (fails fast when its credential is missing)
        2. Build the format-aware instruction
        3. Call the provider once
        4. Trim the returned text

        Args:
            request: Prompt, formats and provider

        Returns:
            Optimization result with trimmed text and provider usage

        Raises:
            ConfigurationError: If the provider's credential is not configured
            ProviderError: If the provider call fails
        """
        logger.info(
            f"Optimization request: provider={request.provider.value} "
            f"has_key={self.registry.is_configured(request.provider)} "
            f"key_length={self.registry.credential_length(request.provider)} "
            f"prompt_length={len(request.prompt)} "
            f"input_format={request.input_format.value} "
            f"output_format={request.output_format.value}"
        )

        provider = self.registry.get(request.provider)

        generation = await provider.generate(
            [
                optimization_instruction(request.input_format, request.output_format),
                optimization_user_message(
                    request.prompt, request.input_format, request.output_format
                ),
            ]
        )

        return OptimizationResult(
            optimized_prompt=generation.text.strip(),
            usage=generation.usage,
        )

    async def optimize_many(
        self,
        prompt: str,
        providers: Iterable[ProviderName],
        input_format: PromptFormat = PromptFormat.TEXT,
        output_format: PromptFormat = PromptFormat.TEXT,
    ) -> dict[ProviderName, ProviderOutcome]:
        """
        Optimize one prompt with several providers concurrently.

        Each provider succeeds or fails on its own; a failure is reported as
        that provider's error message and does not affect the others.

        Args:
            prompt: The raw user prompt
            providers: Providers to run (duplicates are ignored)
            input_format: Format the prompt is written in
            output_format: Format to rewrite into

        Returns:
            Mapping of provider to its outcome, in request order
        """
        selected = list(dict.fromkeys(providers))
        requests = [
            OptimizationRequest(
                prompt=prompt,
                input_format=input_format,
                output_format=output_format,
                provider=provider_name,
            )
            for provider_name in selected
        ]

        results = await asyncio.gather(
            *(self.optimize(request) for request in requests),
            return_exceptions=True,
        )

        outcomes: dict[ProviderName, ProviderOutcome] = {}
        for provider_name, result in zip(selected, results):
            if isinstance(result, PromptOptimizerError):
                logger.warning(
                    f"Provider {provider_name.value} failed during batch optimization: {result.message}"
                )
                outcomes[provider_name] = ProviderOutcome(error=result.message)
            elif isinstance(result, BaseException):
                raise result
            else:
                outcomes[provider_name] = ProviderOutcome(
                    optimized_prompt=result.optimized_prompt,
                    usage=result.usage,
                )

        return outcomes
