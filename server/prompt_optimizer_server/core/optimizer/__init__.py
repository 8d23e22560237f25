"""Prompt optimization and evaluation.

Example usage:
    from prompt_optimizer_server.config import Settings
    from prompt_optimizer_server.core.llm import ProviderRegistry
    from prompt_optimizer_server.core.model import ProviderName
    from prompt_optimizer_server.core.optimizer import (
        EvaluationRequest,
        OptimizationRequest,
        PromptEvaluator,
        PromptOptimizer,
    )

    registry = ProviderRegistry(Settings())

    optimizer = PromptOptimizer(registry)
    result = await optimizer.optimize(
        OptimizationRequest(prompt="write a poem about cats", provider=ProviderName.OPENAI)
    )

    evaluator = PromptEvaluator(registry)
    evaluation = await evaluator.evaluate(
        EvaluationRequest(
            original_prompt="write a poem about cats",
            optimized_prompt=result.optimized_prompt,
        )
    )
    print(evaluation.analysis.benchmark.winner)
"""

from .engine import PromptOptimizer
from .evaluator import PromptEvaluator
from .types import (
    Analysis,
    Benchmark,
    EvaluationRequest,
    EvaluationResult,
    EvaluationUsage,
    MetricRow,
    OptimizationRequest,
    OptimizationResult,
    ProviderOutcome,
)

__all__ = [
    # Orchestrators
    "PromptOptimizer",
    "PromptEvaluator",
    # Types
    "Analysis",
    "Benchmark",
    "EvaluationRequest",
    "EvaluationResult",
    "EvaluationUsage",
    "MetricRow",
    "OptimizationRequest",
    "OptimizationResult",
    "ProviderOutcome",
]
