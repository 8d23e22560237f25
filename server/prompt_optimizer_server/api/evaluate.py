"""API endpoint for prompt evaluation"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from ..config import Settings, get_settings
from ..core.exceptions import PromptOptimizerError
from ..core.llm.registry import ProviderRegistry, get_provider_registry
from ..core.optimizer import EvaluationRequest, EvaluationResult, PromptEvaluator
from .schemas import ErrorResponse, EvaluatePromptRequest

router = APIRouter(prefix="/api", tags=["evaluate"])

logger = logging.getLogger(__name__)


@router.post(
    "/evaluate",
    response_model=EvaluationResult,
    response_model_exclude_none=True,
    responses={500: {"model": ErrorResponse}},
)
async def evaluate_prompts(
    request: EvaluatePromptRequest,
    registry: ProviderRegistry = Depends(get_provider_registry),
    settings: Settings = Depends(get_settings),
) -> EvaluationResult:
    """
    Execute both prompts and score the optimized one against the original.

    Any failure (configuration, provider, malformed analysis) is reported as 500.
    """
    evaluator = PromptEvaluator(registry, provider_name=settings.evaluation_provider)

    try:
        return await evaluator.evaluate(
            EvaluationRequest(
                original_prompt=request.original_prompt,
                optimized_prompt=request.optimized_prompt,
            )
        )
    except PromptOptimizerError as e:
        logger.error(f"Evaluation failed with {type(e).__name__}: {e.message}")
        raise HTTPException(
            status_code=500,
            detail=f"Failed to evaluate prompts: {e.message}",
        )
