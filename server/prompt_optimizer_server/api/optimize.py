"""API endpoints for prompt optimization"""

from fastapi import APIRouter, Depends

from ..core.llm.registry import ProviderRegistry, get_provider_registry
from ..core.model import ProviderName
from ..core.optimizer import OptimizationRequest, OptimizationResult, PromptOptimizer
from .schemas import (
    BatchOptimizeRequest,
    BatchOptimizeResponse,
    ErrorResponse,
    OptimizePromptRequest,
    PromptFormatRequest,
)

router = APIRouter(prefix="/api", tags=["optimize"])

ERROR_RESPONSES = {500: {"model": ErrorResponse}}


@router.post(
    "/optimize",
    response_model=OptimizationResult,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
)
async def optimize_prompt(
    request: OptimizePromptRequest,
    registry: ProviderRegistry = Depends(get_provider_registry),
) -> OptimizationResult:
    """
    Optimize a prompt with the provider named in the body.

    Configuration and provider errors are rendered by the app's exception handlers.
    """
    optimizer = PromptOptimizer(registry)
    return await optimizer.optimize(
        OptimizationRequest(
            prompt=request.prompt,
            input_format=request.input_format,
            output_format=request.output_format,
            provider=request.provider,
        )
    )


@router.post(
    "/optimize/batch",
    response_model=BatchOptimizeResponse,
    response_model_exclude_none=True,
)
async def optimize_prompt_batch(
    request: BatchOptimizeRequest,
    registry: ProviderRegistry = Depends(get_provider_registry),
) -> BatchOptimizeResponse:
    """
    Optimize a prompt with several providers at once.

    Always 200; each provider's entry holds either its result or its error.
    """
    optimizer = PromptOptimizer(registry)
    outcomes = await optimizer.optimize_many(
        request.prompt,
        request.providers,
        input_format=request.input_format,
        output_format=request.output_format,
    )
    return BatchOptimizeResponse(results=outcomes)


@router.post(
    "/optimize/{provider}",
    response_model=OptimizationResult,
    response_model_exclude_none=True,
    responses=ERROR_RESPONSES,
)
async def optimize_prompt_with(
    provider: ProviderName,
    request: PromptFormatRequest,
    registry: ProviderRegistry = Depends(get_provider_registry),
) -> OptimizationResult:
    """Optimize a prompt with the provider named in the path."""
    optimizer = PromptOptimizer(registry)
    return await optimizer.optimize(
        OptimizationRequest(
            prompt=request.prompt,
            input_format=request.input_format,
            output_format=request.output_format,
            provider=provider,
        )
    )
