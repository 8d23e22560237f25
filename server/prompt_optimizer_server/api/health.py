"""Health check API routes"""

from fastapi import APIRouter, Depends

from ..config import Settings, get_settings
from ..core.llm.registry import ProviderRegistry, get_provider_registry
from .schemas import HealthResponse, ProviderStatus

router = APIRouter(prefix="/api", tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    registry: ProviderRegistry = Depends(get_provider_registry),
    settings: Settings = Depends(get_settings),
) -> HealthResponse:
    """Health check endpoint.

    Reports which providers have credentials configured. Never calls a provider.
    """
    providers = [
        ProviderStatus(
            name=info.name,
            display_name=info.display_name,
            model=info.model,
            configured=configured,
        )
        for info, configured in registry.describe()
    ]

    return HealthResponse(
        status="healthy",
        providers=providers,
        evaluation_provider=settings.evaluation_provider,
    )
