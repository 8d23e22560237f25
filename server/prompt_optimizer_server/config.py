"""Server configuration"""

from pydantic_settings import BaseSettings

from .core.model import ProviderName


class Settings(BaseSettings):
    # Provider credentials (absence fails the request that needs them, not startup)
    google_generative_ai_api_key: str = ""
    openai_api_key: str = ""

    # Provider models
    gemini_model: str = "gemini-2.5-flash-lite"
    openai_model: str = "gpt-4o"
    openai_temperature: float = 0.7

    # Provider used for the execute/compare calls of an evaluation
    evaluation_provider: ProviderName = ProviderName.GEMINI

    # Per-call deadline in seconds; None waits indefinitely
    provider_timeout_seconds: float | None = None

    log_level: str = "INFO"
    cors_allow_origins: list[str] = ["*"]

    class Config:
        env_file = (".env", ".env.local")
        extra = "ignore"

    def credential_for(self, provider: ProviderName) -> str:
        """Return the configured API key for a provider ("" when unset)."""
        if provider == ProviderName.GEMINI:
            return self.google_generative_ai_api_key
        return self.openai_api_key


settings = Settings()


def get_settings() -> Settings:
    """Get the Settings instance (dependency injection for FastAPI)"""
    return settings
