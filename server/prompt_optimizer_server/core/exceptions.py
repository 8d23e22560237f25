"""Exception hierarchy for the optimize and evaluate flows."""

from typing import Optional


class PromptOptimizerError(Exception):
    """Base class for all errors surfaced to API callers."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(PromptOptimizerError):
    """Raised when a provider credential is missing. No call is attempted."""
    pass


class ProviderError(PromptOptimizerError):
    """Raised when an external LLM provider rejects or fails a call."""

    def __init__(
        self,
        message: str,
        provider: str,
        status_code: Optional[int] = None,
    ):
        """
        Args:
            message: Human-readable message, taken from the provider where possible
            provider: Provider that failed (e.g., "gemini", "openai")
            status_code: HTTP status reported by the provider, if any
        """
        super().__init__(message)
        self.provider = provider
        self.provider_status = status_code
        if status_code is not None and 400 <= status_code < 600:
            self.status_code = status_code


class MalformedAnalysisError(PromptOptimizerError):
    """Raised when the scoring call returns text that is not a valid analysis document."""

    def __init__(self, reason: str, raw_text: str = ""):
        super().__init__(f"Malformed analysis from scoring model: {reason}")
        self.reason = reason
        self.raw_text = raw_text
