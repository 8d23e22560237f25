"""Core business logic"""

from .exceptions import (
    PromptOptimizerError,
    ConfigurationError,
    ProviderError,
    MalformedAnalysisError,
)
from .model import CamelModel, PromptFormat, ProviderName

__all__ = [
    "PromptOptimizerError",
    "ConfigurationError",
    "ProviderError",
    "MalformedAnalysisError",
    "CamelModel",
    "PromptFormat",
    "ProviderName",
]
