"""Shared value types for requests, results and provider selection."""

from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys on the wire.

    Python code uses snake_case attribute names; input accepts either form.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PromptFormat(str, Enum):
    """Formats a prompt can be written in or rewritten to."""

    TEXT = "text"
    JSON = "json"
    YAML = "yaml"

    @property
    def label(self) -> str:
        """Upper-case label used inside instructions (e.g., "JSON")."""
        return self.value.upper()


class ProviderName(str, Enum):
    """Closed set of supported LLM providers."""

    GEMINI = "gemini"
    OPENAI = "openai"
