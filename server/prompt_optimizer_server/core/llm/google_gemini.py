"""Google Gemini provider implementation."""

import asyncio
import logging
from typing import Optional, Sequence

import google.generativeai as genai
from google.api_core import exceptions as google_exceptions

from ..exceptions import ProviderError
from ..model import ProviderName
from .provider import GenerationResult, ProviderInfo, TokenUsage, with_deadline

logger = logging.getLogger(__name__)


class GoogleGeminiProvider:
    """Provider for Google Gemini."""

    def __init__(
        self,
        api_key: str,
        model: str = "gemini-2.5-flash-lite",
        timeout_seconds: Optional[float] = None,
    ):
        """Initialize Google Gemini provider.

        Args:
            api_key: Google Gemini API key
            model: Gemini model ID
            timeout_seconds: Optional per-call deadline
        """
        self.model = model
        self.timeout_seconds = timeout_seconds
        genai.configure(api_key=api_key)

    async def generate(self, prompt_parts: Sequence[str]) -> GenerationResult:
        """Send the prompt parts to Gemini as a single content list.

        Args:
            prompt_parts: Text segments sent together in one request

        Returns:
            GenerationResult with the raw response text and usage metadata

        Raises:
            ProviderError: If the call fails, times out or yields no text
        """
        gemini_model = genai.GenerativeModel(self.model)

        try:
            response = await with_deadline(
                gemini_model.generate_content_async(list(prompt_parts)),
                self.timeout_seconds,
            )
            # .text raises ValueError when the candidate was blocked or empty
            text = response.text
        except asyncio.TimeoutError:
            logger.error(f"Gemini request to {self.model} timed out after {self.timeout_seconds}s")
            raise ProviderError(
                f"Gemini request timed out after {self.timeout_seconds}s",
                provider=ProviderName.GEMINI.value,
                status_code=504,
            ) from None
        except google_exceptions.GoogleAPICallError as e:
            logger.error(f"Gemini request to {self.model} failed ({e.code}): {e.message}", exc_info=True)
            raise ProviderError(
                e.message or str(e),
                provider=ProviderName.GEMINI.value,
                status_code=int(e.code) if e.code is not None else None,
            ) from e
        except Exception as e:
            logger.error(f"Gemini request to {self.model} failed: {e}", exc_info=True)
            raise ProviderError(
                str(e) or "Failed to generate with Gemini",
                provider=ProviderName.GEMINI.value,
            ) from e

        usage = None
        metadata = getattr(response, "usage_metadata", None)
        if metadata:
            usage = TokenUsage.from_counts(
                prompt_tokens=getattr(metadata, "prompt_token_count", None),
                completion_tokens=getattr(metadata, "candidates_token_count", None),
                total_tokens=getattr(metadata, "total_token_count", None),
            )

        return GenerationResult(
            text=text,
            usage=usage,
            provider=ProviderName.GEMINI.value,
            model=self.model,
        )

    def describe(self) -> ProviderInfo:
        return ProviderInfo(
            name=ProviderName.GEMINI,
            display_name=self._format_model_name(self.model),
            model=self.model,
        )

    def _format_model_name(self, model_id: str) -> str:
        """Format model ID into display name."""
        name_map = {
            "gemini-2.5-pro": "Gemini 2.5 Pro",
            "gemini-2.5-flash": "Gemini 2.5 Flash",
            "gemini-2.5-flash-lite": "Gemini 2.5 Flash-Lite",
        }
        return name_map.get(model_id, model_id)
