"""
Google AI client wrapper.

Provides a single-turn text generation interface over Google AI (Gemini)
generative models. The model is treated as a plain text-completion oracle;
structure is extracted from its output by the response parser.
"""

import asyncio
from typing import Optional

from google import genai
from google.genai import types

from app.config import get_settings
from app.utils.exceptions import ConfigurationError, GenerationError
from app.utils.logging import get_logger

logger = get_logger(__name__)

# Global client instance
_client: Optional[genai.Client] = None


def get_genai_client() -> genai.Client:
    """Get or create the global Google AI client."""
    global _client
    if _client is None:
        settings = get_settings()
        if not settings.GOOGLE_AI_API_KEY:
            raise ConfigurationError(
                config_key="GOOGLE_AI_API_KEY",
                message="API key is not set",
            )
        _client = genai.Client(api_key=settings.GOOGLE_AI_API_KEY)
    return _client


class GeminiClient:
    """
    Client wrapper for Google AI (Gemini) generative models.

    Handles model configuration and exposes a single async
    ``generate_content`` call.
    """

    def __init__(
        self,
        model_name: Optional[str] = None,
        temperature: Optional[float] = None,
        max_output_tokens: Optional[int] = None,
    ):
        """
        Initialize the Google AI client.

        Args:
            model_name: Model to use (defaults to GEMINI_MODEL)
            temperature: Generation temperature (defaults to GEMINI_TEMPERATURE)
            max_output_tokens: Maximum tokens in response (defaults to GEMINI_MAX_OUTPUT_TOKENS)
        """
        settings = get_settings()

        self.model_name = model_name or settings.GEMINI_MODEL
        self.temperature = (
            temperature if temperature is not None else settings.GEMINI_TEMPERATURE
        )
        self.max_output_tokens = max_output_tokens or settings.GEMINI_MAX_OUTPUT_TOKENS

        self.generation_config = types.GenerateContentConfig(
            temperature=self.temperature,
            max_output_tokens=self.max_output_tokens,
        )

    async def generate_content(self, prompt: str) -> str:
        """
        Generate content from a prompt (single turn).

        Args:
            prompt: The input prompt

        Returns:
            Generated text response

        Raises:
            GenerationError: If the call fails or the response has no text
        """
        client = get_genai_client()

        try:
            response = await asyncio.to_thread(
                client.models.generate_content,
                model=self.model_name,
                contents=prompt,
                config=self.generation_config,
            )
        except Exception as e:
            logger.error(
                "google_ai_generation_error",
                model=self.model_name,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise GenerationError(str(e), model_name=self.model_name) from e

        if not response.text:
            logger.error("google_ai_empty_response", model=self.model_name)
            raise GenerationError("No text in response", model_name=self.model_name)

        logger.debug(
            "google_ai_generation_complete",
            model=self.model_name,
            response_chars=len(response.text),
        )
        return response.text
