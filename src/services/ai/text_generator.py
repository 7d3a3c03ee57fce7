"""Adapter around the Gemini SDK for single-shot text generation.

Usage:
    from services.ai.text_generator import create_text_generator

    generator = create_text_generator(get_settings())
    text = await generator.generate("gemini-2.5-flash", "Hello")

The generator is built once at application start-up and shared by all
requests. It holds no per-request state.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from core.config import Settings
from services.ai.exceptions import EmptyGenerationResponse, GenerationNotConfigured


if TYPE_CHECKING:
    from google import genai

logger = logging.getLogger(__name__)


class TextGenerator(Protocol):
    """Anything that turns a prompt into text for a given model."""

    async def generate(self, model: str, contents: str) -> str: ...


class GeminiTextGenerator:
    """Generate text with the ``google-genai`` async client.

    A generator without a client is valid: every call raises
    ``GenerationNotConfigured`` so a missing key surfaces per request instead
    of at start-up.
    """

    def __init__(self, client: genai.Client | None):
        self._client = client

    @property
    def is_configured(self) -> bool:
        return self._client is not None

    async def aclose(self) -> None:
        """Release the async HTTP session held by the SDK client."""
        if self._client is not None:
            await self._client.aio.aclose()

    async def generate(self, model: str, contents: str) -> str:
        if self._client is None:
            raise GenerationNotConfigured()

        response = await self._client.aio.models.generate_content(
            model=model,
            contents=contents,
        )
        if response.text is None:
            raise EmptyGenerationResponse()
        text: str = response.text
        return text


def _validate_gemini_credentials(settings: Settings) -> bool:
    """Validate that Gemini API key is configured."""
    if not settings.GEMINI_API_KEY:
        logger.warning(
            "GEMINI_API_KEY not configured; generation requests will fail until "
            "it is set"
        )
        return False
    return True


def create_text_generator(settings: Settings) -> GeminiTextGenerator:
    """Build the text generator for the configured provider.

    Never raises for missing credentials.
    """
    if not _validate_gemini_credentials(settings):
        return GeminiTextGenerator(client=None)

    from google import genai

    logger.info(f"Using Gemini text model: {settings.GEMINI_MODEL}")
    return GeminiTextGenerator(client=genai.Client(api_key=settings.GEMINI_API_KEY))
