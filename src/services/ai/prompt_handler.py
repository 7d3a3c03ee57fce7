"""Turn one submitted prompt into a generation outcome.

The handler validates the prompt, makes at most one call to the text
generator and maps the result onto a ``GenerationOutcome``. Generation errors
never escape: they become ``Failure`` outcomes and are logged.
"""

from __future__ import annotations

import asyncio

from core.error_handler import StructuredLogger
from schemas.generation import (
    Failure,
    GenerationOutcome,
    MissingPrompt,
    Success,
)
from services.ai.exceptions import GenerationTimeout, TextGenerationError
from services.ai.text_generator import TextGenerator


logger = StructuredLogger(__name__)


class PromptHandler:
    """Validate a prompt and call the text generator once.

    Args:
        generator: The shared text generator.
        model: Model identifier passed to every call.
        timeout_seconds: Upper bound on a single call. Expiry is a failure.
    """

    def __init__(
        self,
        generator: TextGenerator,
        model: str,
        timeout_seconds: float,
    ) -> None:
        self._generator = generator
        self._model = model
        self._timeout_seconds = timeout_seconds

    async def handle(self, prompt: str | None) -> GenerationOutcome:
        if not prompt:
            logger.info("Prompt missing from form submission")
            return MissingPrompt()

        logger.info("Calling text generation", model=self._model, chars=len(prompt))
        try:
            text = await self._generate(prompt)
        except Exception as exc:  # noqa: BLE001
            error_code = getattr(exc, "error_code", "sdk_error")
            logger.exception(
                "Error calling Gemini API",
                model=self._model,
                error_code=error_code,
                exception_type=exc.__class__.__name__,
            )
            return Failure(message=_error_message(exc))

        logger.info("Text generation succeeded", model=self._model, chars=len(text))
        return Success(text=text)

    async def _generate(self, prompt: str) -> str:
        deadline = asyncio.timeout(self._timeout_seconds)
        try:
            async with deadline:
                return await self._generator.generate(self._model, prompt)
        except TimeoutError as exc:
            if deadline.expired():
                raise GenerationTimeout(self._timeout_seconds) from exc
            raise


def _error_message(exc: Exception) -> str:
    """Human-readable message for an error raised during generation."""
    if isinstance(exc, TextGenerationError):
        return exc.message
    return str(exc) or exc.__class__.__name__
