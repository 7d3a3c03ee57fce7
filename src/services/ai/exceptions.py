"""Errors raised by the text generation adapter.

The prompt handler turns any of these (and any SDK exception) into a
``Failure`` outcome. Each error carries a stable ``error_code`` for log
tagging.
"""

from __future__ import annotations

from core.exceptions import DomainError


class TextGenerationError(DomainError):
    """Base class for text generation failures."""

    error_code = "generation_failed"

    def __init__(self, message: str = "Text generation failed") -> None:
        super().__init__(message)
        self.message = message


class GenerationNotConfigured(TextGenerationError):
    error_code = "not_configured"

    def __init__(
        self,
        message: str = "GEMINI_API_KEY is not set; the text generation service "
        "is not configured",
    ) -> None:
        super().__init__(message)


class EmptyGenerationResponse(TextGenerationError):
    error_code = "empty_response"

    def __init__(
        self, message: str = "The text generation service returned no text"
    ) -> None:
        super().__init__(message)


class GenerationTimeout(TextGenerationError):
    error_code = "timeout"

    def __init__(self, timeout_seconds: float) -> None:
        super().__init__(
            "Request to the text generation service timed out after "
            f"{timeout_seconds:g} seconds"
        )
        self.timeout_seconds = timeout_seconds
