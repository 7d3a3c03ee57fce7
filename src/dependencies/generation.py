"""Request dependencies for the prompt routes.

The text generator and settings live on ``app.state``; they are set once in
the application lifespan and only read here.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

from core.config import Settings
from services.ai.prompt_handler import PromptHandler
from services.ai.text_generator import TextGenerator


def get_app_settings(request: Request) -> Settings:
    settings: Settings = request.app.state.settings
    return settings


def get_text_generator(request: Request) -> TextGenerator:
    generator: TextGenerator = request.app.state.text_generator
    return generator


def get_prompt_handler(
    settings: Annotated[Settings, Depends(get_app_settings)],
    generator: Annotated[TextGenerator, Depends(get_text_generator)],
) -> PromptHandler:
    """Build a handler bound to the shared generator for this request."""
    return PromptHandler(
        generator=generator,
        model=settings.GEMINI_MODEL,
        timeout_seconds=settings.GENERATION_TIMEOUT_SECONDS,
    )


AppSettings = Annotated[Settings, Depends(get_app_settings)]
PromptHandlerDep = Annotated[PromptHandler, Depends(get_prompt_handler)]
