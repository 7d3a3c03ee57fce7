"""Outcome of a single prompt-handling cycle.

Exactly one variant is produced per request and handed to the page renderer.
Every variant knows the text it shows in the response section of the page.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


PLACEHOLDER_TEXT = "Submit a prompt to see the response."
MISSING_PROMPT_TEXT = "Error: Prompt is missing."
FAILURE_TEMPLATE = (
    "Error: Failed to get response from Gemini. Check your API key and server "
    "logs. Details: {message}"
)


class NotRequested(BaseModel):
    """No prompt has been submitted yet."""

    kind: Literal["not_requested"] = "not_requested"

    model_config = ConfigDict(frozen=True, extra="forbid")

    @property
    def display_text(self) -> str:
        return PLACEHOLDER_TEXT


class MissingPrompt(BaseModel):
    """The form was submitted without a prompt."""

    kind: Literal["missing_prompt"] = "missing_prompt"

    model_config = ConfigDict(frozen=True, extra="forbid")

    @property
    def display_text(self) -> str:
        return MISSING_PROMPT_TEXT


class Success(BaseModel):
    """The generation service returned text."""

    kind: Literal["success"] = "success"
    text: str

    model_config = ConfigDict(frozen=True, extra="forbid")

    @property
    def display_text(self) -> str:
        return self.text


class Failure(BaseModel):
    """The generation call raised; ``message`` is the error's text."""

    kind: Literal["failure"] = "failure"
    message: str

    model_config = ConfigDict(frozen=True, extra="forbid")

    @property
    def display_text(self) -> str:
        return FAILURE_TEMPLATE.format(message=self.message)


GenerationOutcome = Annotated[
    NotRequested | MissingPrompt | Success | Failure,
    Field(discriminator="kind"),
]
