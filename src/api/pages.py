from typing import Annotated

from fastapi import APIRouter, Form
from fastapi.responses import HTMLResponse

from dependencies.generation import AppSettings, PromptHandlerDep
from services.page_renderer import render_page


router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def index(settings: AppSettings) -> HTMLResponse:
    """Serve the empty prompt form."""
    return HTMLResponse(render_page(title=settings.APP_NAME))


@router.post("/generate-text", response_class=HTMLResponse)
async def generate_text(
    handler: PromptHandlerDep,
    settings: AppSettings,
    prompt: Annotated[str | None, Form()] = None,
) -> HTMLResponse:
    """Run the submitted prompt through Gemini and render the result.

    Always answers 200; a missing prompt or a failed call is shown on the page.
    """
    outcome = await handler.handle(prompt)
    return HTMLResponse(render_page(outcome, title=settings.APP_NAME))
