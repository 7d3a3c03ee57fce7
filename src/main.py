import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from api.router import api_router
from core.config import Settings, get_settings
from core.error_handler import (
    ExceptionNormalizationMiddleware,
    global_exception_handler,
    setup_logging,
)
from core.middleware import CorrelationIdMiddleware
from services.ai.text_generator import TextGenerator, create_text_generator


logger = logging.getLogger(__name__)


def _mount_static(app: FastAPI, static_dir: str | None) -> None:
    if not static_dir:
        return
    path = Path(static_dir)
    if not path.is_dir():
        logger.warning(f"STATIC_DIR '{static_dir}' is not a directory; not mounted")
        return
    app.mount("/static", StaticFiles(directory=path), name="static")


def create_app(
    settings: Settings | None = None,
    text_generator: TextGenerator | None = None,
) -> FastAPI:
    """Build the application.

    ``text_generator`` replaces the Gemini-backed generator when given; the
    generator is otherwise created during start-up from ``settings``.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        owned_generator = None
        if text_generator is None:
            owned_generator = create_text_generator(settings)
            app.state.text_generator = owned_generator
        else:
            app.state.text_generator = text_generator
        logger.info(
            f"Server is running on http://localhost:{settings.PORT} "
            f"(model: {settings.GEMINI_MODEL})"
        )
        try:
            yield
        finally:
            # Injected generators belong to the caller
            if owned_generator is not None:
                await owned_generator.aclose()

    app = FastAPI(
        title=settings.APP_NAME,
        description="Send a prompt to Gemini and read the reply",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(ExceptionNormalizationMiddleware)
    app.add_middleware(CorrelationIdMiddleware)
    app.add_exception_handler(Exception, global_exception_handler)

    app.include_router(api_router)
    _mount_static(app, settings.STATIC_DIR)

    return app


def run() -> None:
    import uvicorn

    setup_logging()
    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
