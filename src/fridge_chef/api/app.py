"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response

from fridge_chef.api.routes import router as api_router
from fridge_chef.app_logging import configure_logging
from fridge_chef.config import describe_key
from fridge_chef.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(title="Fridge Chef", lifespan=lifespan)
    app.state.container = container

    @app.middleware("http")
    async def log_api_requests(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        if request.url.path.startswith("/api/"):
            logger.info("%s %s", request.method, request.url.path)
        return await call_next(request)

    app.include_router(api_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/api/healthcheck")
    async def healthcheck(request: Request) -> dict[str, object]:
        """Report configuration of the hosted model integrations."""
        settings = request.app.state.container.settings
        return {
            "status": "healthy",
            "configuration": {
                "openai": describe_key(settings.openai_api_key),
                "huggingface": describe_key(settings.huggingface_api_key),
            },
            "models": {
                "detection": settings.detection_model,
                "captioning": settings.caption_model,
                "recipes": settings.openai_model,
            },
        }

    return app
