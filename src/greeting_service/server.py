from __future__ import annotations

import logging

from fastapi import FastAPI

from .config import GreetingSettings, settings as default_settings
from .routes import greeting

logger = logging.getLogger(__name__)

DOCS_URL = "/swagger-ui"
OPENAPI_URL = "/api-docs/openapi.json"


def create_app(settings: GreetingSettings | None = None) -> FastAPI:
    """Build the greeting app with ``/hello``, ``/mveng`` and Swagger UI."""
    settings = settings or default_settings
    app = FastAPI(
        title="Mveng Greeting Service",
        description="Static greetings from Mveng, your African storyteller.",
        docs_url=DOCS_URL,
        openapi_url=OPENAPI_URL,
        redoc_url=None,
    )
    app.state.settings = settings
    app.include_router(greeting.router)
    logger.debug("Greeting app created with docs at %s", DOCS_URL)
    return app


app = create_app()
