from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

from .config import UploadSettings, settings as default_settings
from .models import AudioUpload
from .routes import upload

logger = logging.getLogger(__name__)

DOCS_URL = "/docs"
OPENAPI_URL = "/api-doc/openapi.json"


def _install_openapi(app: FastAPI) -> None:
    """Publish ``AudioUpload`` next to the schemas FastAPI collects itself."""

    def openapi() -> dict:
        if app.openapi_schema:
            return app.openapi_schema
        schema = get_openapi(
            title=app.title,
            version=app.version,
            description=app.description,
            routes=app.routes,
        )
        components = schema.setdefault("components", {}).setdefault("schemas", {})
        components["AudioUpload"] = AudioUpload.model_json_schema()
        app.openapi_schema = schema
        return schema

    app.openapi = openapi


def create_app(settings: UploadSettings | None = None) -> FastAPI:
    """Собрать приложение загрузки с маршрутом ``/upload`` и Swagger UI."""
    settings = settings or default_settings
    app = FastAPI(
        title="Upload Service",
        description="Stores the first file of a multipart form under a local directory.",
        docs_url=DOCS_URL,
        openapi_url=OPENAPI_URL,
        redoc_url=None,
    )
    app.state.settings = settings
    app.include_router(upload.router)
    _install_openapi(app)
    logger.debug("Upload app created, upload_dir=%s", settings.upload_dir)
    return app


app = create_app()
