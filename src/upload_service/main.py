"""Входная точка сервиса загрузки.

Binds the loopback listener from :mod:`upload_service.config` and serves
until the process is terminated.
"""

from __future__ import annotations

import logging
import sys

import uvicorn

from logging_config import setup_logging
from .config import settings
from .server import DOCS_URL, app

logger = logging.getLogger(__name__)


def main() -> None:
    """Запустить сервер загрузки."""
    setup_logging(settings.log_level, None)

    address = f"{settings.host}:{settings.port}"
    print(f"Server running at http://{address}")
    print(f"Docs available at http://{address}{DOCS_URL}")
    logger.info("Starting upload service on %s", address)

    try:
        uvicorn.run(app, host=settings.host, port=settings.port)
    except Exception:
        logger.exception("Не удалось запустить сервер")
        sys.exit(1)


if __name__ == "__main__":
    main()
