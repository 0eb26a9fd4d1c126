from __future__ import annotations

import logging
from pathlib import Path


FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str, log_file: Path | None = None) -> int:
    """Configure the root logger for a service process.

    Parameters
    ----------
    level:
        Log level name (e.g., "INFO", "DEBUG"). Unknown names fall back to INFO.
    log_file:
        If provided, records are also appended to this file.

    Returns
    -------
    int
        The numeric level that was applied.
    """
    numeric = getattr(logging, str(level).upper(), logging.INFO)
    if not isinstance(numeric, int):
        numeric = logging.INFO

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=numeric,
        format=FORMAT,
        handlers=handlers,
        force=True,
    )
    return numeric


__all__ = ["FORMAT", "setup_logging"]
