from __future__ import annotations

import logging
import os
from pathlib import PurePosixPath, PureWindowsPath

logger = logging.getLogger(__name__)


class InvalidFilename(ValueError):
    """Client supplied a filename with no usable final component."""


def safe_filename(name: str) -> str:
    """Reduce a client filename to its last path component.

    Both ``/`` and ``\\`` are treated as separators so that ``../../x`` and
    ``..\\..\\x`` end up as ``x``. Raises :class:`InvalidFilename` when nothing
    usable is left.
    """
    base = PureWindowsPath(PurePosixPath(name).name).name
    if base in {"", ".", ".."}:
        raise InvalidFilename(f"Invalid filename: {name!r}")
    return base


def save_upload(directory: str, filename: str, content: bytes) -> str:
    """Записать ``content`` в ``<directory>/<filename>`` и вернуть путь.

    The directory is created on demand and an existing file with the same
    name is overwritten. The returned path is the plain ``/`` join of both
    parts, e.g. ``./data/a.txt``.
    """
    os.makedirs(directory, exist_ok=True)
    filepath = f"{directory.rstrip('/')}/{filename}"
    with open(filepath, "wb") as fh:
        fh.write(content)
    logger.debug("Wrote %d bytes to %s", len(content), filepath)
    return filepath


__all__ = ["InvalidFilename", "safe_filename", "save_upload"]
