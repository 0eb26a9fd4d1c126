"""Upload service: a single multipart endpoint that stores files under ``data/``."""
