"""Configuration for the outline HTTP server."""

from __future__ import annotations

import os

MAX_DOCUMENT_SIZE_KB: int = int(os.getenv("MAX_DOCUMENT_SIZE_KB", "2048"))
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000

HOST: str = os.getenv("HOST", DEFAULT_HOST)
PORT: int = int(os.getenv("PORT", str(DEFAULT_PORT)))
RELOAD: bool = os.getenv("RELOAD", "false").lower() in ("1", "true", "yes")
