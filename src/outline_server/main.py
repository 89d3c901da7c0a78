"""FastAPI application for the outline API."""

from __future__ import annotations

from fastapi import FastAPI

from axaml_outline.utils.logging_config import get_logger
from outline_server.routers import outline_router

logger = get_logger(__name__)

app = FastAPI(
    title="axaml-outline",
    description="Hierarchical outlines of Avalonia XAML documents.",
)
app.include_router(outline_router)


@app.get("/health")
async def health() -> dict[str, str]:
    """Liveness check."""
    return {"status": "ok"}
