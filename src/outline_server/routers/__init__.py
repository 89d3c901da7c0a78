"""API routers."""

from outline_server.routers.outline import router as outline_router

__all__ = ["outline_router"]
