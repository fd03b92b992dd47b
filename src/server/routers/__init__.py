"""API routers."""

from server.routers.mcp import router as mcp_router
from server.routers.validate import router as validate_router

__all__ = ["mcp_router", "validate_router"]
