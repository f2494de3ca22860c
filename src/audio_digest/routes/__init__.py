"""API routers."""

from .process import router as process_router
from .upload import router as upload_router

__all__ = ["process_router", "upload_router"]
