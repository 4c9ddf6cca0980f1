"""API module."""

from .run import router as run_router
from .tutor import router as tutor_router

__all__ = ["run_router", "tutor_router"]
