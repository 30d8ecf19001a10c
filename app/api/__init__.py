"""API module initialization."""
from .video import router as video_router
from .generation import router as generation_router
from .frame import router as frame_router
from .health import router as health_router

__all__ = ["video_router", "generation_router", "frame_router", "health_router"]
