"""Dependency injection setup for FastAPI."""
from functools import lru_cache

from .config import settings
from app.services import VideoLookupService, ImageGenerator, FrameExtractor

# Service instances cache
@lru_cache()
def get_video_lookup_service() -> VideoLookupService:
    """Get VideoLookupService instance."""
    return VideoLookupService(settings)

@lru_cache()
def get_image_generator() -> ImageGenerator:
    """Get ImageGenerator service instance."""
    return ImageGenerator(settings)

@lru_cache()
def get_frame_extractor() -> FrameExtractor:
    """Get FrameExtractor service instance."""
    return FrameExtractor(settings)
