"""Request models for the Blog Header Image Service.

Required fields are declared optional so that a missing value is reported
by the service layer as a 400 with a readable message.
"""
from typing import Optional
from .base import CamelModel

class VideoLookupRequest(CamelModel):
    """Request model for a video lookup."""
    url: Optional[str] = None

class GenerateImageRequest(CamelModel):
    """Request model for header image generation."""
    title: Optional[str] = ""
    transcript: Optional[str] = None
    style: Optional[str] = None
    source_image: Optional[str] = None
    mode: Optional[str] = None

class FrameRequest(CamelModel):
    """Request model for frame extraction."""
    video_id: Optional[str] = None
    timestamp: Optional[str] = None
