"""Service layer modules for the Blog Header Image Service."""
from .transcript_service import TranscriptService
from .video_lookup import VideoLookupService
from .image_generator import ImageGenerator
from .frame_extractor import FrameExtractor

__all__ = [
    "TranscriptService", "VideoLookupService", "ImageGenerator", "FrameExtractor"
]
