"""Data models for the Blog Header Image Service."""
from .base import CamelModel
from .requests import VideoLookupRequest, GenerateImageRequest, FrameRequest
from .video import VideoMetadata
from .transcript import TranscriptSegment, VideoTranscript, TranscriptExtractionResult
from .image import GenerationMode, DecodedImage, GeneratedImage
from .frame import FrameExtractionResult
from .responses import ErrorResponse, DependencyStatus, HealthData

__all__ = [
    "CamelModel",
    "VideoLookupRequest", "GenerateImageRequest", "FrameRequest",
    "VideoMetadata",
    "TranscriptSegment", "VideoTranscript", "TranscriptExtractionResult",
    "GenerationMode", "DecodedImage", "GeneratedImage",
    "FrameExtractionResult",
    "ErrorResponse", "DependencyStatus", "HealthData",
]
