"""Custom exceptions for the Blog Header Image Service."""
from typing import Optional

class BlogImageBaseException(Exception):
    """Base exception for the blog header image service."""

    def __init__(self, message: str, error_code: str, details: Optional[dict] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)

class ValidationError(BlogImageBaseException):
    """Exception raised for input validation errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message, "VALIDATION_ERROR", details)

class UpstreamError(BlogImageBaseException):
    """Base for failures reported by an external service."""

class MetadataFetchError(UpstreamError):
    """Exception raised when the oEmbed metadata lookup fails."""

    def __init__(self, video_id: str, reason: str = "oEmbed request failed"):
        message = "Failed to fetch video metadata"
        details = {"video_id": video_id, "reason": reason}
        super().__init__(message, "METADATA_FETCH_FAILED", details)

class SourceImageFetchError(UpstreamError):
    """Exception raised when a remote source image cannot be downloaded."""

    def __init__(self, url: str, reason: str = "Source image could not be fetched"):
        message = f"Failed to fetch source image: {reason}"
        details = {"url": url, "reason": reason}
        super().__init__(message, "SOURCE_IMAGE_FETCH_FAILED", details)

class ProviderError(UpstreamError):
    """Exception raised when the image generation provider call fails."""

    def __init__(self, provider: str, reason: str):
        message = reason
        details = {"provider": provider, "reason": reason}
        super().__init__(message, "PROVIDER_ERROR", details)

class GenerationFailedError(BlogImageBaseException):
    """Exception raised when the provider response carries no image."""

    def __init__(self, reason: str = "no image data in response"):
        message = f"Failed to generate image - {reason}"
        details = {"reason": reason}
        super().__init__(message, "GENERATION_FAILED", details)

class FrameExtractionError(BlogImageBaseException):
    """Exception raised when frame extraction fails unexpectedly."""

    def __init__(self, video_id: str, reason: str = "Failed to extract frame"):
        message = reason
        details = {"video_id": video_id, "reason": reason}
        super().__init__(message, "FRAME_EXTRACTION_FAILED", details)

class ConfigurationError(BlogImageBaseException):
    """Exception raised for configuration errors."""

    def __init__(self, setting: str, reason: str = "not configured"):
        message = f"{setting} {reason}"
        details = {"setting": setting, "reason": reason}
        super().__init__(message, "CONFIGURATION_ERROR", details)
