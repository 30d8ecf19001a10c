"""Response models for the Blog Header Image Service."""
from typing import Any, Dict, Optional
from .base import CamelModel

class ErrorResponse(CamelModel):
    """Standard error response."""
    error: str
    code: str
    request_id: Optional[str] = None
    details: Optional[Dict[str, Any]] = None

class DependencyStatus(CamelModel):
    """Service dependency status."""
    gemini: str
    yt_dlp: str
    ffmpeg: str

class HealthData(CamelModel):
    """Complete health check response."""
    status: str
    timestamp: str
    version: str
    dependencies: DependencyStatus
