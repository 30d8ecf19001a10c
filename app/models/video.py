"""Video-related data models."""
from pydantic import Field
from .base import CamelModel

class VideoMetadata(CamelModel):
    """Video details returned by a lookup."""
    video_id: str
    title: str = ""
    author: str = ""
    thumbnail_url: str
    transcript: str = Field("", description="Caption text, empty when unavailable")
