"""
Configuration management for the Blog Header Image Service.
Centralizes environment variable handling and application settings.
"""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        # API Configuration
        self.api_title = "Blog Header Image Service"
        self.api_description = "Generates blog header images from YouTube videos using Gemini image models"
        self.api_version = "1.0.0"
        self.debug_mode = os.getenv("DEBUG_MODE", "false").lower() == "true"
        self.allowed_origins = [
            origin.strip() for origin in os.getenv("ALLOWED_ORIGINS", "*").split(",") if origin.strip()
        ]

        # External API Keys
        self.gemini_api_key = os.getenv("GEMINI_API_KEY", "")
        self.gemini_image_model = os.getenv("GEMINI_IMAGE_MODEL", "gemini-2.5-flash-image")

        # Image Output
        self.image_width = int(os.getenv("IMAGE_WIDTH", "1200"))
        self.image_height = int(os.getenv("IMAGE_HEIGHT", "628"))
        self.default_image_style = os.getenv("DEFAULT_IMAGE_STYLE", "modern, clean, professional")

        # Transcript / Prompt Context
        self.transcript_max_chars = int(os.getenv("TRANSCRIPT_MAX_CHARS", "5000"))
        self.generate_context_chars = int(os.getenv("GENERATE_CONTEXT_CHARS", "1500"))
        self.enhance_context_chars = int(os.getenv("ENHANCE_CONTEXT_CHARS", "1000"))
        self.transcript_languages = [
            lang.strip() for lang in os.getenv("TRANSCRIPT_LANGUAGES", "en").split(",") if lang.strip()
        ]

        # Frame Extraction
        self.frame_resolve_timeout = int(os.getenv("FRAME_RESOLVE_TIMEOUT", "30"))  # seconds
        self.frame_extract_timeout = int(os.getenv("FRAME_EXTRACT_TIMEOUT", "60"))  # seconds
        self.frame_max_height = int(os.getenv("FRAME_MAX_HEIGHT", "720"))
        self.ffmpeg_binary = os.getenv("FFMPEG_BINARY", "ffmpeg")

        # Logging
        self.log_level = os.getenv("LOG_LEVEL", "INFO")
        self.log_format = os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

        # Performance
        self.connection_timeout = int(os.getenv("CONNECTION_TIMEOUT", "30"))

class YouTubeConfig:
    """URL conventions for the YouTube endpoints the service talks to."""

    WATCH_URL = "https://www.youtube.com/watch?v={video_id}"
    OEMBED_URL = "https://www.youtube.com/oembed"
    THUMBNAIL_URL = "https://img.youtube.com/vi/{video_id}/maxresdefault.jpg"

    @classmethod
    def watch_url(cls, video_id: str) -> str:
        """Canonical watch URL for a video ID."""
        return cls.WATCH_URL.format(video_id=video_id)

    @classmethod
    def thumbnail_url(cls, video_id: str) -> str:
        """Max-resolution thumbnail URL; never checked for existence."""
        return cls.THUMBNAIL_URL.format(video_id=video_id)

    @classmethod
    def oembed_params(cls, video_id: str) -> dict:
        """Query parameters for an oEmbed metadata lookup."""
        return {"url": cls.watch_url(video_id), "format": "json"}

class YTDLPConfig:
    """Configuration for yt-dlp media URL resolution."""

    BASE_OPTIONS = {
        'quiet': True,
        'no_warnings': True,
        'skip_download': True,
        'noplaylist': True,
        'socket_timeout': 30,
    }

    @classmethod
    def get_options(cls, max_height: int = 720, timeout: int = 30) -> dict:
        """Get yt-dlp options capped at the given video height."""
        options = cls.BASE_OPTIONS.copy()
        options.update({
            'format': f'best[height<={max_height}]',
            'socket_timeout': timeout,
        })
        return options

# Create global settings instance
settings = Settings()
