"""Core application modules."""
from .config import settings, Settings, YouTubeConfig, YTDLPConfig

__all__ = ["settings", "Settings", "YouTubeConfig", "YTDLPConfig"]
