"""Input parsing and validation utilities."""
import math
import re
from typing import Optional, Union
from app.core.exceptions import ValidationError

class URLValidator:
    """YouTube URL validation utilities."""

    # Order matters: URL shapes first, then a bare ID spanning the whole input.
    VIDEO_ID_PATTERNS = [
        re.compile(r'(?:youtube\.com/watch\?v=|youtu\.be/|youtube\.com/embed/)([^&\n?#]+)'),
        re.compile(r'^([a-zA-Z0-9_-]{11})$'),
    ]

    @classmethod
    def find_video_id(cls, url: str) -> Optional[str]:
        """Return the video ID in a watch/share/embed URL or bare ID, if any."""
        if not url:
            return None

        for pattern in cls.VIDEO_ID_PATTERNS:
            match = pattern.search(url)
            if match:
                return match.group(1)
        return None

    @classmethod
    def extract_video_id(cls, url: Optional[str]) -> str:
        """Extract the video ID from a YouTube URL or raise ValidationError."""
        if not url or not url.strip():
            raise ValidationError("URL is required")

        video_id = cls.find_video_id(url.strip())
        if not video_id:
            raise ValidationError("Invalid YouTube URL", {"url": url})
        return video_id

    @staticmethod
    def require_video_id(video_id: Optional[str]) -> str:
        """Ensure a video ID was supplied."""
        if not video_id or not video_id.strip():
            raise ValidationError("Video ID is required")
        return video_id.strip()

def _timestamp_component(part: str) -> float:
    """Numeric value of one timestamp component; an empty component counts as 0."""
    part = part.strip()
    if not part:
        return 0.0
    value = float(part)
    if not math.isfinite(value):
        raise ValueError(f"non-finite timestamp component: {part}")
    return value

def parse_timestamp(timestamp: Optional[str]) -> Union[int, float]:
    """Convert "MM:SS" or "HH:MM:SS" to seconds.

    Components may be fractional ("0:05.5" is 5.5) and an empty component is 0
    ("1:" is 60). Any other shape, including non-numeric parts, yields 0.
    Component values are not range checked. Integral results are returned as int.
    """
    if not timestamp:
        return 0

    parts = timestamp.strip().split(":")
    try:
        values = [_timestamp_component(part) for part in parts]
    except ValueError:
        return 0

    if len(values) == 2:
        minutes, seconds = values
        total = minutes * 60 + seconds
    elif len(values) == 3:
        hours, minutes, seconds = values
        total = hours * 3600 + minutes * 60 + seconds
    else:
        return 0
    return int(total) if total.is_integer() else total
