"""Frame extraction data models."""
from typing import Optional
from .base import CamelModel

class FrameExtractionResult(CamelModel):
    """Outcome of a frame extraction attempt.

    ``success`` is False when the thumbnail fallback produced ``frame_data``;
    ``note`` then explains why.
    """
    success: bool = True
    frame_data: str
    note: Optional[str] = None

    def to_response(self, **kwargs) -> dict:
        """Wire shape: ``frameData`` plus ``note`` when set."""
        return self.model_dump(by_alias=True, exclude={"success"}, exclude_none=True)
