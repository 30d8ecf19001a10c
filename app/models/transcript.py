"""Transcript-related data models."""
from typing import Optional, List
from pydantic import BaseModel, Field


class TranscriptSegment(BaseModel):
    """Individual caption fragment with timing information."""
    text: str = Field(..., description="Fragment text content")
    start: float = Field(0.0, description="Start time in seconds")
    duration: float = Field(0.0, description="Duration in seconds")


class VideoTranscript(BaseModel):
    """Concatenated video transcript."""
    full_text: str = Field(..., description="Fragments joined with single spaces, possibly truncated")
    segments: List[TranscriptSegment] = Field(default=[], description="Caption fragments as returned by the provider")
    language: Optional[str] = Field(None, description="Language code of the fetched captions")
    truncated: bool = Field(False, description="Whether full_text was clipped to the character limit")


class TranscriptExtractionResult(BaseModel):
    """Result of a transcript fetch attempt."""
    success: bool = Field(..., description="Whether a transcript was fetched")
    transcript: Optional[VideoTranscript] = Field(None, description="Fetched transcript if successful")
    error_message: Optional[str] = Field(None, description="Error message if the fetch failed")

    @property
    def text(self) -> str:
        """Transcript text, or an empty string when unavailable."""
        if self.success and self.transcript:
            return self.transcript.full_text
        return ""
