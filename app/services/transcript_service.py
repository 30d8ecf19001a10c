"""Transcript retrieval service backed by youtube-transcript-api."""
import asyncio
from datetime import datetime
from typing import List, Optional

from youtube_transcript_api import YouTubeTranscriptApi, NoTranscriptFound, CouldNotRetrieveTranscript

from app.core.config import Settings, settings as default_settings
from app.models.transcript import TranscriptSegment, VideoTranscript, TranscriptExtractionResult
from app.utils.logging import CorrelatedLogger


class TranscriptService:
    """Service for fetching and flattening YouTube caption transcripts."""

    def __init__(self, settings: Optional[Settings] = None, transcript_api: Optional[YouTubeTranscriptApi] = None):
        self.settings = settings or default_settings
        self.logger = CorrelatedLogger(__name__)
        self._transcript_api = transcript_api or YouTubeTranscriptApi()

    async def fetch_transcript(
        self,
        video_id: str,
        request_id: Optional[str] = None
    ) -> TranscriptExtractionResult:
        """
        Fetch the transcript for a video.

        Failures never propagate: a video without usable captions yields an
        unsuccessful result whose ``text`` is an empty string.

        Args:
            video_id: Canonical YouTube video identifier
            request_id: Request correlation ID for logging

        Returns:
            TranscriptExtractionResult with the joined, truncated transcript
        """
        start_time = datetime.now()

        self.logger.request_id = request_id

        try:
            fetched = await asyncio.to_thread(self._fetch_captions, video_id)
        except Exception as e:
            self.logger.info(f"Transcript not available for {video_id}: {type(e).__name__}: {e}")
            return TranscriptExtractionResult(
                success=False,
                error_message=f"Transcript not available: {e}"
            )

        segments = [
            TranscriptSegment(
                text=snippet.get('text', ''),
                start=float(snippet.get('start', 0.0)),
                duration=float(snippet.get('duration', 0.0))
            )
            for snippet in fetched.to_raw_data()
        ]
        transcript = self.build_transcript(segments, getattr(fetched, 'language_code', None))

        processing_time = int((datetime.now() - start_time).total_seconds() * 1000)
        self.logger.info(
            f"Fetched transcript for {video_id} in {processing_time}ms "
            f"({len(segments)} segments, {len(transcript.full_text)} chars, truncated={transcript.truncated})"
        )

        return TranscriptExtractionResult(success=True, transcript=transcript)

    def build_transcript(self, segments: List[TranscriptSegment], language: Optional[str] = None) -> VideoTranscript:
        """Join caption fragments with single spaces and clip to the character limit."""
        full_text = " ".join(segment.text for segment in segments)
        limit = self.settings.transcript_max_chars

        return VideoTranscript(
            full_text=full_text[:limit],
            segments=segments,
            language=language,
            truncated=len(full_text) > limit
        )

    def _fetch_captions(self, video_id: str):
        """Fetch captions in a preferred language, else whatever the video offers."""
        try:
            return self._transcript_api.fetch(video_id, languages=self.settings.transcript_languages)
        except NoTranscriptFound:
            self.logger.debug(
                f"No transcript in {self.settings.transcript_languages} for {video_id}, trying any language"
            )

        for transcript in self._transcript_api.list(video_id):
            return transcript.fetch()

        raise CouldNotRetrieveTranscript(video_id)
