"""Video lookup service: oEmbed metadata plus best-effort transcript."""
import asyncio
from datetime import datetime
from typing import Optional

import requests

from app.core.config import Settings, YouTubeConfig, settings as default_settings
from app.core.exceptions import MetadataFetchError, BlogImageBaseException
from app.models.video import VideoMetadata
from app.services.transcript_service import TranscriptService
from app.utils.validators import URLValidator
from app.utils.logging import CorrelatedLogger, MetricsLogger


class VideoLookupService:
    """Service resolving a YouTube URL into title, author and transcript."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transcript_service: Optional[TranscriptService] = None
    ):
        self.settings = settings or default_settings
        self.transcript_service = transcript_service or TranscriptService(self.settings)
        self.logger = CorrelatedLogger(__name__)
        self.metrics = MetricsLogger()

    async def lookup(self, url: Optional[str], request_id: Optional[str] = None) -> VideoMetadata:
        """Look up a video by URL or bare ID."""
        start_time = datetime.now()

        self.logger.request_id = request_id

        # Raises before any network call
        video_id = URLValidator.extract_video_id(url)

        try:
            oembed = await self._fetch_oembed(video_id)
        except BlogImageBaseException as e:
            self.metrics.log_lookup_metrics(
                request_id or "", video_id, False, self._elapsed_ms(start_time), error_code=e.error_code
            )
            raise

        transcript_result = await self.transcript_service.fetch_transcript(video_id, request_id)

        metadata = VideoMetadata(
            video_id=video_id,
            title=oembed.get('title') or "",
            author=oembed.get('author_name') or "",
            thumbnail_url=YouTubeConfig.thumbnail_url(video_id),
            transcript=transcript_result.text
        )

        self.metrics.log_lookup_metrics(
            request_id or "", video_id, True, self._elapsed_ms(start_time),
            transcript_chars=len(metadata.transcript)
        )
        return metadata

    async def _fetch_oembed(self, video_id: str) -> dict:
        """Fetch title/author from the oEmbed endpoint."""
        try:
            response = await asyncio.to_thread(
                requests.get,
                YouTubeConfig.OEMBED_URL,
                params=YouTubeConfig.oembed_params(video_id),
                timeout=self.settings.connection_timeout
            )
            response.raise_for_status()
            return response.json()
        except requests.RequestException as e:
            self.logger.warning(f"oEmbed lookup failed for {video_id}: {e}")
            raise MetadataFetchError(video_id, str(e))
        except ValueError as e:
            self.logger.warning(f"oEmbed returned invalid JSON for {video_id}: {e}")
            raise MetadataFetchError(video_id, "invalid JSON response")

    @staticmethod
    def _elapsed_ms(start_time: datetime) -> int:
        return int((datetime.now() - start_time).total_seconds() * 1000)
