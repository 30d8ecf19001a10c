"""Single-frame extraction using yt-dlp and ffmpeg, with a thumbnail fallback."""
import asyncio
import contextlib
import os
import tempfile
import time
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

import yt_dlp

from app.core.config import Settings, YouTubeConfig, YTDLPConfig, settings as default_settings
from app.core.exceptions import FrameExtractionError
from app.models.frame import FrameExtractionResult
from app.utils.data_uri import build_data_uri
from app.utils.validators import URLValidator, parse_timestamp
from app.utils.logging import CorrelatedLogger, MetricsLogger

FALLBACK_NOTE = "Frame extraction requires yt-dlp and ffmpeg. Using thumbnail as fallback."


class FrameToolError(Exception):
    """An external media tool failed; the caller should fall back."""


@dataclass
class FrameJob:
    """Per-request frame extraction parameters and scratch paths."""
    video_id: str
    seconds: float
    video_path: str
    frame_path: str

    @classmethod
    def create(cls, video_id: str, seconds: float, temp_dir: Optional[str] = None) -> "FrameJob":
        temp_dir = temp_dir or tempfile.gettempdir()
        stamp = int(time.time() * 1000)
        return cls(
            video_id=video_id,
            seconds=seconds,
            video_path=os.path.join(temp_dir, f"video-{stamp}.mp4"),
            frame_path=os.path.join(temp_dir, f"frame-{stamp}.jpg"),
        )

    def cleanup(self) -> None:
        """Remove scratch files; errors are ignored."""
        for path in (self.video_path, self.frame_path):
            with contextlib.suppress(OSError):
                if os.path.exists(path):
                    os.remove(path)


class MediaFrameProducer:
    """Grabs the exact frame: yt-dlp resolves a media URL, ffmpeg decodes one frame."""

    def __init__(self, settings: Settings, logger: CorrelatedLogger):
        self.settings = settings
        self.logger = logger

    async def produce(self, job: FrameJob) -> FrameExtractionResult:
        """Extract the frame as a JPEG data URI.

        Raises:
            FrameToolError: resolution or extraction failed
            FrameExtractionError: the tools reported success but no frame was written
        """
        direct_url = await self.resolve_media_url(job.video_id)
        await self.extract_frame(direct_url, job.seconds, job.frame_path)

        if not os.path.exists(job.frame_path):
            raise FrameExtractionError(job.video_id, "Failed to extract frame")

        with open(job.frame_path, "rb") as f:
            frame_bytes = f.read()

        return FrameExtractionResult(success=True, frame_data=build_data_uri("image/jpeg", frame_bytes))

    async def resolve_media_url(self, video_id: str) -> str:
        """Resolve a direct playable URL, capped at the configured height."""
        timeout = self.settings.frame_resolve_timeout
        try:
            info = await asyncio.wait_for(
                asyncio.to_thread(self._extract_info, YouTubeConfig.watch_url(video_id)),
                timeout=timeout
            )
        except asyncio.TimeoutError:
            raise FrameToolError(f"yt-dlp timed out after {timeout}s")
        except yt_dlp.DownloadError as e:
            raise FrameToolError(f"yt-dlp failed: {e}")
        except Exception as e:
            raise FrameToolError(f"yt-dlp error: {type(e).__name__}: {e}")

        direct_url = (info or {}).get('url')
        if not direct_url:
            # Merged formats expose their streams separately
            formats = (info or {}).get('requested_formats') or []
            direct_url = formats[0].get('url') if formats else None

        if not direct_url:
            raise FrameToolError("yt-dlp returned no media URL")
        return direct_url

    def _extract_info(self, url: str) -> dict:
        options = YTDLPConfig.get_options(
            max_height=self.settings.frame_max_height,
            timeout=self.settings.frame_resolve_timeout
        )
        with yt_dlp.YoutubeDL(options) as ydl:
            return ydl.extract_info(url, download=False)

    async def extract_frame(self, media_url: str, seconds: float, frame_path: str) -> None:
        """Run ffmpeg to write exactly one frame at the given offset."""
        timeout = self.settings.frame_extract_timeout
        try:
            process = await asyncio.create_subprocess_exec(
                self.settings.ffmpeg_binary,
                "-ss", str(seconds),
                "-i", media_url,
                "-vframes", "1",
                "-q:v", "2",
                "-y",
                frame_path,
                stdout=asyncio.subprocess.DEVNULL,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise FrameToolError(f"ffmpeg could not be started: {e}")

        try:
            _, stderr = await asyncio.wait_for(process.communicate(), timeout=timeout)
        except asyncio.TimeoutError:
            with contextlib.suppress(ProcessLookupError):
                process.kill()
            await process.wait()
            raise FrameToolError(f"ffmpeg timed out after {timeout}s")

        if process.returncode != 0:
            tail = (stderr or b"").decode(errors="replace").strip().splitlines()[-1:]
            raise FrameToolError(f"ffmpeg exited with {process.returncode}: {' '.join(tail)}")


class ThumbnailFallbackProducer:
    """Returns the static thumbnail URL for the video."""

    async def produce(self, job: FrameJob) -> FrameExtractionResult:
        return FrameExtractionResult(
            success=False,
            frame_data=YouTubeConfig.thumbnail_url(job.video_id),
            note=FALLBACK_NOTE
        )


class FallbackChain:
    """Runs the primary producer and switches to the fallback on FrameToolError."""

    def __init__(self, primary, fallback, logger: CorrelatedLogger):
        self.primary = primary
        self.fallback = fallback
        self.logger = logger

    async def produce(self, job: FrameJob) -> FrameExtractionResult:
        try:
            return await self.primary.produce(job)
        except FrameToolError as e:
            self.logger.warning(f"Frame extraction failed for {job.video_id}, using fallback: {e}")
            return await self.fallback.produce(job)


class FrameExtractor:
    """Service extracting a still frame from a YouTube video."""

    def __init__(self, settings: Optional[Settings] = None, temp_dir: Optional[str] = None):
        self.settings = settings or default_settings
        self.temp_dir = temp_dir
        self.logger = CorrelatedLogger(__name__)
        self.metrics = MetricsLogger()
        self.chain = FallbackChain(
            MediaFrameProducer(self.settings, self.logger),
            ThumbnailFallbackProducer(),
            self.logger
        )

    async def extract(
        self,
        video_id: Optional[str],
        timestamp: Optional[str] = None,
        request_id: Optional[str] = None
    ) -> FrameExtractionResult:
        """Extract the frame at ``timestamp`` (default "0:00")."""
        self.logger.request_id = request_id

        video_id = URLValidator.require_video_id(video_id)
        seconds = parse_timestamp(timestamp or "0:00")
        job = FrameJob.create(video_id, seconds, self.temp_dir)
        start_time = datetime.now()

        try:
            result = await self.chain.produce(job)
        finally:
            job.cleanup()

        self.metrics.log_frame_metrics(
            request_id or "", video_id, seconds,
            fallback_used=not result.success,
            processing_time_ms=int((datetime.now() - start_time).total_seconds() * 1000)
        )
        return result
