"""Logging configuration and utilities."""
import logging
import sys
from contextvars import ContextVar
from typing import Optional
from ..core.config import settings

class LoggerSetup:
    """Centralized logging configuration."""

    @staticmethod
    def setup_logging(
        level: Optional[str] = None,
        format_string: Optional[str] = None
    ) -> None:
        """Setup application logging."""
        log_level = level or settings.log_level
        log_format = format_string or settings.log_format

        # Configure root logger
        logging.basicConfig(
            level=getattr(logging, log_level.upper(), logging.INFO),
            format=log_format,
            handlers=[
                logging.StreamHandler(sys.stdout)
            ]
        )

        # Set specific logger levels
        logging.getLogger("uvicorn").setLevel(logging.INFO)
        logging.getLogger("fastapi").setLevel(logging.INFO)
        logging.getLogger("yt_dlp").setLevel(logging.WARNING)
        logging.getLogger("google_genai").setLevel(logging.WARNING)
        logging.getLogger("httpx").setLevel(logging.WARNING)
        logging.getLogger("urllib3").setLevel(logging.WARNING)

_request_id: ContextVar[Optional[str]] = ContextVar("request_id", default=None)

class CorrelatedLogger:
    """Logger with correlation ID support for request tracking.

    The request ID lives in a context variable, so service singletons shared
    across concurrent requests each log with their own request's ID.
    """

    def __init__(self, name: str, request_id: Optional[str] = None):
        self.logger = logging.getLogger(name)
        if request_id:
            self.request_id = request_id

    @property
    def request_id(self) -> Optional[str]:
        return _request_id.get()

    @request_id.setter
    def request_id(self, value: Optional[str]) -> None:
        _request_id.set(value)

    def _format_message(self, message: str) -> str:
        """Format message with request ID if available."""
        if self.request_id:
            return f"[{self.request_id}] {message}"
        return message

    def debug(self, message: str, **kwargs) -> None:
        """Log debug message with correlation ID."""
        self.logger.debug(self._format_message(message), **kwargs)

    def info(self, message: str, **kwargs) -> None:
        """Log info message with correlation ID."""
        self.logger.info(self._format_message(message), **kwargs)

    def warning(self, message: str, **kwargs) -> None:
        """Log warning message with correlation ID."""
        self.logger.warning(self._format_message(message), **kwargs)

    def error(self, message: str, **kwargs) -> None:
        """Log error message with correlation ID."""
        self.logger.error(self._format_message(message), **kwargs)

    def exception(self, message: str, **kwargs) -> None:
        """Log exception message with correlation ID."""
        self.logger.exception(self._format_message(message), **kwargs)

class MetricsLogger:
    """Logger for per-operation metrics lines."""

    def __init__(self):
        self.logger = logging.getLogger("metrics")

    def log_lookup_metrics(
        self,
        request_id: str,
        video_id: str,
        success: bool,
        processing_time_ms: int,
        transcript_chars: int = 0,
        error_code: Optional[str] = None
    ) -> None:
        """Log video lookup metrics."""
        status = "success" if success else "failed"

        log_msg = (
            f"LOOKUP_METRICS request_id={request_id} "
            f"video_id={video_id} status={status} "
            f"processing_time_ms={processing_time_ms} transcript_chars={transcript_chars}"
        )

        if error_code:
            log_msg += f" error_code={error_code}"

        self.logger.info(log_msg)

    def log_generation_metrics(
        self,
        request_id: str,
        mode: str,
        model: str,
        success: bool,
        processing_time_ms: int,
        error_code: Optional[str] = None
    ) -> None:
        """Log image generation metrics."""
        status = "success" if success else "failed"

        log_msg = (
            f"GENERATION_METRICS request_id={request_id} "
            f"mode={mode} model={model} status={status} "
            f"processing_time_ms={processing_time_ms}"
        )

        if error_code:
            log_msg += f" error_code={error_code}"

        self.logger.info(log_msg)

    def log_frame_metrics(
        self,
        request_id: str,
        video_id: str,
        seconds: float,
        fallback_used: bool,
        processing_time_ms: int
    ) -> None:
        """Log frame extraction metrics."""
        source = "thumbnail" if fallback_used else "frame"

        self.logger.info(
            f"FRAME_METRICS request_id={request_id} "
            f"video_id={video_id} seconds={seconds} source={source} "
            f"processing_time_ms={processing_time_ms}"
        )
