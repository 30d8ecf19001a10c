"""Unit tests for custom exceptions."""
from app.core.exceptions import (
    BlogImageBaseException, ValidationError, MetadataFetchError, UpstreamError,
    ProviderError, GenerationFailedError, ConfigurationError, FrameExtractionError
)
from app.utils.response_helpers import ResponseHelper

class TestCustomExceptions:
    """Test custom exception classes."""

    def test_base_exception(self):
        """Test base exception functionality."""
        exc = BlogImageBaseException("Test message", "TEST_ERROR", {"key": "value"})

        assert str(exc) == "Test message"
        assert exc.error_code == "TEST_ERROR"
        assert exc.details == {"key": "value"}

    def test_validation_error(self):
        exc = ValidationError("Invalid YouTube URL", {"url": "x"})

        assert exc.error_code == "VALIDATION_ERROR"
        assert exc.details == {"url": "x"}

    def test_upstream_errors(self):
        metadata_error = MetadataFetchError("dQw4w9WgXcQ", "404")
        provider_error = ProviderError("gemini", "quota exceeded")

        assert isinstance(metadata_error, UpstreamError)
        assert isinstance(provider_error, UpstreamError)
        assert metadata_error.message == "Failed to fetch video metadata"
        assert provider_error.message == "quota exceeded"

    def test_generation_failed_error(self):
        exc = GenerationFailedError()
        assert exc.message == "Failed to generate image - no image data in response"

    def test_configuration_error(self):
        exc = ConfigurationError("GEMINI_API_KEY")
        assert exc.message == "GEMINI_API_KEY not configured"

class TestErrorStatusMapping:
    """Test error code to HTTP status mapping."""

    def test_status_codes(self):
        cases = [
            (ValidationError("bad"), 400),
            (MetadataFetchError("id"), 400),
            (ProviderError("gemini", "boom"), 500),
            (GenerationFailedError(), 500),
            (ConfigurationError("GEMINI_API_KEY"), 500),
            (FrameExtractionError("id"), 500),
            (BlogImageBaseException("x", "SOMETHING_ELSE"), 500),
        ]

        for exc, expected_status in cases:
            response = ResponseHelper.create_error_from_exception(exc, "req_test")
            assert response.status_code == expected_status
            assert response.headers["X-Request-ID"] == "req_test"
