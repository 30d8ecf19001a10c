"""Tests for the HTTP endpoints with mocked services."""
import pytest
import requests
from unittest.mock import AsyncMock, Mock, patch
from fastapi.testclient import TestClient

from app.main import app
from app.core.config import Settings
from app.core.dependencies import get_video_lookup_service, get_image_generator, get_frame_extractor
from app.core.exceptions import (
    ConfigurationError, GenerationFailedError, ValidationError
)
from app.models.frame import FrameExtractionResult
from app.models.image import GeneratedImage
from app.models.transcript import TranscriptExtractionResult, VideoTranscript
from app.services.frame_extractor import FrameExtractor, FrameToolError
from app.services.video_lookup import VideoLookupService


class TestVideoEndpoint:
    """Tests for POST /api/youtube."""

    @pytest.fixture
    def transcript_service(self):
        service = Mock()
        service.fetch_transcript = AsyncMock(return_value=TranscriptExtractionResult(
            success=True, transcript=VideoTranscript(full_text="x" * 5000)
        ))
        return service

    @pytest.fixture
    def client(self, transcript_service):
        lookup_service = VideoLookupService(Settings(), transcript_service)
        app.dependency_overrides[get_video_lookup_service] = lambda: lookup_service
        yield TestClient(app)
        app.dependency_overrides.clear()

    def test_lookup_end_to_end(self, client):
        """Test the watch URL scenario."""
        oembed = Mock()
        oembed.raise_for_status.return_value = None
        oembed.json.return_value = {"title": "Never Gonna Give You Up", "author_name": "Rick Astley"}

        with patch('app.services.video_lookup.requests.get', return_value=oembed):
            response = client.post("/api/youtube", json={"url": "https://www.youtube.com/watch?v=dQw4w9WgXcQ"})

        assert response.status_code == 200
        data = response.json()
        assert data["videoId"] == "dQw4w9WgXcQ"
        assert data["thumbnailUrl"].endswith("dQw4w9WgXcQ/maxresdefault.jpg")
        assert data["author"] == "Rick Astley"
        assert len(data["transcript"]) <= 5000
        assert response.headers["X-Request-ID"].startswith("req_")

    def test_lookup_metadata_failure(self, client):
        """Test that an oEmbed failure is a 400."""
        with patch('app.services.video_lookup.requests.get', side_effect=requests.HTTPError("404 Not Found")):
            response = client.post("/api/youtube", json={"url": "dQw4w9WgXcQ"})

        assert response.status_code == 400
        assert response.json()["error"] == "Failed to fetch video metadata"

    def test_transcript_failure_still_succeeds(self, client, transcript_service):
        transcript_service.fetch_transcript.return_value = TranscriptExtractionResult(success=False)
        oembed = Mock()
        oembed.json.return_value = {"title": "t", "author_name": "a"}

        with patch('app.services.video_lookup.requests.get', return_value=oembed):
            response = client.post("/api/youtube", json={"url": "https://youtu.be/dQw4w9WgXcQ"})

        assert response.status_code == 200
        assert response.json()["transcript"] == ""

    def test_lookup_unexpected_error(self, client):
        with patch('app.services.video_lookup.requests.get', side_effect=KeyError("boom")):
            response = client.post("/api/youtube", json={"url": "dQw4w9WgXcQ"})

        assert response.status_code == 500
        assert response.json()["error"] == "Failed to fetch video data"


class TestGenerateEndpoints:
    """Tests for POST /api/generate and /api/generate-enhanced."""

    @pytest.fixture
    def generator(self):
        generator = Mock()
        generator.generate = AsyncMock(return_value=GeneratedImage(
            image_prompt="prompt", image_data="data:image/png;base64,AAAA", width=1200, height=628
        ))
        return generator

    @pytest.fixture
    def client(self, generator):
        app.dependency_overrides[get_image_generator] = lambda: generator
        yield TestClient(app)
        app.dependency_overrides.clear()

    @pytest.mark.parametrize("path", ["/api/generate", "/api/generate-enhanced"])
    def test_generate_success(self, client, generator, path):
        response = client.post(path, json={
            "title": "Topic", "transcript": "words", "style": "vibrant",
            "sourceImage": "data:image/jpeg;base64,AAAA", "mode": "enhance"
        })

        assert response.status_code == 200
        assert response.json() == {
            "imagePrompt": "prompt", "imageData": "data:image/png;base64,AAAA", "width": 1200, "height": 628
        }
        request = generator.generate.call_args.args[0]
        assert request.source_image == "data:image/jpeg;base64,AAAA"
        assert request.mode == "enhance"

    @pytest.mark.parametrize("exc, status", [
        (ConfigurationError("GEMINI_API_KEY"), 500),
        (GenerationFailedError(), 500),
        (ValidationError("Invalid base64 image format"), 400),
    ])
    def test_generate_errors(self, client, generator, exc, status):
        generator.generate.side_effect = exc

        response = client.post("/api/generate", json={"title": "Topic"})

        assert response.status_code == status
        assert response.json()["error"] == exc.message
        assert "imageData" not in response.json()

    def test_generate_unexpected_error_uses_message(self, client, generator):
        generator.generate.side_effect = RuntimeError("disk full")

        response = client.post("/api/generate", json={"title": "Topic"})

        assert response.status_code == 500
        assert response.json()["error"] == "disk full"


class TestFrameEndpoint:
    """Tests for POST /api/frame."""

    @pytest.fixture
    def extractor(self, tmp_path):
        return FrameExtractor(Settings(), temp_dir=str(tmp_path))

    @pytest.fixture
    def client(self, extractor):
        app.dependency_overrides[get_frame_extractor] = lambda: extractor
        yield TestClient(app)
        app.dependency_overrides.clear()

    def test_tool_failure_returns_thumbnail(self, client, extractor, tmp_path):
        primary = extractor.chain.primary
        with patch.object(primary, 'resolve_media_url', AsyncMock(side_effect=FrameToolError("no yt-dlp"))):
            response = client.post("/api/frame", json={"videoId": "dQw4w9WgXcQ", "timestamp": "2:00"})

        assert response.status_code == 200
        data = response.json()
        assert data["frameData"] == "https://img.youtube.com/vi/dQw4w9WgXcQ/maxresdefault.jpg"
        assert "note" in data
        assert list(tmp_path.iterdir()) == []

    def test_unexpected_failure_is_500(self, client, extractor):
        primary = extractor.chain.primary
        with patch.object(primary, 'resolve_media_url', AsyncMock(return_value="https://media.example/v")), \
             patch.object(primary, 'extract_frame', AsyncMock(return_value=None)):
            response = client.post("/api/frame", json={"videoId": "dQw4w9WgXcQ"})

        assert response.status_code == 500
        assert response.json()["error"] == "Failed to extract frame"

    def test_frame_success(self, client, extractor):
        with patch.object(extractor.chain, 'produce', AsyncMock(return_value=FrameExtractionResult(
            frame_data="data:image/jpeg;base64,AAAA"
        ))):
            response = client.post("/api/frame", json={"videoId": "dQw4w9WgXcQ"})

        assert response.json() == {"frameData": "data:image/jpeg;base64,AAAA"}
