"""Basic tests for the application."""
import pytest
from fastapi.testclient import TestClient

from app.main import app

@pytest.fixture
def client():
    """Test client fixture."""
    return TestClient(app)

def test_root_serves_form(client):
    """Test that the root endpoint serves the single-page form."""
    response = client.get("/")
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "/api/youtube" in response.text
    assert "/api/generate" in response.text

def test_health_endpoint(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert set(data["dependencies"]) == {"gemini", "ytDlp", "ffmpeg"}

def test_malformed_body_is_bad_request(client):
    """Test that an unparseable JSON body is a 400, not a 422."""
    response = client.post(
        "/api/youtube",
        content="{not json",
        headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 400
    assert response.json()["code"] == "VALIDATION_ERROR"

def test_lookup_without_url(client):
    """Test missing URL."""
    response = client.post("/api/youtube", json={})
    assert response.status_code == 400
    assert response.json()["error"] == "URL is required"

def test_lookup_with_invalid_url(client):
    """Test that an invalid URL is rejected before any lookup."""
    response = client.post("/api/youtube", json={"url": "https://example.com/watch"})
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid YouTube URL"

def test_frame_without_video_id(client):
    """Test missing video ID."""
    response = client.post("/api/frame", json={"timestamp": "1:00"})
    assert response.status_code == 400
    assert response.json()["error"] == "Video ID is required"
