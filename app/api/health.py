"""Health check endpoint and the single-page form."""
import shutil
from datetime import datetime, timezone
from pathlib import Path

from yt_dlp.version import __version__ as yt_dlp_version
from fastapi import APIRouter
from fastapi.responses import FileResponse, JSONResponse

from app.core.config import settings
from app.models.responses import HealthData, DependencyStatus

router = APIRouter(tags=["health"])

INDEX_PAGE = Path(__file__).parent.parent / "static" / "index.html"

@router.get("/", include_in_schema=False)
async def root():
    """Serve the header image form."""
    return FileResponse(INDEX_PAGE, media_type="text/html")

@router.get("/health")
async def health_check():
    """
    Health check endpoint with dependency status
    """
    dependencies = DependencyStatus(
        gemini="configured" if settings.gemini_api_key else "not_configured",
        yt_dlp=yt_dlp_version,
        ffmpeg="available" if shutil.which(settings.ffmpeg_binary) else "missing"
    )

    health_data = HealthData(
        status="healthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
        version=settings.api_version,
        dependencies=dependencies
    )

    return JSONResponse(
        status_code=200,
        content=health_data.to_response()
    )
