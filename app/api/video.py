"""Video lookup endpoint."""
from fastapi import APIRouter, Depends

from app.models.requests import VideoLookupRequest
from app.services.video_lookup import VideoLookupService
from app.core.dependencies import get_video_lookup_service
from app.core.exceptions import BlogImageBaseException
from app.utils.response_helpers import ResponseHelper

router = APIRouter(prefix="/api", tags=["video"])


@router.post("/youtube")
async def lookup_video(
    request: VideoLookupRequest,
    lookup_service: VideoLookupService = Depends(get_video_lookup_service)
):
    """Fetch title, author, thumbnail URL and transcript for a YouTube video."""
    request_id = ResponseHelper.generate_request_id()

    try:
        metadata = await lookup_service.lookup(request.url, request_id)
        return ResponseHelper.create_success_response(metadata.to_response(), request_id)

    except BlogImageBaseException as e:
        return ResponseHelper.create_error_from_exception(e, request_id)
    except Exception as e:
        lookup_service.logger.exception(f"Unexpected error looking up video: {e}")
        return ResponseHelper.create_error_response(
            error_code="INTERNAL_SERVER_ERROR",
            message="Failed to fetch video data",
            status_code=500,
            request_id=request_id
        )
