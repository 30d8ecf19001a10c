"""Frame extraction endpoint."""
from fastapi import APIRouter, Depends

from app.models.requests import FrameRequest
from app.services.frame_extractor import FrameExtractor
from app.core.dependencies import get_frame_extractor
from app.core.exceptions import BlogImageBaseException
from app.utils.response_helpers import ResponseHelper

router = APIRouter(prefix="/api", tags=["frame"])


@router.post("/frame")
async def extract_frame(
    request: FrameRequest,
    extractor: FrameExtractor = Depends(get_frame_extractor)
):
    """Extract a still frame at a timestamp, falling back to the thumbnail.

    Tool failures are not errors: the response then carries the thumbnail URL
    and a ``note``.
    """
    request_id = ResponseHelper.generate_request_id()

    try:
        result = await extractor.extract(request.video_id, request.timestamp, request_id)
        return ResponseHelper.create_success_response(result.to_response(), request_id)

    except BlogImageBaseException as e:
        return ResponseHelper.create_error_from_exception(e, request_id)
    except Exception as e:
        extractor.logger.exception(f"Error extracting frame: {e}")
        return ResponseHelper.create_unexpected_error(e, "Failed to extract frame", request_id)
