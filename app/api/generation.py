"""Image generation endpoints.

``/api/generate`` and ``/api/generate-enhanced`` are the same operation:
the request's ``mode`` selects text generation or source-image enhancement.
"""
from fastapi import APIRouter, Depends

from app.models.requests import GenerateImageRequest
from app.services.image_generator import ImageGenerator
from app.core.dependencies import get_image_generator
from app.core.exceptions import BlogImageBaseException
from app.utils.response_helpers import ResponseHelper

router = APIRouter(prefix="/api", tags=["generation"])


@router.post("/generate")
@router.post("/generate-enhanced")
async def generate_image(
    request: GenerateImageRequest,
    generator: ImageGenerator = Depends(get_image_generator)
):
    """Generate a blog header image, optionally from a source image."""
    request_id = ResponseHelper.generate_request_id()

    try:
        image = await generator.generate(request, request_id)
        return ResponseHelper.create_success_response(image.to_response(), request_id)

    except BlogImageBaseException as e:
        return ResponseHelper.create_error_from_exception(e, request_id)
    except Exception as e:
        generator.logger.exception(f"Unexpected error generating image: {e}")
        return ResponseHelper.create_unexpected_error(e, "Failed to generate image", request_id)
