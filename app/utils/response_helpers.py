"""Response creation utilities."""
import uuid
from typing import Any, Optional
from fastapi import status
from fastapi.responses import JSONResponse

from ..models.responses import ErrorResponse
from ..core.exceptions import BlogImageBaseException

REQUEST_ID_HEADER = "X-Request-ID"

class ResponseHelper:
    """Utilities for creating standardized API responses."""

    # Map error codes to HTTP status codes
    STATUS_MAPPING = {
        "VALIDATION_ERROR": status.HTTP_400_BAD_REQUEST,
        "METADATA_FETCH_FAILED": status.HTTP_400_BAD_REQUEST,
        "SOURCE_IMAGE_FETCH_FAILED": status.HTTP_400_BAD_REQUEST,
        "PROVIDER_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
        "GENERATION_FAILED": status.HTTP_500_INTERNAL_SERVER_ERROR,
        "FRAME_EXTRACTION_FAILED": status.HTTP_500_INTERNAL_SERVER_ERROR,
        "CONFIGURATION_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
    }

    @staticmethod
    def generate_request_id() -> str:
        """Generate unique request ID."""
        return f"req_{uuid.uuid4().hex[:8]}"

    @staticmethod
    def create_success_response(
        data: Any,
        request_id: Optional[str] = None
    ) -> JSONResponse:
        """Create a success response; the body is the payload itself."""
        if not request_id:
            request_id = ResponseHelper.generate_request_id()

        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content=data,
            headers={REQUEST_ID_HEADER: request_id}
        )

    @staticmethod
    def create_error_response(
        error_code: str,
        message: str,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        request_id: Optional[str] = None,
        details: Optional[dict] = None
    ) -> JSONResponse:
        """Create standardized error response."""
        if not request_id:
            request_id = ResponseHelper.generate_request_id()

        response = ErrorResponse(
            error=message,
            code=error_code,
            request_id=request_id,
            details=details or None
        )
        return JSONResponse(
            status_code=status_code,
            content=response.to_response(exclude_none=True),
            headers={REQUEST_ID_HEADER: request_id}
        )

    @staticmethod
    def create_error_from_exception(
        exc: BlogImageBaseException,
        request_id: Optional[str] = None
    ) -> JSONResponse:
        """Create error response from custom exception."""
        http_status = ResponseHelper.STATUS_MAPPING.get(
            exc.error_code, status.HTTP_500_INTERNAL_SERVER_ERROR
        )

        return ResponseHelper.create_error_response(
            error_code=exc.error_code,
            message=exc.message,
            status_code=http_status,
            request_id=request_id,
            details=exc.details
        )

    @staticmethod
    def create_unexpected_error(
        exc: Exception,
        fallback_message: str,
        request_id: Optional[str] = None
    ) -> JSONResponse:
        """Create a 500 response carrying the error's own message when it has one."""
        return ResponseHelper.create_error_response(
            error_code="INTERNAL_SERVER_ERROR",
            message=str(exc) or fallback_message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            request_id=request_id
        )
