"""Header image generation service using Gemini image models."""
import asyncio
import base64
from datetime import datetime
from typing import List, Optional, Tuple

import aiohttp
from google import genai
from google.genai import types

from ..core.config import Settings, settings as default_settings
from ..core.exceptions import (
    BlogImageBaseException, ConfigurationError, GenerationFailedError,
    ProviderError, SourceImageFetchError, ValidationError
)
from ..models.image import DecodedImage, GeneratedImage, GenerationMode
from ..models.requests import GenerateImageRequest
from ..config.templates import PromptTemplateEngine, get_template_engine
from ..utils.data_uri import build_data_uri, is_data_uri, parse_data_uri
from ..utils.logging import CorrelatedLogger, MetricsLogger

PROMPT_TYPE = "header_image"
REMOTE_IMAGE_MIME_TYPE = "image/jpeg"
OUTPUT_MIME_TYPE = "image/png"


class ImageGenerator:
    """Service for generating blog header images with Gemini."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client: Optional[genai.Client] = None,
        template_engine: Optional[PromptTemplateEngine] = None
    ):
        self.settings = settings or default_settings
        self.client = client or self._initialize_client()
        self.template_engine = template_engine or get_template_engine()
        self.logger = CorrelatedLogger(__name__)
        self.metrics = MetricsLogger()

    def _initialize_client(self) -> Optional[genai.Client]:
        """Initialize Gemini client if API key is configured."""
        if not self.settings.gemini_api_key:
            return None

        try:
            return genai.Client(api_key=self.settings.gemini_api_key)
        except Exception as e:
            raise ConfigurationError("Gemini client", str(e))

    async def generate(
        self,
        request: GenerateImageRequest,
        request_id: Optional[str] = None
    ) -> GeneratedImage:
        """Generate a header image, or enhance the supplied source image.

        Raises:
            ConfigurationError: GEMINI_API_KEY is not set
            ValidationError: enhance mode without a usable source image
            SourceImageFetchError: the remote source image could not be fetched
            ProviderError: the Gemini call raised
            GenerationFailedError: the response carried no image
        """
        if not self.client:
            raise ConfigurationError("GEMINI_API_KEY")

        self.logger.request_id = request_id

        mode = GenerationMode.from_value(request.mode)
        start_time = datetime.now()

        try:
            parts = await self._build_parts(request, mode)
            prompt_used, image_bytes = await self._invoke_model(parts)
        except BlogImageBaseException as e:
            self.metrics.log_generation_metrics(
                request_id or "", mode.value, self.settings.gemini_image_model,
                False, self._elapsed_ms(start_time), error_code=e.error_code
            )
            raise

        self.metrics.log_generation_metrics(
            request_id or "", mode.value, self.settings.gemini_image_model,
            True, self._elapsed_ms(start_time)
        )

        return GeneratedImage(
            image_prompt=prompt_used or self.template_engine.get_default_label(PROMPT_TYPE, mode.value),
            image_data=build_data_uri(OUTPUT_MIME_TYPE, image_bytes),
            width=self.settings.image_width,
            height=self.settings.image_height
        )

    def build_prompt(self, request: GenerateImageRequest, mode: GenerationMode) -> str:
        """Render the text prompt for the given mode."""
        if mode == GenerationMode.ENHANCE:
            context_chars = self.settings.enhance_context_chars
        else:
            context_chars = self.settings.generate_context_chars

        return self.template_engine.render_prompt(
            PROMPT_TYPE,
            mode.value,
            title=request.title or "",
            context=(request.transcript or "")[:context_chars],
            style=request.style or self.settings.default_image_style,
            width=self.settings.image_width,
            height=self.settings.image_height
        )

    async def _build_parts(self, request: GenerateImageRequest, mode: GenerationMode) -> List[types.Part]:
        """Assemble request parts: [image, prompt] to enhance, [prompt] otherwise."""
        prompt = self.build_prompt(request, mode)

        if mode != GenerationMode.ENHANCE:
            return [types.Part.from_text(text=prompt)]

        if not request.source_image:
            raise ValidationError("sourceImage is required for enhance mode")

        source = await self.load_source_image(request.source_image)
        self.logger.info(f"Enhancing source image ({source.mime_type}, {len(source.data)} bytes)")

        return [
            types.Part.from_bytes(data=source.data, mime_type=source.mime_type),
            types.Part.from_text(text=prompt)
        ]

    async def load_source_image(self, source_image: str) -> DecodedImage:
        """Decode a data URI, or download a URL and assume JPEG."""
        if is_data_uri(source_image):
            return parse_data_uri(source_image)

        return DecodedImage(
            mime_type=REMOTE_IMAGE_MIME_TYPE,
            data=await self._download_image(source_image)
        )

    async def _download_image(self, url: str) -> bytes:
        """Download a remote image."""
        try:
            timeout = aiohttp.ClientTimeout(total=self.settings.connection_timeout)
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(url) as response:
                    if response.status != 200:
                        raise SourceImageFetchError(url, f"HTTP {response.status}")
                    return await response.read()
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            self.logger.warning(f"Error downloading source image from {url}: {e}")
            raise SourceImageFetchError(url, str(e) or type(e).__name__)

    async def _invoke_model(self, parts: List[types.Part]) -> Tuple[Optional[str], bytes]:
        """Call the model and return (first text part, first image bytes)."""
        try:
            response = await asyncio.to_thread(
                self.client.models.generate_content,
                model=self.settings.gemini_image_model,
                contents=[types.Content(role="user", parts=parts)],
                config=types.GenerateContentConfig(response_modalities=["TEXT", "IMAGE"])
            )
        except Exception as e:
            self.logger.error(f"Gemini generate_content failed: {e}")
            raise ProviderError("gemini", str(e) or "Failed to generate image")

        prompt_used, image_bytes = self.extract_output(response)
        if image_bytes is None:
            self.logger.warning("Gemini response contained no image part")
            raise GenerationFailedError()

        return prompt_used, image_bytes

    @staticmethod
    def extract_output(response) -> Tuple[Optional[str], Optional[bytes]]:
        """Pick the first text part and the first inline image part of the first candidate."""
        prompt_used = None
        image_bytes = None

        candidates = getattr(response, "candidates", None) or []
        content = getattr(candidates[0], "content", None) if candidates else None
        for part in getattr(content, "parts", None) or []:
            if prompt_used is None and getattr(part, "text", None):
                prompt_used = part.text

            inline_data = getattr(part, "inline_data", None)
            if image_bytes is None and inline_data is not None and inline_data.data:
                image_bytes = inline_data.data
                if isinstance(image_bytes, str):
                    image_bytes = base64.b64decode(image_bytes)

        return prompt_used, image_bytes

    @staticmethod
    def _elapsed_ms(start_time: datetime) -> int:
        return int((datetime.now() - start_time).total_seconds() * 1000)
